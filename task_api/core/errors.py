"""Error taxonomy for the task API and its JSON error body."""

from typing import Any

from pydantic import BaseModel, Field

from task_api.core.config import constants


class ErrorCode:
    """Error codes for specific error conditions."""

    ERR_TASK_NOT_FOUND = "ERR_TASK_NOT_FOUND"
    ERR_BAD_REQUEST = "ERR_BAD_REQUEST"
    ERR_INVALID_PAYLOAD = "ERR_INVALID_PAYLOAD"
    ERR_STORAGE = "ERR_STORAGE"


class ErrorResponse(BaseModel):
    """JSON error body returned for every failed request."""

    message: str = Field(..., serialization_alias="Message")
    error: bool = Field(default=True, serialization_alias="Error")
    code: str = Field(..., serialization_alias="Code")
    details: list[dict[str, Any]] | None = Field(default=None, serialization_alias="Details")

    def to_content(self) -> dict[str, Any]:
        """Serialize with the public field names, dropping empty details."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TaskApiError(Exception):
    """Base class for errors surfaced to the HTTP caller."""

    status_code: int = constants.HTTP_SERVER_ERROR
    code: str = ErrorCode.ERR_STORAGE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(message=self.message, code=self.code)


class TaskNotFoundError(TaskApiError):
    """No task exists with the requested id."""

    status_code = constants.HTTP_NOT_FOUND
    code = ErrorCode.ERR_TASK_NOT_FOUND

    def __init__(self, task_id: int) -> None:
        super().__init__(constants.MSG_TASK_NOT_FOUND)
        self.task_id = task_id


class BadRequestError(TaskApiError):
    """The request carried no usable task data."""

    status_code = constants.HTTP_BAD_REQUEST
    code = ErrorCode.ERR_BAD_REQUEST


class StorageError(TaskApiError):
    """The underlying SQLite store failed."""

    status_code = constants.HTTP_SERVER_ERROR
    code = ErrorCode.ERR_STORAGE
