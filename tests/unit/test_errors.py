"""Tests for the error taxonomy."""

import pytest

from task_api.core.errors import (
    BadRequestError,
    ErrorCode,
    ErrorResponse,
    StorageError,
    TaskApiError,
    TaskNotFoundError,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("error", "status_code", "code"),
    [
        (TaskNotFoundError(3), 404, ErrorCode.ERR_TASK_NOT_FOUND),
        (BadRequestError("nope"), 400, ErrorCode.ERR_BAD_REQUEST),
        (StorageError("down"), 500, ErrorCode.ERR_STORAGE),
    ],
)
def test_error_status_and_code(error: TaskApiError, status_code: int, code: str) -> None:
    """Test each error maps to its HTTP status and code."""
    assert error.status_code == status_code
    assert error.to_response().code == code


@pytest.mark.unit
def test_not_found_message() -> None:
    error = TaskNotFoundError(3)

    assert error.task_id == 3
    assert error.message == "Task Not Found. Try again later..."


@pytest.mark.unit
def test_error_response_content_uses_public_names() -> None:
    """Test the JSON body keys and that empty details are omitted."""
    body = ErrorResponse(message="Bad", code=ErrorCode.ERR_BAD_REQUEST)

    assert body.to_content() == {"Message": "Bad", "Error": True, "Code": "ERR_BAD_REQUEST"}


@pytest.mark.unit
def test_error_response_content_includes_details() -> None:
    body = ErrorResponse(message="Bad", code=ErrorCode.ERR_INVALID_PAYLOAD, details=[{"msg": "x"}])

    assert body.to_content()["Details"] == [{"msg": "x"}]
