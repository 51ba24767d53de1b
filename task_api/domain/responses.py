"""Response envelopes returned by the task routes."""

from pydantic import BaseModel, ConfigDict, Field

from task_api.domain.task import Task


class TaskResponse(BaseModel):
    """Envelope carrying a single task."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., alias="Message")
    task: Task = Field(..., alias="Task")


class TaskListResponse(BaseModel):
    """Envelope carrying a list of tasks."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., alias="Message")
    list_tasks: list[Task] = Field(default_factory=list, alias="ListTasks")


class DeleteResponse(BaseModel):
    """Envelope confirming a deletion."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(default=True, alias="Success")
    message: str = Field(..., alias="Message")
