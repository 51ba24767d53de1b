"""Domain models and DTOs."""

from task_api.domain.responses import DeleteResponse, TaskListResponse, TaskResponse
from task_api.domain.task import Task, TaskPayload, TaskStatus


__all__ = [
    "DeleteResponse",
    "Task",
    "TaskListResponse",
    "TaskPayload",
    "TaskResponse",
    "TaskStatus",
]
