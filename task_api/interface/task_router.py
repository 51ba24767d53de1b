"""Task HTTP endpoints."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Request

from task_api.core.config import constants
from task_api.core.task_store import TaskStore
from task_api.domain.responses import DeleteResponse, TaskListResponse, TaskResponse
from task_api.domain.task import TaskPayload
from task_api.services import task_service


router = APIRouter(prefix="/Task", tags=["Task"])


def get_task_store(request: Request) -> TaskStore:
    """Return the task store opened by the application lifespan."""
    return request.app.state.task_store


StoreDep = Annotated[TaskStore, Depends(get_task_store)]


@router.get("/SearchTaskByID/{id}", response_model=TaskResponse, summary="Search Task by ID")
async def search_task_by_id(id: int, store: StoreDep) -> TaskResponse:  # noqa: A002
    task = await task_service.get_task(store=store, task_id=id)
    return TaskResponse(message=constants.MSG_TASK_FOUND, task=task)


@router.put("/UpdateTask/{id}", response_model=TaskResponse, summary="Update Task by ID")
async def update_task(id: int, payload: TaskPayload, store: StoreDep) -> TaskResponse:  # noqa: A002
    """Overwrite title, description, date and status of an existing task."""
    task = await task_service.update_task(store=store, task_id=id, payload=payload)
    return TaskResponse(message=constants.MSG_TASK_UPDATED, task=task)


@router.delete("/DeleteTask/{id}", response_model=DeleteResponse, summary="Delete Task by ID")
async def delete_task(id: int, store: StoreDep) -> DeleteResponse:  # noqa: A002
    success = await task_service.delete_task(store=store, task_id=id)
    return DeleteResponse(success=success, message=constants.MSG_TASK_DELETED)


@router.get("/SearchAllTasks", response_model=TaskListResponse, summary="Search All Tasks")
async def search_all_tasks(store: StoreDep) -> TaskListResponse:
    tasks = await task_service.list_tasks(store=store)
    return TaskListResponse(message=constants.MSG_TASKS_LISTED, list_tasks=tasks)


@router.get("/SearchTasksByTitle/{title}", response_model=TaskListResponse, summary="Search Tasks by Title")
async def search_tasks_by_title(title: str, store: StoreDep) -> TaskListResponse:
    tasks = await task_service.search_tasks_by_title(store=store, title=title)
    return TaskListResponse(message=constants.MSG_TASKS_SEARCHED, list_tasks=tasks)


@router.get("/SearchTasksByDate/{dateTask}", response_model=TaskListResponse, summary="Search Tasks by Date")
async def search_tasks_by_date(dateTask: str, store: StoreDep) -> TaskListResponse:  # noqa: N803
    """Exact date match; an unparsable date searches for the current date-time."""
    tasks = await task_service.search_tasks_by_date(store=store, date_task=dateTask)
    return TaskListResponse(message=constants.MSG_TASKS_SEARCHED, list_tasks=tasks)


@router.get("/SearchTasksByStatus/{statusTask}", response_model=TaskListResponse, summary="Search Tasks by Status")
async def search_tasks_by_status(statusTask: str, store: StoreDep) -> TaskListResponse:  # noqa: N803
    """Accepts 0, 1, Pending or Completed."""
    tasks = await task_service.search_tasks_by_status(store=store, status_task=statusTask)
    return TaskListResponse(message=constants.MSG_TASKS_SEARCHED, list_tasks=tasks)


@router.post("/RegisterTask", response_model=TaskResponse, summary="Register Task")
async def register_task(store: StoreDep, payload: Annotated[TaskPayload | None, Body()] = None) -> TaskResponse:
    task = await task_service.register_task(store=store, payload=payload)
    return TaskResponse(message=constants.MSG_TASK_REGISTERED, task=task)
