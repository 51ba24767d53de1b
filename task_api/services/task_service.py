"""Task service: maps request intents onto task store operations."""

import logging
from datetime import datetime

from dateutil import parser as dateutil_parser

from task_api.core.config import constants
from task_api.core.errors import BadRequestError, TaskNotFoundError
from task_api.core.logging import span
from task_api.core.task_store import TaskStore
from task_api.domain.task import Task, TaskPayload, TaskStatus


logger = logging.getLogger(__name__)


def parse_task_date(raw: str, *, now: datetime | None = None) -> datetime:
    """Parse a date string for searching, falling back to the current date-time.

    Only ISO-8601 values are accepted, so partial input such as "5" or "may"
    is not filled in from today. An unparsable value is not an error: the
    search proceeds with ``now`` (or ``datetime.now()`` when not given) and a
    warning is logged.

    Args:
        raw: Date string supplied by the client (e.g. "2023-11-09")
        now: Fallback value, mainly for tests

    Returns:
        The parsed datetime, or the fallback
    """
    try:
        return dateutil_parser.isoparse(raw)
    except (ValueError, OverflowError):
        fallback = now or datetime.now()
        logger.warning("Unparsable task date, using current time", extra={"raw_date": raw})
        return fallback


async def get_task(*, store: TaskStore, task_id: int) -> Task:
    """Fetch a task by id.

    Raises:
        TaskNotFoundError: If no task has that id
    """
    with span("task_service.get_task"):
        task = await store.get(task_id)
        if task is None:
            logger.info("Task not found", extra={"task_id": task_id})
            raise TaskNotFoundError(task_id)
        return task


async def update_task(*, store: TaskStore, task_id: int, payload: TaskPayload) -> Task:
    """Overwrite every mutable field of an existing task.

    Args:
        store: Task store
        task_id: ID of the task to update
        payload: New title, description, date and status

    Returns:
        The updated task

    Raises:
        TaskNotFoundError: If no task has that id
    """
    with span("task_service.update_task"):
        await get_task(store=store, task_id=task_id)

        task = await store.update(task_id, payload)
        if task is None:
            # Deleted between the lookup and the write
            raise TaskNotFoundError(task_id)

        logger.info("Task updated", extra={"task_id": task_id, "status": task.status})
        return task


async def delete_task(*, store: TaskStore, task_id: int) -> bool:
    """Delete a task.

    Raises:
        TaskNotFoundError: If no task has that id
    """
    with span("task_service.delete_task"):
        await get_task(store=store, task_id=task_id)

        if not await store.delete(task_id):
            raise TaskNotFoundError(task_id)

        logger.info("Task deleted", extra={"task_id": task_id})
        return True


async def list_tasks(*, store: TaskStore) -> list[Task]:
    """Return every task, with stored status normalized to Pending/Completed."""
    with span("task_service.list_tasks"):
        return await store.list_all()


async def search_tasks_by_title(*, store: TaskStore, title: str) -> list[Task]:
    with span("task_service.search_tasks_by_title"):
        tasks = await store.find_by_title_contains(title)
        logger.debug(f"Title search matched {len(tasks)} tasks")
        return tasks


async def search_tasks_by_date(*, store: TaskStore, date_task: str, now: datetime | None = None) -> list[Task]:
    """Return tasks whose date equals the parsed value (current time if unparsable)."""
    with span("task_service.search_tasks_by_date"):
        date = parse_task_date(date_task, now=now)
        return await store.find_by_date_equals(date)


async def search_tasks_by_status(*, store: TaskStore, status_task: str | int | TaskStatus) -> list[Task]:
    """Return tasks in the given status.

    Raises:
        BadRequestError: If the status is neither 0/Pending nor 1/Completed
    """
    with span("task_service.search_tasks_by_status"):
        try:
            status = TaskStatus.parse(status_task)
        except ValueError as e:
            raise BadRequestError(str(e)) from e
        return await store.find_by_status(status)


async def register_task(*, store: TaskStore, payload: TaskPayload | None) -> Task:
    """Create a task.

    Raises:
        BadRequestError: If no payload was supplied; nothing is inserted
    """
    with span("task_service.register_task"):
        if payload is None:
            logger.warning("Register called without a task payload")
            raise BadRequestError(constants.MSG_TASK_NULL)

        task = await store.insert(payload)
        logger.info("Task registered", extra={"task_id": task.id})
        return task
