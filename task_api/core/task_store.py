"""SQLite-backed task store."""

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

import aiosqlite

from task_api.core.config import constants
from task_api.core.errors import StorageError
from task_api.core.schema import init_db
from task_api.domain.task import Task, TaskPayload, TaskStatus


logger = logging.getLogger(__name__)

_TABLE = constants.TASKS_TABLE


class TaskStore:
    """Keyed storage for task records in a single SQLite table.

    One connection is opened per process and handed to request handlers.
    aiosqlite runs every statement on its own worker thread, one at a time,
    so each call here is atomic for the single record it touches.
    """

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    @classmethod
    async def open(cls, db_path: str | Path) -> "TaskStore":
        """Connect to the database file and make sure the tasks table exists."""
        path = Path(db_path).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)

        conn = await aiosqlite.connect(str(path))
        conn.row_factory = aiosqlite.Row
        await conn.execute("PRAGMA journal_mode = WAL")
        await init_db(conn)

        logger.info("Opened task store", extra={"db_path": str(path)})
        return cls(conn)

    async def close(self) -> None:
        await self._conn.close()
        logger.info("Closed task store")

    # ---- low-level helpers ----

    @staticmethod
    def _row_to_task(row: aiosqlite.Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["title"] or ""),
            description=str(row["description"] or ""),
            date=datetime.fromisoformat(row["date"]),
            status=TaskStatus.from_db(row["status"]),
        )

    async def _fetch(self, operation: str, query: str, params: Sequence[Any] = ()) -> list[Task]:
        try:
            cursor = await self._conn.execute(query, params)
            rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            logger.error(f"{operation}_failed", extra={"table": _TABLE, "error": str(e)})
            raise StorageError(constants.MSG_STORAGE_ERROR) from e
        return [self._row_to_task(row) for row in rows]

    async def _write(self, operation: str, query: str, params: Sequence[Any]) -> aiosqlite.Cursor:
        try:
            cursor = await self._conn.execute(query, params)
            await self._conn.commit()
        except aiosqlite.Error as e:
            logger.error(f"{operation}_failed", extra={"table": _TABLE, "error": str(e)})
            raise StorageError(constants.MSG_STORAGE_ERROR) from e
        return cursor

    @staticmethod
    def _payload_values(payload: TaskPayload) -> tuple[str, str, str, int]:
        return (payload.title, payload.description, payload.date.isoformat(), payload.status.to_db())

    # ---- public API ----

    async def get(self, task_id: int) -> Task | None:
        """Point lookup by primary key; None when absent."""
        tasks = await self._fetch("get_task", f"SELECT * FROM {_TABLE} WHERE id = ?", (int(task_id),))  # noqa: S608
        return tasks[0] if tasks else None

    async def list_all(self) -> list[Task]:
        tasks = await self._fetch("list_tasks", f"SELECT * FROM {_TABLE} ORDER BY id ASC")  # noqa: S608
        logger.info("Listed tasks", extra={"count": len(tasks)})
        return tasks

    async def find_by_title_contains(self, substring: str) -> list[Task]:
        """Case-sensitive substring match; an empty substring matches every task."""
        return await self._fetch(
            "find_by_title",
            f"SELECT * FROM {_TABLE} WHERE instr(title, ?) > 0 ORDER BY id ASC",  # noqa: S608
            (substring,),
        )

    async def find_by_date_equals(self, date: datetime) -> list[Task]:
        """Exact match on the stored date, time component included."""
        return await self._fetch(
            "find_by_date",
            f"SELECT * FROM {_TABLE} WHERE date = ? ORDER BY id ASC",  # noqa: S608
            (date.isoformat(),),
        )

    async def find_by_status(self, status: TaskStatus) -> list[Task]:
        """Pending matches stored 0; Completed matches any non-zero value."""
        condition = "status = 0" if status is TaskStatus.PENDING else "status != 0"
        return await self._fetch(
            "find_by_status",
            f"SELECT * FROM {_TABLE} WHERE {condition} ORDER BY id ASC",  # noqa: S608
        )

    async def insert(self, payload: TaskPayload) -> Task:
        """Persist a new task and return it with its assigned id."""
        cursor = await self._write(
            "insert_task",
            f"INSERT INTO {_TABLE} (title, description, date, status) VALUES (?, ?, ?, ?)",  # noqa: S608
            self._payload_values(payload),
        )
        task_id = cursor.lastrowid
        if task_id is None:
            raise StorageError(constants.MSG_STORAGE_ERROR)

        logger.info("Inserted task", extra={"task_id": task_id})
        task = await self.get(task_id)
        if task is None:
            raise StorageError(constants.MSG_STORAGE_ERROR)
        return task

    async def update(self, task_id: int, payload: TaskPayload) -> Task | None:
        """Overwrite title, description, date and status; None when absent."""
        cursor = await self._write(
            "update_task",
            f"UPDATE {_TABLE} SET title = ?, description = ?, date = ?, status = ? WHERE id = ?",  # noqa: S608
            (*self._payload_values(payload), int(task_id)),
        )
        if cursor.rowcount == 0:
            return None

        logger.info("Updated task", extra={"task_id": task_id})
        return await self.get(task_id)

    async def delete(self, task_id: int) -> bool:
        """Hard delete; False when absent."""
        cursor = await self._write("delete_task", f"DELETE FROM {_TABLE} WHERE id = ?", (int(task_id),))  # noqa: S608
        if cursor.rowcount == 0:
            return False

        logger.info("Deleted task", extra={"task_id": task_id})
        return True
