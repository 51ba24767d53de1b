"""SQLite schema for the tasks table (code-first, create-if-missing)."""

import logging

import aiosqlite

from task_api.core.config import constants


logger = logging.getLogger(__name__)


TASKS_TABLE_DDL = f"""
CREATE TABLE IF NOT EXISTS {constants.TASKS_TABLE} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT NOT NULL,
    date TEXT NOT NULL,
    status INTEGER NOT NULL DEFAULT 0
)
"""


async def init_db(conn: aiosqlite.Connection) -> None:
    """Ensure the tasks table exists. Safe to call on every start-up."""
    await conn.execute(TASKS_TABLE_DDL)
    await conn.commit()
    logger.info("Schema ready", extra={"table": constants.TASKS_TABLE})
