"""Pytest configuration and fixtures for unit tests."""

from collections.abc import AsyncIterator
from datetime import datetime
from pathlib import Path

import pytest

from task_api.core.task_store import TaskStore
from task_api.domain.task import TaskPayload, TaskStatus


@pytest.fixture
async def task_store(tmp_path: Path) -> AsyncIterator[TaskStore]:
    """Provides a TaskStore backed by a fresh SQLite file for each test."""
    store = await TaskStore.open(tmp_path / "tasks.db")
    yield store
    await store.close()


@pytest.fixture
def payload_factory():
    """Factory for building task payloads with custom data.

    Usage:
        payload = payload_factory(title="Buy milk", status=TaskStatus.COMPLETED)
    """

    def _create_payload(**kwargs) -> TaskPayload:
        data = {
            "title": "Buy milk",
            "description": "2%",
            "date": datetime(2023, 11, 9),
            "status": TaskStatus.PENDING,
        }
        data.update(kwargs)
        return TaskPayload(**data)

    return _create_payload
