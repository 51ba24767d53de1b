"""Pytest configuration and shared fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from task_api.core.config import Settings
from task_api.main import create_app


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway SQLite file."""
    return Settings(sqlite_db_path=str(tmp_path / "tasks.db"), logfire_token=None, environment="test")


@pytest.fixture
def test_client(test_settings: Settings) -> Generator[TestClient]:
    """Provide FastAPI test client with the lifespan (and task store) running."""
    with TestClient(create_app(test_settings)) as client:
        yield client
