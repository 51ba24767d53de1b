"""Configuration management for task-api."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # SQLite Configuration
    sqlite_db_path: str = Field(default="tasks.db", description="Path to the SQLite database file")

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")

    # Server Configuration
    environment: str = Field(default="development", description="Deployment environment name")
    host: str = Field(default="127.0.0.1", description="Bind address for the HTTP server")
    port: int = Field(default=8000, description="Bind port for the HTTP server")


# Application Constants
class Constants:
    """Application-wide constants."""

    # HTTP Status Codes
    HTTP_OK: int = 200
    HTTP_BAD_REQUEST: int = 400
    HTTP_NOT_FOUND: int = 404
    HTTP_SERVER_ERROR: int = 500

    # Response Messages
    MSG_TASK_FOUND: str = "The task was found!"
    MSG_TASK_UPDATED: str = "The task was updated!"
    MSG_TASK_DELETED: str = "Task was deleted with success"
    MSG_TASKS_LISTED: str = "The tasks were found!"
    MSG_TASKS_SEARCHED: str = "Some tasks were found!"
    MSG_TASK_REGISTERED: str = "Task registered with success!"
    MSG_TASK_NOT_FOUND: str = "Task Not Found. Try again later..."
    MSG_TASK_NULL: str = "Task can't be null. Try again later..."
    MSG_INVALID_PAYLOAD: str = "The request is invalid. Check the submitted fields."
    MSG_STORAGE_ERROR: str = "The task store is unavailable. Try again later..."

    # Storage
    TASKS_TABLE: str = "tasks"


def get_settings() -> Settings:
    """Build application settings from the environment."""
    return Settings()


constants = Constants()
