"""Task domain models and enums."""

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class TaskStatus(StrEnum):
    """Task completion status.

    Stored as an integer column: 0 is Pending, anything else is Completed.
    """

    PENDING = "Pending"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, raw: Any) -> "TaskStatus":
        """Strictly convert client input into a status.

        Accepts 0/1 (as int or digit string) and the member names, case-insensitive.

        Raises:
            ValueError: If the value is not one of the accepted forms
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, int) and not isinstance(raw, bool):
            if raw == 0:
                return cls.PENDING
            if raw == 1:
                return cls.COMPLETED
        elif isinstance(raw, str):
            value = raw.strip()
            if value == "0":
                return cls.PENDING
            if value == "1":
                return cls.COMPLETED
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        msg = f"Invalid status {raw!r}: must be 0 (Pending) or 1 (Completed)"
        raise ValueError(msg)

    @classmethod
    def from_db(cls, raw: int | None) -> "TaskStatus":
        """Normalize a stored integer: exactly 0 is Pending, any other value is Completed."""
        if not raw:
            return cls.PENDING
        return cls.COMPLETED

    def to_db(self) -> int:
        return 0 if self is TaskStatus.PENDING else 1


class TaskPayload(BaseModel):
    """Client-supplied task fields for register and update."""

    title: str = Field(..., description="Task title")
    description: str = Field(..., description="Detailed task description")
    date: datetime = Field(..., description="Task date and time")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="0/Pending or 1/Completed")

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, v: Any) -> TaskStatus:
        """Reject anything outside the two known states."""
        return TaskStatus.parse(v)


class Task(BaseModel):
    """Task data transfer object."""

    id: int = Field(..., description="Unique task ID assigned by the store")
    title: str = Field(..., description="Task title")
    description: str = Field(..., description="Detailed task description")
    date: datetime = Field(..., description="Task date and time")
    status: TaskStatus = Field(..., description="Pending or Completed")
