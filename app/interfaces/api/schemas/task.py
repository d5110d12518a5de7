"""Pydantic models describing task payloads."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TaskStatusLiteral = Literal["pending", "completed"]


class TaskCreate(BaseModel):
    """Fields accepted when creating a task."""

    title: str = Field(..., max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    start_date: date | None = None
    start_time: time | None = None
    end_date: date
    end_time: time | None = Field(
        default=None, description="Defaults to the end of ``end_date`` when omitted"
    )

    model_config = ConfigDict(extra="forbid")


class TaskUpdate(BaseModel):
    """Editable task fields; only the provided ones are changed."""

    title: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    start_date: date | None = None
    start_time: time | None = None
    end_date: date | None = None
    end_time: time | None = None

    model_config = ConfigDict(extra="forbid")


class TaskStatusUpdate(BaseModel):
    status: TaskStatusLiteral


class TaskRead(BaseModel):
    id: int
    user_id: str
    title: str
    description: str | None
    start_date: date | None
    start_time: time | None
    end_date: date
    end_time: time | None
    due_at: datetime
    status: TaskStatusLiteral
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["TaskCreate", "TaskRead", "TaskStatusUpdate", "TaskUpdate"]
