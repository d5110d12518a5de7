"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: str
    type: str
    title: str
    message: str
    is_html: bool = False
    payload: dict[str, Any] = Field(
        default_factory=dict,
        description=(
            "Event data: task events carry task_id (reminders add hours_left), "
            "daily summaries carry pending_count"
        ),
    )
    read: bool
    created_at: datetime | None
    read_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class UnreadCountRead(BaseModel):
    unread: int


class MarkAllReadResponse(BaseModel):
    updated: int


__all__ = ["MarkAllReadResponse", "NotificationRead", "UnreadCountRead"]
