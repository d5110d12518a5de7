"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NOTIFICATION_WELCOME = "welcome"
NOTIFICATION_TASK_CREATED = "task_created"
NOTIFICATION_TASK_COMPLETED = "task_completed"
NOTIFICATION_TASK_DUE = "task_due"
NOTIFICATION_TASK_OVERDUE = "task_overdue"
NOTIFICATION_TASK_UPDATED = "task_updated"
NOTIFICATION_DAILY_SUMMARY = "daily_summary"

NOTIFICATION_TYPES = (
    NOTIFICATION_WELCOME,
    NOTIFICATION_TASK_CREATED,
    NOTIFICATION_TASK_COMPLETED,
    NOTIFICATION_TASK_DUE,
    NOTIFICATION_TASK_OVERDUE,
    NOTIFICATION_TASK_UPDATED,
    NOTIFICATION_DAILY_SUMMARY,
)


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int
    user_id: str
    type: str
    title: str
    message: str
    is_html: bool = False
    payload: dict[str, Any] = field(default_factory=dict)
    read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None


__all__ = [
    "Notification",
    "NOTIFICATION_WELCOME",
    "NOTIFICATION_TASK_CREATED",
    "NOTIFICATION_TASK_COMPLETED",
    "NOTIFICATION_TASK_DUE",
    "NOTIFICATION_TASK_OVERDUE",
    "NOTIFICATION_TASK_UPDATED",
    "NOTIFICATION_DAILY_SUMMARY",
    "NOTIFICATION_TYPES",
]
