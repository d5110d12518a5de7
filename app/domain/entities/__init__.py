"""Domain entities exposed by the application."""

from .notification import (
    NOTIFICATION_DAILY_SUMMARY,
    NOTIFICATION_TASK_COMPLETED,
    NOTIFICATION_TASK_CREATED,
    NOTIFICATION_TASK_DUE,
    NOTIFICATION_TASK_OVERDUE,
    NOTIFICATION_TASK_UPDATED,
    NOTIFICATION_TYPES,
    NOTIFICATION_WELCOME,
    Notification,
)
from .snapshot import Snapshot
from .task import TASK_STATUS_COMPLETED, TASK_STATUS_PENDING, TASK_STATUSES, Task
from .user import User, format_user_id, parse_user_number

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
    "Snapshot",
    "Task",
    "TASK_STATUS_PENDING",
    "TASK_STATUS_COMPLETED",
    "TASK_STATUSES",
    "User",
    "format_user_id",
    "parse_user_number",
]
