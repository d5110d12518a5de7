"""Public helpers for emitting and reading notifications."""

from .events import (
    build_notification_content,
    notify,
    notify_daily_summary,
    notify_task_event,
    notify_welcome,
)
from .list_notifications import count_unread_notifications, list_notifications
from .mark_notification_read import mark_all_notifications_read, mark_notification_read

__all__ = [
    "build_notification_content",
    "notify",
    "notify_daily_summary",
    "notify_task_event",
    "notify_welcome",
    "count_unread_notifications",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
