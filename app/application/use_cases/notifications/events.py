"""Utility helpers to generate and store domain notifications."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple

from app.domain.entities import (
    NOTIFICATION_DAILY_SUMMARY,
    NOTIFICATION_TASK_COMPLETED,
    NOTIFICATION_TASK_CREATED,
    NOTIFICATION_TASK_DUE,
    NOTIFICATION_TASK_OVERDUE,
    NOTIFICATION_TASK_UPDATED,
    NOTIFICATION_WELCOME,
    Notification,
    Task,
    User,
)
from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import NotificationRepository
from app.utils import now_in_app_timezone


class NotificationContent(NamedTuple):
    title: str
    message: str
    is_html: bool = False


def _pending_phrase(count: int) -> str:
    if count == 0:
        return "You have no pending tasks today. Enjoy your day!"
    noun = "task" if count == 1 else "tasks"
    return f"You have {count} pending {noun} today."


def _hours_phrase(hours: Any) -> str:
    try:
        rounded = max(1, round(float(hours)))
    except (TypeError, ValueError):
        return "within the next 24 hours"
    return "in 1 hour" if rounded == 1 else f"in {rounded} hours"


def build_notification_content(
    notification_type: str, context: Mapping[str, Any]
) -> NotificationContent:
    """Render the title and message for ``notification_type`` using ``context``.

    Raises ``ValueError`` for unknown notification types.
    """

    task_title = context.get("task_title", "")

    if notification_type == NOTIFICATION_WELCOME:
        return NotificationContent(
            "Welcome to Taskly",
            f"Hi {context.get('full_name', '')}, your account is ready. "
            "Create your first task to get started.",
        )
    if notification_type == NOTIFICATION_TASK_CREATED:
        return NotificationContent(
            "Task created", f"Your task '{task_title}' has been created."
        )
    if notification_type == NOTIFICATION_TASK_COMPLETED:
        return NotificationContent(
            "Task completed", f"Great job! You completed '{task_title}'."
        )
    if notification_type == NOTIFICATION_TASK_UPDATED:
        return NotificationContent(
            "Task updated", f"Your task '{task_title}' has been updated."
        )
    if notification_type == NOTIFICATION_TASK_DUE:
        return NotificationContent(
            "Task due soon",
            f"Your task '{task_title}' is due {_hours_phrase(context.get('hours_left'))}.",
        )
    if notification_type == NOTIFICATION_TASK_OVERDUE:
        return NotificationContent(
            "Task overdue", f"Your task '{task_title}' is overdue."
        )
    if notification_type == NOTIFICATION_DAILY_SUMMARY:
        return NotificationContent(
            "Daily summary", _pending_phrase(int(context.get("pending_count", 0)))
        )

    msg = f"Unknown notification type: {notification_type}"
    raise ValueError(msg)


def notify(
    store: DataStore,
    *,
    user_id: str,
    notification_type: str,
    context: Mapping[str, Any] | None = None,
    payload: dict[str, Any] | None = None,
) -> Notification:
    """Build a notification from its template and persist it.

    Calling twice with the same arguments stores two notifications.
    """

    content = build_notification_content(notification_type, context or {})
    notification = Notification(
        id=store.ids.next_id(),
        user_id=user_id,
        type=notification_type,
        title=content.title,
        message=content.message,
        is_html=content.is_html,
        payload=payload or {},
        read=False,
        created_at=now_in_app_timezone(),
        read_at=None,
    )
    return NotificationRepository(store).create(notification)


def notify_welcome(store: DataStore, *, user: User) -> Notification:
    return notify(
        store,
        user_id=user.id,
        notification_type=NOTIFICATION_WELCOME,
        context={"full_name": user.full_name},
    )


def notify_task_event(
    store: DataStore,
    *,
    task: Task,
    notification_type: str,
    hours_left: float | None = None,
) -> Notification:
    """Emit a task lifecycle or reminder notification for the task owner."""

    context: dict[str, Any] = {"task_title": task.title}
    payload: dict[str, Any] = {"task_id": task.id}
    if hours_left is not None:
        context["hours_left"] = hours_left
        payload["hours_left"] = round(hours_left, 2)
    return notify(
        store,
        user_id=task.user_id,
        notification_type=notification_type,
        context=context,
        payload=payload,
    )


def notify_daily_summary(
    store: DataStore, *, user: User, pending_count: int
) -> Notification:
    return notify(
        store,
        user_id=user.id,
        notification_type=NOTIFICATION_DAILY_SUMMARY,
        context={"pending_count": pending_count},
        payload={"pending_count": pending_count},
    )


__all__ = [
    "NotificationContent",
    "build_notification_content",
    "notify",
    "notify_welcome",
    "notify_task_event",
    "notify_daily_summary",
]
