"""Use case scanning open tasks for due and overdue reminders."""

from __future__ import annotations

import logging
from datetime import datetime

from app.application.use_cases.notifications import notify_task_event
from app.config import get_settings
from app.domain.entities import (
    NOTIFICATION_TASK_DUE,
    NOTIFICATION_TASK_OVERDUE,
    Notification,
)
from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import NotificationRepository, TaskRepository
from app.utils import ensure_app_timezone, now_in_app_timezone

logger = logging.getLogger(__name__)

DUE_WINDOW_HOURS = 24


def classify_due_state(hours_left: float) -> str | None:
    """Return the reminder type for a task due in ``hours_left`` hours.

    ``(0, 24]`` is the due window and any negative value is overdue. A task
    due exactly now gets no reminder.
    """

    if 0 < hours_left <= DUE_WINDOW_HOURS:
        return NOTIFICATION_TASK_DUE
    if hours_left < 0:
        return NOTIFICATION_TASK_OVERDUE
    return None


def check_due_tasks(
    store: DataStore,
    *,
    now: datetime | None = None,
    suppress_repeats: bool | None = None,
) -> list[Notification]:
    """Emit ``task_due``/``task_overdue`` notifications for every open task.

    Unless ``suppress_repeats`` is enabled, a task that stays inside the due
    window (or overdue) is reported again on every call.
    """

    current = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    if suppress_repeats is None:
        suppress_repeats = get_settings().suppress_repeat_reminders

    notifications = NotificationRepository(store)
    emitted: list[Notification] = []
    with store.transaction():
        for task in TaskRepository(store).list_open():
            hours_left = (task.due_at - current).total_seconds() / 3600
            notification_type = classify_due_state(hours_left)
            if notification_type is None:
                continue
            if suppress_repeats and notifications.exists_for_task(
                user_id=task.user_id, task_id=task.id, event_type=notification_type
            ):
                continue
            emitted.append(
                notify_task_event(
                    store,
                    task=task,
                    notification_type=notification_type,
                    hours_left=hours_left,
                )
            )

    if emitted:
        logger.info("Emitted %s due date reminders", len(emitted))
    return emitted
