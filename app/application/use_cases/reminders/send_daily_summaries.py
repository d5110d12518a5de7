"""Use case emitting the daily pending-task summary."""

from __future__ import annotations

import logging
from datetime import datetime

from app.application.use_cases.notifications import notify_daily_summary
from app.config import get_settings
from app.domain.entities import TASK_STATUS_PENDING, Notification
from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import TaskRepository, UserRepository
from app.utils import ensure_app_timezone, now_in_app_timezone

logger = logging.getLogger(__name__)


def send_daily_summaries(
    store: DataStore,
    *,
    now: datetime | None = None,
    hour: int | None = None,
) -> list[Notification]:
    """Emit one ``daily_summary`` per user once per local day.

    Summaries go out on the first call at or after ``hour``; later calls on
    the same date emit nothing, and a day whose target hour was missed is
    caught up on the next call.
    """

    current = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    target_hour = get_settings().daily_summary_hour if hour is None else hour
    if current.hour < target_hour:
        return []

    tasks = TaskRepository(store)
    emitted: list[Notification] = []
    with store.transaction() as snapshot:
        if snapshot.last_daily_summary_on == current.date():
            return []
        for user in UserRepository(store).list():
            pending = tasks.list_for_user(user.id, status=TASK_STATUS_PENDING)
            emitted.append(
                notify_daily_summary(store, user=user, pending_count=len(pending))
            )
        snapshot.last_daily_summary_on = current.date()
        store.save()

    logger.info("Emitted %s daily summaries", len(emitted))
    return emitted
