"""Use case for creating tasks."""

import logging
from datetime import date, time

from app.application.use_cases.notifications import notify_task_event
from app.domain.entities import NOTIFICATION_TASK_CREATED, TASK_STATUS_PENDING, Task
from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import TaskRepository
from app.utils import now_in_app_timezone

from .validators import clean_description, ensure_end_date, ensure_schedule, ensure_title

logger = logging.getLogger(__name__)


def create_task(
    store: DataStore,
    *,
    user_id: str,
    title: str,
    end_date: date,
    description: str | None = None,
    start_date: date | None = None,
    start_time: time | None = None,
    end_time: time | None = None,
) -> Task:
    """Create a pending task for ``user_id`` and emit ``task_created``.

    The task is persisted before it is returned.
    """

    title = ensure_title(title)
    end_date = ensure_end_date(end_date)
    ensure_schedule(
        start_date=start_date, start_time=start_time, end_date=end_date, end_time=end_time
    )

    now = now_in_app_timezone()
    with store.transaction():
        task = Task(
            id=store.ids.next_id(),
            user_id=user_id,
            title=title,
            description=clean_description(description),
            start_date=start_date,
            start_time=start_time,
            end_date=end_date,
            end_time=end_time,
            status=TASK_STATUS_PENDING,
            created_at=now,
            updated_at=now,
        )
        TaskRepository(store).create(task)
        notify_task_event(store, task=task, notification_type=NOTIFICATION_TASK_CREATED)

    logger.info("User %s created task %s", user_id, task.id)
    return task
