"""Use case for moving a task between statuses."""

import logging
from dataclasses import replace

from app.application.use_cases.notifications import notify_task_event
from app.domain.entities import NOTIFICATION_TASK_COMPLETED, TASK_STATUS_COMPLETED, Task
from app.domain.exceptions import NotFoundOrUnauthorizedError
from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import TaskRepository
from app.utils import now_in_app_timezone

from .validators import ensure_status

logger = logging.getLogger(__name__)


def update_task_status(store: DataStore, task_id: int, user_id: str, status: str) -> Task:
    """Change the status of a task owned by ``user_id``.

    Completing a task emits one ``task_completed`` notification. A task that
    does not exist and a task owned by someone else are reported the same way.
    """

    status = ensure_status(status)
    repository = TaskRepository(store)
    with store.transaction():
        task = repository.get_owned(task_id, user_id)
        if task is None:
            raise NotFoundOrUnauthorizedError("Task not found or unauthorized")

        updated = repository.update(
            replace(task, status=status, updated_at=now_in_app_timezone())
        )
        if status == TASK_STATUS_COMPLETED:
            notify_task_event(
                store, task=updated, notification_type=NOTIFICATION_TASK_COMPLETED
            )

    logger.info("Task %s moved to %s", task_id, status)
    return updated
