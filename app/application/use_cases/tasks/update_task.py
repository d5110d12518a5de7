"""Use case for editing the details of a task."""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from app.application.use_cases.notifications import notify_task_event
from app.domain.entities import NOTIFICATION_TASK_UPDATED, Task
from app.domain.exceptions import NotFoundOrUnauthorizedError
from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import TaskRepository
from app.utils import now_in_app_timezone

from .validators import (
    EDITABLE_FIELDS,
    clean_description,
    ensure_end_date,
    ensure_schedule,
    ensure_title,
)


def update_task(
    store: DataStore, task_id: int, user_id: str, changes: Mapping[str, Any]
) -> Task:
    """Apply ``changes`` to a task owned by ``user_id`` and emit ``task_updated``.

    Only the title, description and schedule fields can be edited; status
    changes go through :func:`update_task_status`.
    """

    unknown = set(changes) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValueError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

    repository = TaskRepository(store)
    with store.transaction():
        task = repository.get_owned(task_id, user_id)
        if task is None:
            raise NotFoundOrUnauthorizedError("Task not found or unauthorized")
        if not changes:
            return task

        values = dict(changes)
        if "title" in values:
            values["title"] = ensure_title(values["title"])
        if "end_date" in values:
            values["end_date"] = ensure_end_date(values["end_date"])
        if "description" in values:
            values["description"] = clean_description(values["description"])

        candidate = replace(task, **values)
        ensure_schedule(
            start_date=candidate.start_date,
            start_time=candidate.start_time,
            end_date=candidate.end_date,
            end_time=candidate.end_time,
        )

        updated = repository.update(replace(candidate, updated_at=now_in_app_timezone()))
        notify_task_event(store, task=updated, notification_type=NOTIFICATION_TASK_UPDATED)
    return updated
