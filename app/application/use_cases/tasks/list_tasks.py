"""Use case for listing tasks."""

from collections.abc import Sequence

from app.domain.entities import Task
from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import TaskRepository

from .validators import ensure_status


def list_tasks(store: DataStore, user_id: str, *, status: str | None = None) -> Sequence[Task]:
    """Return the tasks owned by ``user_id`` in creation order."""

    if status is not None:
        status = ensure_status(status)
    return TaskRepository(store).list_for_user(user_id, status=status)
