"""Persistence helpers for task entities."""

from __future__ import annotations

from collections.abc import Sequence

from app.domain.entities import TASK_STATUS_COMPLETED, Task
from app.infrastructure.datastore import DataStore


class TaskRepository:
    """Provide CRUD operations for :class:`Task` objects."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    def list_for_user(self, user_id: str, *, status: str | None = None) -> Sequence[Task]:
        return [
            task
            for task in self.store.snapshot.tasks
            if task.user_id == user_id and (status is None or task.status == status)
        ]

    def list_open(self) -> Sequence[Task]:
        """Return every task that has not been completed, in insertion order."""

        return [
            task
            for task in self.store.snapshot.tasks
            if task.status != TASK_STATUS_COMPLETED
        ]

    def get_owned(self, task_id: int, user_id: str) -> Task | None:
        for task in self.store.snapshot.tasks:
            if task.id == task_id and task.user_id == user_id:
                return task
        return None

    def create(self, task: Task) -> Task:
        with self.store.transaction() as snapshot:
            snapshot.tasks.append(task)
            self.store.save()
        return task

    def update(self, task: Task) -> Task:
        with self.store.transaction() as snapshot:
            for index, existing in enumerate(snapshot.tasks):
                if existing.id == task.id:
                    if existing.user_id != task.user_id:
                        raise ValueError("A task cannot change owner")
                    snapshot.tasks[index] = task
                    break
            else:
                msg = f"Task with id {task.id} not found"
                raise ValueError(msg)
            self.store.save()
        return task


__all__ = ["TaskRepository"]
