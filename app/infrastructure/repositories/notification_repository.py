"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime

from app.domain.entities import Notification
from app.infrastructure.datastore import DataStore


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    def list_for_user(self, user_id: str) -> Sequence[Notification]:
        return [n for n in self.store.snapshot.notifications if n.user_id == user_id]

    def list_unread_for_user(self, user_id: str) -> Sequence[Notification]:
        return [
            n
            for n in self.store.snapshot.notifications
            if n.user_id == user_id and not n.read
        ]

    def get_owned(self, notification_id: int, user_id: str) -> Notification | None:
        for notification in self.store.snapshot.notifications:
            if notification.id == notification_id and notification.user_id == user_id:
                return notification
        return None

    def exists_for_task(self, *, user_id: str, task_id: int, event_type: str) -> bool:
        """Return ``True`` when ``event_type`` was already emitted for ``task_id``."""

        for notification in self.store.snapshot.notifications:
            if notification.user_id != user_id or notification.type != event_type:
                continue
            if (notification.payload or {}).get("task_id") == task_id:
                return True
        return False

    def create(self, notification: Notification) -> Notification:
        with self.store.transaction() as snapshot:
            snapshot.notifications.append(notification)
            self.store.save()
        return notification

    def mark_as_read(
        self, notification_ids: Sequence[int], *, user_id: str, read_at: datetime
    ) -> list[Notification]:
        """Flag the owned notifications in ``notification_ids`` as read.

        Notifications that were already read keep their original ``read_at``.
        Returns the resulting notifications in storage order.
        """

        wanted = set(notification_ids)
        updated: list[Notification] = []
        changed = False
        with self.store.transaction() as snapshot:
            for index, notification in enumerate(snapshot.notifications):
                if notification.id not in wanted or notification.user_id != user_id:
                    continue
                if not notification.read:
                    notification = replace(notification, read=True, read_at=read_at)
                    snapshot.notifications[index] = notification
                    changed = True
                updated.append(notification)
            if changed:
                self.store.save()
        return updated


__all__ = ["NotificationRepository"]
