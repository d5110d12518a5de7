"""Use cases for reading a user's notification feed."""

from collections.abc import Sequence

from app.domain.entities import Notification
from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import NotificationRepository


def list_notifications(
    store: DataStore, user_id: str, *, unread_only: bool = False
) -> Sequence[Notification]:
    """Return the notifications owned by ``user_id`` in the order they were created."""

    repository = NotificationRepository(store)
    if unread_only:
        return repository.list_unread_for_user(user_id)
    return repository.list_for_user(user_id)


def count_unread_notifications(store: DataStore, user_id: str) -> int:
    return len(NotificationRepository(store).list_unread_for_user(user_id))
