"""Use cases for acknowledging notifications."""

from app.domain.entities import Notification
from app.domain.exceptions import NotFoundOrUnauthorizedError
from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import NotificationRepository
from app.utils import now_in_app_timezone


def mark_notification_read(
    store: DataStore, notification_id: int, user_id: str
) -> Notification:
    """Flag one notification as read.

    Marking an already read notification again succeeds without changes.
    """

    repository = NotificationRepository(store)
    with store.transaction():
        if repository.get_owned(notification_id, user_id) is None:
            raise NotFoundOrUnauthorizedError("Notification not found or unauthorized")
        (updated,) = repository.mark_as_read(
            [notification_id], user_id=user_id, read_at=now_in_app_timezone()
        )
    return updated


def mark_all_notifications_read(store: DataStore, user_id: str) -> int:
    """Flag every unread notification of ``user_id`` as read and return how many changed."""

    repository = NotificationRepository(store)
    with store.transaction():
        unread_ids = [n.id for n in repository.list_unread_for_user(user_id)]
        if not unread_ids:
            return 0
        repository.mark_as_read(unread_ids, user_id=user_id, read_at=now_in_app_timezone())
    return len(unread_ids)
