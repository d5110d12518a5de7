"""Endpoints for the authenticated user's notification feed."""

from fastapi import APIRouter, Depends

from app.application.use_cases.notifications import (
    count_unread_notifications,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read,
    mark_notification_read as mark_notification_read_uc,
)
from app.domain.entities import Notification, User
from app.infrastructure.datastore import DataStore, get_store
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import (
    MarkAllReadResponse,
    NotificationRead,
    UnreadCountRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.get("", response_model=list[NotificationRead])
def list_notifications(
    unread_only: bool = False,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
) -> list[NotificationRead]:
    """Return the caller's notifications in the order they were created."""

    notifications = list_notifications_uc(store, current_user.id, unread_only=unread_only)
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/unread-count", response_model=UnreadCountRead)
def unread_count(
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
) -> UnreadCountRead:
    return UnreadCountRead(unread=count_unread_notifications(store, current_user.id))


@router.patch("/read-all", response_model=MarkAllReadResponse)
def mark_all_read(
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
) -> MarkAllReadResponse:
    try:
        updated = mark_all_notifications_read(store, current_user.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return MarkAllReadResponse(updated=updated)


@router.patch("/{notification_id}", response_model=NotificationRead)
def mark_notification_read(
    notification_id: int,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
) -> NotificationRead:
    """Mark one of the caller's notifications as read."""

    try:
        notification = mark_notification_read_uc(store, notification_id, current_user.id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _notification_to_schema(notification)
