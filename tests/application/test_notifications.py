"""Tests for the notification center use cases."""

from __future__ import annotations

import pytest

from app.application.use_cases.notifications import (
    build_notification_content,
    count_unread_notifications,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    notify,
)
from app.domain.entities import NOTIFICATION_TYPES
from app.domain.exceptions import NotFoundOrUnauthorizedError
from app.infrastructure.datastore import DataStore


@pytest.mark.parametrize("notification_type", NOTIFICATION_TYPES)
def test_every_type_has_a_template(notification_type: str) -> None:
    content = build_notification_content(
        notification_type,
        {"task_title": "Pay rent", "full_name": "Ada", "pending_count": 2, "hours_left": 5},
    )

    assert content.title
    assert content.message


def test_templates_use_context_values() -> None:
    assert "Pay rent" in build_notification_content("task_overdue", {"task_title": "Pay rent"}).message
    assert "in 12 hours" in build_notification_content(
        "task_due", {"task_title": "Pay rent", "hours_left": 11.6}
    ).message
    assert "3 pending tasks" in build_notification_content(
        "daily_summary", {"pending_count": 3}
    ).message
    assert "1 pending task " in build_notification_content(
        "daily_summary", {"pending_count": 1}
    ).message


def test_unknown_type_is_rejected() -> None:
    with pytest.raises(ValueError):
        build_notification_content("birthday", {})


def test_notify_has_no_deduplication(store: DataStore) -> None:
    first = notify(store, user_id="taskly-001", notification_type="welcome", context={"full_name": "Ada"})
    second = notify(store, user_id="taskly-001", notification_type="welcome", context={"full_name": "Ada"})

    assert first.id != second.id
    assert list_notifications(store, "taskly-001") == [first, second]


def test_mark_read_is_idempotent(store: DataStore) -> None:
    notification = notify(store, user_id="taskly-001", notification_type="welcome")

    first = mark_notification_read(store, notification.id, "taskly-001")
    second = mark_notification_read(store, notification.id, "taskly-001")

    assert first.read is True
    assert second.read is True
    assert second.read_at == first.read_at
    assert count_unread_notifications(store, "taskly-001") == 0


def test_mark_read_checks_ownership(store: DataStore) -> None:
    notification = notify(store, user_id="taskly-001", notification_type="welcome")

    with pytest.raises(NotFoundOrUnauthorizedError):
        mark_notification_read(store, notification.id, "taskly-002")

    assert list_notifications(store, "taskly-001")[0].read is False


def test_unread_filter_and_mark_all(store: DataStore) -> None:
    first = notify(store, user_id="taskly-001", notification_type="welcome")
    notify(store, user_id="taskly-001", notification_type="daily_summary", context={"pending_count": 0})
    notify(store, user_id="taskly-002", notification_type="welcome")
    mark_notification_read(store, first.id, "taskly-001")

    unread = list_notifications(store, "taskly-001", unread_only=True)

    assert [n.type for n in unread] == ["daily_summary"]
    assert mark_all_notifications_read(store, "taskly-001") == 1
    assert mark_all_notifications_read(store, "taskly-001") == 0
    assert count_unread_notifications(store, "taskly-002") == 1


def test_read_state_survives_reload(store: DataStore, data_file) -> None:
    notification = notify(store, user_id="taskly-001", notification_type="welcome")
    mark_notification_read(store, notification.id, "taskly-001")

    reloaded = list_notifications(DataStore.open(str(data_file)), "taskly-001")

    assert reloaded[0].read is True
    assert reloaded[0].read_at is not None
