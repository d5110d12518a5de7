"""Tests for registration and authentication use cases."""

from __future__ import annotations

import pytest

from app.application.use_cases.notifications import list_notifications
from app.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    get_user,
    register_user,
    update_profile_image,
)
from app.domain.exceptions import (
    DuplicateEmailError,
    MissingFieldError,
    NotFoundError,
    PersistenceError,
)
from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import UserRepository


def _register(store: DataStore, email: str = "ada@example.com", **overrides):
    values = {
        "full_name": "Ada Lovelace",
        "email": email,
        "phone_number": "555-0100",
        "password": "Secret123",
    }
    values.update(overrides)
    return register_user(store, **values)


def test_duplicate_email_is_rejected(store: DataStore) -> None:
    _register(store)

    with pytest.raises(DuplicateEmailError):
        _register(store, email="  ADA@example.com ")

    assert len(UserRepository(store).list()) == 1


def test_sequential_registrations_receive_increasing_identifiers(store: DataStore) -> None:
    users = [_register(store, email=f"user{i}@example.com") for i in range(1, 4)]

    assert [user.id for user in users] == ["taskly-001", "taskly-002", "taskly-003"]


def test_identifiers_continue_after_reload(store: DataStore, data_file) -> None:
    _register(store, email="one@example.com")
    _register(store, email="two@example.com")

    reopened = DataStore.open(str(data_file))
    third = _register(reopened, email="three@example.com")

    assert third.id == "taskly-003"


def test_password_is_stored_hashed(store: DataStore) -> None:
    user = _register(store)

    assert user.password != "Secret123"
    assert user.email == "ada@example.com"


def test_registration_emits_welcome_notification(store: DataStore) -> None:
    user = _register(store)

    notifications = list_notifications(store, user.id)

    assert [n.type for n in notifications] == ["welcome"]
    assert "Ada Lovelace" in notifications[0].message
    assert notifications[0].read is False


def test_registration_requires_full_name(store: DataStore) -> None:
    with pytest.raises(MissingFieldError):
        _register(store, full_name="   ")


@pytest.mark.parametrize(
    ("email", "password", "expected"),
    [
        ("ada@example.com", "Secret123", AuthenticationStatus.SUCCESS),
        ("ada@example.com", "wrong", AuthenticationStatus.BAD_PASSWORD),
        ("nobody@example.com", "Secret123", AuthenticationStatus.EMAIL_NOT_FOUND),
    ],
)
def test_authenticate_user_statuses(
    store: DataStore, email: str, password: str, expected: AuthenticationStatus
) -> None:
    registered = _register(store)

    user, status = authenticate_user(store, email, password)

    assert status is expected
    if expected is AuthenticationStatus.SUCCESS:
        assert user == registered
    else:
        assert user is None


def test_get_user_unknown_identifier(store: DataStore) -> None:
    with pytest.raises(NotFoundError):
        get_user(store, "taskly-999")


def test_update_profile_image(store: DataStore, data_file) -> None:
    user = _register(store)

    updated = update_profile_image(store, user.id, "https://cdn.example.com/ada.png")

    assert updated.profile_image == "https://cdn.example.com/ada.png"
    assert get_user(DataStore.open(str(data_file)), user.id).profile_image == (
        "https://cdn.example.com/ada.png"
    )


def test_failed_write_leaves_no_trace_of_the_registration(
    store: DataStore, data_file, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_save(snapshot) -> None:
        raise PersistenceError("Could not save data")

    working_save = store.storage.save
    monkeypatch.setattr(store.storage, "save", failing_save)
    with pytest.raises(PersistenceError):
        _register(store)

    assert store.snapshot.users == []
    assert store.snapshot.notifications == []
    assert store.snapshot.last_user_number == 0

    monkeypatch.setattr(store.storage, "save", working_save)
    retried = _register(store)

    assert retried.id == "taskly-001"
    assert [u.id for u in UserRepository(DataStore.open(str(data_file))).list()] == [
        "taskly-001"
    ]
