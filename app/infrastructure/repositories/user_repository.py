"""Persistence helpers for user entities."""

from __future__ import annotations

from collections.abc import Sequence

from app.domain.entities import User, format_user_id
from app.infrastructure.datastore import DataStore


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository:
    """Provide CRUD operations for :class:`User` objects."""

    def __init__(self, store: DataStore) -> None:
        self.store = store

    def list(self) -> Sequence[User]:
        return list(self.store.snapshot.users)

    def get(self, user_id: str) -> User | None:
        for user in self.store.snapshot.users:
            if user.id == user_id:
                return user
        return None

    def get_by_email(self, email: str) -> User | None:
        wanted = normalize_email(email)
        for user in self.store.snapshot.users:
            if normalize_email(user.email) == wanted:
                return user
        return None

    def next_identifier(self) -> str:
        """Return the identifier the next registered user will receive."""

        return format_user_id(self.store.snapshot.last_user_number + 1)

    def create(self, user: User) -> User:
        with self.store.transaction() as snapshot:
            snapshot.users.append(user)
            snapshot.last_user_number += 1
            self.store.save()
        return user

    def update(self, user: User) -> User:
        with self.store.transaction() as snapshot:
            for index, existing in enumerate(snapshot.users):
                if existing.id == user.id:
                    snapshot.users[index] = user
                    break
            else:
                msg = f"User with id {user.id} not found"
                raise ValueError(msg)
            self.store.save()
        return user


__all__ = ["UserRepository", "normalize_email"]
