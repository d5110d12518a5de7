"""Use case for retrieving a single user."""

from app.domain.entities import User
from app.domain.exceptions import NotFoundError
from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import UserRepository


def get_user(store: DataStore, user_id: str) -> User:
    """Return the requested user or raise an error if it does not exist."""

    user = UserRepository(store).get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user
