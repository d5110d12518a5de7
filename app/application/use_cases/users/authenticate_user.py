"""Use case for authenticating a user."""

from enum import Enum, auto

from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import verify_password


class AuthenticationStatus(Enum):
    """Possible outcomes when attempting to authenticate a user."""

    SUCCESS = auto()
    EMAIL_NOT_FOUND = auto()
    BAD_PASSWORD = auto()


def authenticate_user(store: DataStore, email: str, password: str):
    """Return the authentication result along with the user when possible."""

    user = UserRepository(store).get_by_email(email)

    if not user:
        return None, AuthenticationStatus.EMAIL_NOT_FOUND

    if not verify_password(password, user.password):
        return None, AuthenticationStatus.BAD_PASSWORD

    return user, AuthenticationStatus.SUCCESS
