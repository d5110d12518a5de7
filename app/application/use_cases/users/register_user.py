"""Use case for registering users."""

import logging

from app.application.use_cases.notifications import notify_welcome
from app.domain.entities import User
from app.domain.exceptions import DuplicateEmailError
from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash
from app.utils import now_in_app_timezone

from .validators import ensure_present, ensure_valid_email

logger = logging.getLogger(__name__)


def register_user(
    store: DataStore,
    *,
    full_name: str,
    email: str,
    password: str,
    phone_number: str | None = None,
) -> User:
    """Create a new user ensuring unique email addresses.

    The user receives the next ``taskly-NNN`` identifier and a welcome
    notification.
    """

    full_name = ensure_present(full_name, "full_name")
    email = ensure_valid_email(email)
    ensure_present(password, "password")
    hashed_password = get_password_hash(password)

    repository = UserRepository(store)
    with store.transaction():
        if repository.get_by_email(email):
            raise DuplicateEmailError("User already exists")

        user = User(
            id=repository.next_identifier(),
            full_name=full_name,
            email=email,
            phone_number=(phone_number or "").strip() or None,
            password=hashed_password,
            profile_image=None,
            created_at=now_in_app_timezone(),
        )
        repository.create(user)
        notify_welcome(store, user=user)

    logger.info("Registered user %s", user.id)
    return user
