"""Use case for attaching a profile image reference to a user."""

from dataclasses import replace

from app.domain.entities import User
from app.domain.exceptions import NotFoundError
from app.infrastructure.datastore import DataStore
from app.infrastructure.repositories import UserRepository

from .validators import ensure_present


def update_profile_image(store: DataStore, user_id: str, profile_image: str) -> User:
    profile_image = ensure_present(profile_image, "profile_image")
    repository = UserRepository(store)
    with store.transaction():
        user = repository.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return repository.update(replace(user, profile_image=profile_image))
