"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .get_user import get_user
from .register_user import register_user
from .update_profile_image import update_profile_image

__all__ = [
    "AuthenticationStatus",
    "authenticate_user",
    "get_user",
    "register_user",
    "update_profile_image",
]
