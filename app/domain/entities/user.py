"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

USER_ID_PREFIX = "taskly-"
USER_ID_WIDTH = 3


def format_user_id(number: int) -> str:
    """Return the public identifier for the ``number``-th registered user."""

    return f"{USER_ID_PREFIX}{number:0{USER_ID_WIDTH}d}"


def parse_user_number(user_id: str) -> int | None:
    """Return the numeric suffix of ``user_id`` or ``None`` when malformed."""

    if not user_id.startswith(USER_ID_PREFIX):
        return None
    suffix = user_id[len(USER_ID_PREFIX):]
    if not suffix.isdigit():
        return None
    return int(suffix)


@dataclass
class User:
    """Core attributes describing an application user."""

    id: str
    full_name: str
    email: str
    phone_number: str | None
    password: str
    profile_image: str | None = None
    created_at: datetime | None = None


__all__ = ["User", "USER_ID_PREFIX", "format_user_id", "parse_user_number"]
