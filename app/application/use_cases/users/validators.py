"""Common validation helpers for user use cases."""

from app.domain.exceptions import MissingFieldError


def ensure_valid_email(email: str) -> str:
    """Return a normalized email address or raise ``ValueError``."""

    normalized = (email or "").strip().lower()
    if not normalized:
        raise MissingFieldError("email")

    if normalized.count("@") != 1:
        raise ValueError("Invalid email address")

    local_part, domain = normalized.split("@", 1)
    if not local_part or "." not in domain:
        raise ValueError("Invalid email address")

    return normalized


def ensure_present(value: str | None, field: str) -> str:
    """Return ``value`` stripped, raising :class:`MissingFieldError` when blank."""

    cleaned = (value or "").strip()
    if not cleaned:
        raise MissingFieldError(field)
    return cleaned
