"""Errors raised by the application use cases.

They subclass :class:`ValueError` so callers that only care about "the
operation was rejected" can keep catching ``ValueError``.
"""


class TasklyError(ValueError):
    """Base class for domain errors."""


class DuplicateEmailError(TasklyError):
    """Raised when registering an email that already belongs to a user."""


class NotFoundError(TasklyError):
    """Raised when a record looked up by identifier does not exist."""


class NotFoundOrUnauthorizedError(TasklyError):
    """Raised when a record does not exist or belongs to another user.

    Both cases share one error so callers cannot probe for other users'
    records.
    """


class MissingFieldError(TasklyError):
    """Raised when a required input field is absent or blank."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}")
        self.field = field


class PersistenceError(TasklyError):
    """Raised when the snapshot cannot be written to durable storage."""


__all__ = [
    "TasklyError",
    "DuplicateEmailError",
    "NotFoundError",
    "NotFoundOrUnauthorizedError",
    "MissingFieldError",
    "PersistenceError",
]
