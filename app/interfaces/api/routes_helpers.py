"""Helper utilities shared across API route handlers."""

from dataclasses import dataclass

from fastapi import HTTPException, status

from app.domain.exceptions import (
    NotFoundError,
    NotFoundOrUnauthorizedError,
    PersistenceError,
)


@dataclass(frozen=True)
class ErrorMapping:
    """HTTP status and detail used to report a domain error."""

    status_code: int
    detail: str


def map_domain_error(exc: ValueError) -> ErrorMapping:
    """Return how ``exc`` should be reported to the HTTP client."""

    if isinstance(exc, PersistenceError):
        return ErrorMapping(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
    if isinstance(exc, (NotFoundOrUnauthorizedError, NotFoundError)):
        return ErrorMapping(status.HTTP_404_NOT_FOUND, str(exc))
    # DuplicateEmailError, MissingFieldError and plain validation errors
    return ErrorMapping(status.HTTP_400_BAD_REQUEST, str(exc))


def to_http_exception(exc: ValueError) -> HTTPException:
    mapping = map_domain_error(exc)
    return HTTPException(status_code=mapping.status_code, detail=mapping.detail)
