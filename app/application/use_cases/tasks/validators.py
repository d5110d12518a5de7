"""Validation helpers for task use cases."""

from datetime import date, time

from app.domain.entities import TASK_STATUSES
from app.domain.exceptions import MissingFieldError
from app.utils import combine_in_app_timezone

EDITABLE_FIELDS = (
    "title",
    "description",
    "start_date",
    "start_time",
    "end_date",
    "end_time",
)


def ensure_title(title: str | None) -> str:
    cleaned = (title or "").strip()
    if not cleaned:
        raise MissingFieldError("title")
    return cleaned


def ensure_end_date(end_date: date | None) -> date:
    if end_date is None:
        raise MissingFieldError("end_date")
    return end_date


def ensure_status(status: str) -> str:
    normalized = (status or "").strip().lower()
    if normalized not in TASK_STATUSES:
        allowed = ", ".join(TASK_STATUSES)
        raise ValueError(f"Invalid status '{status}'. Allowed values: {allowed}")
    return normalized


def ensure_schedule(
    *,
    start_date: date | None,
    start_time: time | None,
    end_date: date,
    end_time: time | None,
) -> None:
    """Reject schedules that finish before they start.

    Times may carry their own UTC offset; both ends are compared as moments
    in the application timezone.
    """

    if start_date is None:
        return
    start = combine_in_app_timezone(start_date, start_time or time.min)
    end = combine_in_app_timezone(end_date, end_time or time.max)
    if start > end:
        raise ValueError("The task cannot end before it starts")


def clean_description(description: str | None) -> str | None:
    return (description or "").strip() or None
