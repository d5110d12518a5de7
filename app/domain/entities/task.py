"""Domain entity representing a task owned by a user."""

from dataclasses import dataclass
from datetime import date, datetime, time

from app.utils import combine_in_app_timezone

TASK_STATUS_PENDING = "pending"
TASK_STATUS_COMPLETED = "completed"

TASK_STATUSES = (TASK_STATUS_PENDING, TASK_STATUS_COMPLETED)


@dataclass
class Task:
    """A unit of work scheduled by its owner."""

    id: int
    user_id: str
    title: str
    end_date: date
    status: str = TASK_STATUS_PENDING
    description: str | None = None
    start_date: date | None = None
    start_time: time | None = None
    end_time: time | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def due_at(self) -> datetime:
        """Moment the task is due, localized to the application timezone."""

        return combine_in_app_timezone(self.end_date, self.end_time)

    def is_completed(self) -> bool:
        return self.status == TASK_STATUS_COMPLETED


__all__ = [
    "Task",
    "TASK_STATUS_PENDING",
    "TASK_STATUS_COMPLETED",
    "TASK_STATUSES",
]
