"""Periodic reminder use cases."""

from .check_due_tasks import DUE_WINDOW_HOURS, check_due_tasks, classify_due_state
from .send_daily_summaries import send_daily_summaries

__all__ = [
    "DUE_WINDOW_HOURS",
    "check_due_tasks",
    "classify_due_state",
    "send_daily_summaries",
]
