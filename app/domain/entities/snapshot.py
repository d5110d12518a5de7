"""Domain entity grouping every persisted collection."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from .notification import Notification
from .task import Task
from .user import User


@dataclass
class Snapshot:
    """Full application state, loaded and saved as a single unit."""

    users: list[User] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)
    last_user_number: int = 0
    last_daily_summary_on: date | None = None


__all__ = ["Snapshot"]
