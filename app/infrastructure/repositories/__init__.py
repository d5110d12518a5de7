"""Repository implementations for infrastructure layer."""

from .notification_repository import NotificationRepository
from .task_repository import TaskRepository
from .user_repository import UserRepository, normalize_email

__all__ = [
    "NotificationRepository",
    "TaskRepository",
    "UserRepository",
    "normalize_email",
]
