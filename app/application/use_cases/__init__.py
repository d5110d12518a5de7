"""Aggregate application use cases."""

from .tasks import create_task, list_tasks, update_task, update_task_status
from .users import authenticate_user, register_user

__all__ = [
    "authenticate_user",
    "create_task",
    "list_tasks",
    "register_user",
    "update_task",
    "update_task_status",
]
