"""Use cases for managing a user's tasks."""

from .create_task import create_task
from .list_tasks import list_tasks
from .update_task import update_task
from .update_task_status import update_task_status

__all__ = [
    "create_task",
    "list_tasks",
    "update_task",
    "update_task_status",
]
