"""Endpoints for the authenticated user's task list."""

from fastapi import APIRouter, Depends, Query, status

from app.application.use_cases.tasks import (
    create_task as create_task_uc,
    list_tasks as list_tasks_uc,
    update_task as update_task_uc,
    update_task_status as update_task_status_uc,
)
from app.domain.entities import Task, User
from app.infrastructure.datastore import DataStore, get_store
from app.interfaces.api.dependencies import get_current_user
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import TaskCreate, TaskRead, TaskStatusUpdate, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _to_read_model(task: Task) -> TaskRead:
    return TaskRead.model_validate(task)


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(
    task_in: TaskCreate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """Create a task for the caller; a ``task_created`` notification follows."""

    try:
        task = create_task_uc(store, user_id=current_user.id, **task_in.model_dump())
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(task)


@router.get("", response_model=list[TaskRead])
def list_tasks(
    status_filter: str | None = Query(None, alias="status"),
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """Return the caller's tasks in creation order."""

    try:
        tasks = list_tasks_uc(store, current_user.id, status=status_filter)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return [_to_read_model(task) for task in tasks]


@router.patch("/{task_id}", response_model=TaskRead)
def update_task_status(
    task_id: int,
    payload: TaskStatusUpdate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """Change the status of one of the caller's tasks."""

    try:
        task = update_task_status_uc(store, task_id, current_user.id, payload.status)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(task)


@router.put("/{task_id}", response_model=TaskRead)
def update_task(
    task_id: int,
    task_in: TaskUpdate,
    store: DataStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """Edit the title, description or schedule of one of the caller's tasks."""

    changes = task_in.model_dump(exclude_unset=True)
    try:
        task = update_task_uc(store, task_id, current_user.id, changes)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return _to_read_model(task)
