from fastapi import FastAPI

from .auth import router as auth_router
from .notifications import router as notifications_router
from .tasks import router as tasks_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(tasks_router)
    app.include_router(notifications_router)
