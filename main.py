import asyncio
import contextlib
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure.datastore import initialize_datastore
from app.infrastructure.scheduler import run_reminder_scheduler
from app.interfaces.api.routes import register_routes
from app.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the data file at startup and run the reminder scheduler until shutdown."""

    settings = get_settings()
    store = initialize_datastore()

    scheduler = None
    if settings.scheduler_enabled:
        scheduler = asyncio.create_task(
            run_reminder_scheduler(
                store, interval_seconds=settings.reminder_interval_seconds
            )
        )
    try:
        yield
    finally:
        if scheduler is not None:
            scheduler.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await scheduler


def create_app() -> FastAPI:
    """Create and configure the main FastAPI application."""

    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Taskly API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_routes(app)
    return app


app = create_app()
