"""Background loop driving the periodic reminder use cases."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Callable

from anyio import to_thread

from app.application.use_cases.reminders import check_due_tasks, send_daily_summaries
from app.infrastructure.datastore import DataStore

logger = logging.getLogger(__name__)


def run_reminder_tick(store: DataStore, *, now: datetime | None = None) -> int:
    """Run one scanner pass and return how many notifications it produced."""

    due = check_due_tasks(store, now=now)
    summaries = send_daily_summaries(store, now=now)
    return len(due) + len(summaries)


async def run_reminder_scheduler(
    store: DataStore,
    *,
    interval_seconds: float,
    tick: Callable[[DataStore], int] = run_reminder_tick,
) -> None:
    """Run ``tick`` every ``interval_seconds`` until cancelled.

    Each tick runs in a worker thread and takes the store lock like any request
    handler. A failing tick is logged and the loop keeps going.
    """

    logger.info("Reminder scheduler started (interval=%ss)", interval_seconds)
    try:
        while True:
            await asyncio.sleep(interval_seconds)
            try:
                await to_thread.run_sync(tick, store)
            except Exception:
                logger.exception("Reminder scheduler tick failed")
    finally:
        logger.info("Reminder scheduler stopped")


__all__ = ["run_reminder_scheduler", "run_reminder_tick"]
