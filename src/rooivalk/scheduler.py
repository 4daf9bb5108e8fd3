"""
Cron-driven background jobs.

The message of the day runs on a cron expression evaluated in local time.
:func:`start` schedules a single job loop and :func:`stop` cancels it when the
client shuts down.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Awaitable, Callable

from croniter import croniter

logger = logging.getLogger(__name__)

_task: asyncio.Task | None = None


def next_run(cron_expr: str, base: datetime | None = None) -> datetime:
    """Next time ``cron_expr`` fires strictly after ``base`` (default: now)."""

    base = base or datetime.now().astimezone()
    return croniter(cron_expr, base).get_next(datetime)


async def start(cron_expr: str, job: Callable[[], Awaitable[object]]) -> asyncio.Task:
    """
    Run ``job`` every time ``cron_expr`` fires.

    Calling this again while the loop is alive returns the existing task, so
    reconnects that re-fire the ready event do not stack jobs. Exceptions from
    ``job`` are logged and the loop keeps going.
    """
    global _task

    if not croniter.is_valid(cron_expr):
        raise ValueError(f"Invalid cron expression: {cron_expr!r}")

    if _task and not _task.done():
        return _task

    async def _loop() -> None:
        while True:
            now = datetime.now().astimezone()
            fire_at = next_run(cron_expr, now)
            logger.info("Next scheduled run at %s", fire_at.isoformat())
            await asyncio.sleep(max((fire_at - now).total_seconds(), 0))
            try:
                await job()
            except Exception:
                logger.exception("Scheduled job failed")

    _task = asyncio.create_task(_loop())
    return _task


async def stop() -> None:
    """Cancel the scheduled job loop if running."""
    global _task

    if not _task:
        return

    _task.cancel()
    try:
        await _task
    except asyncio.CancelledError:
        pass
    _task = None
