import asyncio
from datetime import datetime

import pytest

from rooivalk import scheduler


def test_next_run_daily_at_eight():
    base = datetime(2024, 5, 1, 9, 30)
    assert scheduler.next_run("0 8 * * *", base) == datetime(2024, 5, 2, 8, 0)


def test_next_run_before_fire_time_same_day():
    base = datetime(2024, 5, 1, 7, 59)
    assert scheduler.next_run("0 8 * * *", base) == datetime(2024, 5, 1, 8, 0)


@pytest.mark.asyncio
async def test_start_rejects_invalid_expression():
    async def job():
        return None

    with pytest.raises(ValueError):
        await scheduler.start("not a cron", job)


@pytest.mark.asyncio
async def test_start_is_idempotent_and_stop_cancels():
    async def job():
        return None

    task = await scheduler.start("0 8 * * *", job)
    try:
        assert await scheduler.start("0 8 * * *", job) is task
    finally:
        await scheduler.stop()

    assert task.cancelled() or task.done()
    assert scheduler._task is None


@pytest.mark.asyncio
async def test_job_runs_when_schedule_fires(monkeypatch):
    ran = asyncio.Event()

    async def job():
        ran.set()

    monkeypatch.setattr(scheduler, "next_run", lambda expr, base=None: base)
    await scheduler.start("* * * * *", job)
    try:
        await asyncio.wait_for(ran.wait(), timeout=1)
    finally:
        await scheduler.stop()
