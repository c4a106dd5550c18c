"""
Module: cronbot/scheduler/manager.py

Defines CronScheduler: a background asyncio task that wakes on every whole
minute, evaluates the JobRegistry against that minute in the configured
timezone and dispatches matching jobs through a message sink.
Includes catch-up for minutes missed within a late-delivery window.
"""
import asyncio
from datetime import datetime, timedelta, UTC
from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from cronbot.errors import TimezoneResolutionError
from cronbot.scheduler.job import Moment
from cronbot.scheduler.matcher import matches
from cronbot.utils import log_message

ONE_MINUTE = timedelta(minutes=1)


def resolve_timezone(name):
    """
    Resolve an IANA timezone name once at startup.

    Raises:
        TimezoneResolutionError: If the name is empty or unknown.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, TypeError, OSError) as e:
        raise TimezoneResolutionError(name) from e


def floor_minute(dt):
    return dt.replace(second=0, microsecond=0)


def ceil_minute(dt):
    floored = floor_minute(dt)
    return floored if floored == dt else floored + ONE_MINUTE


class SchedulerState(Enum):
    IDLE = "idle"
    FIRING = "firing"


class CronScheduler:
    """
    Fires registry jobs at most once per calendar minute.

    Responsibilities:
      - Sleep until the next minute boundary, computed explicitly.
      - Fire every boundary passed since the last pass exactly once, in order.
      - Skip boundaries older than the late-delivery window.
      - Log and carry on when a single dispatch fails.

    Attributes:
      registry: JobRegistry to read jobs from.
      sink: Object with a coroutine send(destination, text).
      timezone: tzinfo the five job fields are read in.
      deliver_late: How old a missed boundary may be and still fire.
      state: SchedulerState, IDLE between passes and FIRING during one.
      task: The asyncio.Task running the loop, or None.
    """
    def __init__(self, registry, sink, timezone, deliver_late=timedelta(minutes=2),
                 clock=None, sleep=asyncio.sleep):
        """
        Initialize the CronScheduler.

        Args:
            registry: Shared JobRegistry.
            sink: Message sink used for announcements.
            timezone: Resolved tzinfo (see resolve_timezone).
            deliver_late: Late-delivery window for missed minutes.
            clock: Callable returning an aware UTC datetime. Defaults to the wall clock.
            sleep: Coroutine function used to wait. Defaults to asyncio.sleep.
        """
        self.registry = registry
        self.sink = sink
        self.timezone = timezone
        self.deliver_late = deliver_late
        self.clock = clock or (lambda: datetime.now(UTC))
        self.sleep = sleep
        self.state = SchedulerState.IDLE
        self.task = None
        self.last_fired = None

    def start(self):
        """Start the loop on the running event loop. Calling it twice is a no-op."""
        if self.task and not self.task.done():
            return self.task
        self.task = asyncio.get_running_loop().create_task(self.run())
        return self.task

    async def stop(self):
        """Cancel the loop and wait for it to finish."""
        task, self.task = self.task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def run(self):
        """
        Main loop, runs until cancelled.

        Flow:
        1. Compute the next whole minute after now.
        2. Sleep until it. Early wake-ups just sleep again.
        3. Fire every boundary up to now that has not fired yet, dropping those
           older than deliver_late with one warning.
        """
        next_tick = floor_minute(self.clock()) + ONE_MINUTE
        log_message(
            f"Cron scheduler started ({self.timezone}), first pass at {next_tick.strftime('%Y-%m-%d %H:%M UTC')}",
            "info"
        )
        try:
            while True:
                await self._wait_until(next_tick)
                now = self.clock()

                # oldest boundary whose age is still within deliver_late
                cutoff = ceil_minute(now - self.deliver_late)
                if next_tick < cutoff:
                    skipped = int((cutoff - next_tick) / ONE_MINUTE)
                    log_message(
                        f"Skipping {skipped} cron minute(s) from {next_tick.strftime('%Y-%m-%d %H:%M UTC')} (past DELIVER_LATE).",
                        "warning"
                    )
                    next_tick = cutoff

                while next_tick <= now:
                    await self.fire(next_tick)
                    next_tick += ONE_MINUTE
        except asyncio.CancelledError:
            log_message("Cron scheduler cancelled", "warning")
            raise

    async def fire(self, tick):
        """Run one pass for the UTC minute boundary tick."""
        self.last_fired = tick
        return await self.fire_pass(Moment.from_datetime(tick.astimezone(self.timezone)))

    async def fire_pass(self, moment):
        """
        Evaluate every job against moment and dispatch the matches.

        Returns:
            list: The jobs that matched, in registry order.
        """
        self.state = SchedulerState.FIRING
        try:
            due = [job for job in self.registry.snapshot() if matches(job, moment)]
            if due:
                log_message(f"Cron pass {moment}: {len(due)} job(s) due", "debug")
            for job in due:
                await self._dispatch(job)
            return due
        finally:
            self.state = SchedulerState.IDLE

    async def _dispatch(self, job):
        try:
            await self.sink.send(job.destination, job.announcement())
            log_message(f"Dispatched cron job {job.id} to {job.destination}", "info")
        except Exception as exc:
            log_message(f"Cron job {job.id} dispatch to {job.destination} failed: {exc}", "error")

    async def _wait_until(self, target_time):
        """
        Sleep until the specified UTC datetime.

        Args:
            target_time: The datetime to wait for.
        """
        delay = (target_time - self.clock()).total_seconds()
        if delay > 0:
            await self.sleep(delay)
