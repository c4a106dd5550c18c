"""Fakes and identities shared by the test modules."""
import asyncio
from datetime import timedelta


ADMIN = "<@1>"
ALICE = "<@100>"
BOB = "<@200>"
TEAM = "#10"
RANDOM = "#20"


class RecordingSink:
    """Collects (destination, text) pairs; destinations in fail_for raise."""

    def __init__(self, fail_for=(), scheduler=None):
        self.sent = []
        self.fail_for = set(fail_for)
        self.states = []
        self.scheduler = scheduler

    async def send(self, destination, text):
        if self.scheduler is not None:
            self.states.append(self.scheduler.state)
        if destination in self.fail_for:
            raise LookupError(f"Unknown destination {destination}")
        self.sent.append((destination, text))


class FakeClock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


class FakeSleeper:
    """
    Stands in for asyncio.sleep: advances the clock by the requested delay plus
    an optional per-call skew, and cancels the loop after max_calls sleeps.
    """

    def __init__(self, clock, skews=(), max_calls=2):
        self.clock = clock
        self.skews = list(skews)
        self.max_calls = max_calls
        self.calls = 0

    async def __call__(self, delay):
        self.calls += 1
        if self.calls >= self.max_calls:
            raise asyncio.CancelledError()
        skew = self.skews.pop(0) if self.skews else 0
        self.clock.now += timedelta(seconds=delay + skew)


