"""Shared fixtures: a registry with an admin, a recording sink and a fake clock."""
from datetime import datetime, UTC

import pytest

from cronbot.auth import AuthorizationContext
from cronbot.commands import CommandProcessor
from cronbot.scheduler import JobRegistry
from tests.helpers import ADMIN, FakeClock, RecordingSink


@pytest.fixture
def registry():
    return JobRegistry(AuthorizationContext(admin=ADMIN))


@pytest.fixture
def processor(registry):
    return CommandProcessor(registry)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def clock():
    # Monday 2024-01-01 17:29:30 UTC
    return FakeClock(datetime(2024, 1, 1, 17, 29, 30, tzinfo=UTC))
