"""
Module: cronbot/scheduler/job.py

Provides the CronJob record, the validated Schedule fields, and the Moment a
job is evaluated against.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple, Optional

from cronbot.auth import is_channel

# Wildcard value for a time field.
ANY = None

FIELD_NAMES = ("minute", "hour", "day", "month", "weekday")

# Inclusive bounds per field; weekday 0 is Sunday.
FIELD_RANGES = {
    "minute": (0, 59),
    "hour": (0, 23),
    "day": (1, 31),
    "month": (1, 12),
    "weekday": (0, 6),
}


class Schedule(NamedTuple):
    """Five validated time fields, each an int within FIELD_RANGES or ANY."""
    minute: Optional[int] = ANY
    hour: Optional[int] = ANY
    day: Optional[int] = ANY
    month: Optional[int] = ANY
    weekday: Optional[int] = ANY


class Moment(NamedTuple):
    """Calendar components of one wall-clock minute in the configured timezone."""
    minute: int
    hour: int
    day: int
    month: int
    weekday: int

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Moment":
        # datetime.weekday() is Monday=0; cron convention is Sunday=0
        return cls(dt.minute, dt.hour, dt.day, dt.month, (dt.weekday() + 1) % 7)


def _fmt(value):
    return "*" if value is ANY else str(value)


@dataclass(frozen=True)
class CronJob:
    """
    A recurring announcement.

    Attributes:
        id (int): Registry-assigned id, never reused.
        schedule (Schedule): Minute, hour, day, month and weekday fields.
        message (str): Text announced when the job fires.
        destination (str): Channel or private identity the job announces to.
        owner (str): Identity of the job's creator.
    """
    id: int
    schedule: Schedule
    message: str
    destination: str
    owner: str

    @property
    def is_channel_job(self) -> bool:
        return is_channel(self.destination)

    def announcement(self) -> str:
        """Text sent when the job fires: attributed in channels, verbatim in private."""
        if self.is_channel_job:
            return f"{self.owner} said: {self.message}"
        return self.message

    def describe(self) -> str:
        s = self.schedule
        return (
            f"{{ id: {self.id} min: {_fmt(s.minute)} hour: {_fmt(s.hour)} "
            f"day: {_fmt(s.day)} month: {_fmt(s.month)} wday: {_fmt(s.weekday)} "
            f"dest: {self.destination} owner: {self.owner} msg: {self.message} }}"
        )
