"""
Module: cronbot/errors.py

Exception hierarchy for the cron subsystem.
"""


class CronError(Exception):
    """Base class for errors reported back to whoever issued a cron command."""


class ValidationError(CronError):
    """
    A command field failed validation.

    Attributes:
        field (str): Name of the offending field ("minute", "id", "fields", ...).
        detail (str): Human readable description sent back to the requester.
    """
    def __init__(self, field, detail):
        super().__init__(detail)
        self.field = field
        self.detail = detail


class TimezoneResolutionError(CronError):
    """The configured timezone name could not be resolved. Fatal at startup."""
    def __init__(self, name):
        super().__init__(f"Unknown timezone: {name!r}")
        self.name = name
