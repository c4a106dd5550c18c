"""
Module: cronbot/commands/add.py

Defines the `%cron add` handler: validates the five time fields and stores a
new job owned by the requester, announcing to the requester's destination.
"""
from cronbot.errors import ValidationError
from cronbot.scheduler.job import ANY, FIELD_NAMES, FIELD_RANGES, Schedule
from cronbot.utils import is_ascii_number

WILDCARD = "*"


def parse_field(name, token):
    """
    Parse one raw time field.

    Returns ANY for the wildcard token, otherwise the integer value.

    Raises:
        ValidationError: Non-numeric token or value outside FIELD_RANGES[name].
    """
    if token == WILDCARD:
        return ANY
    if not is_ascii_number(token):
        raise ValidationError(name, f"Invalid {name}: {token} (expected a number or {WILDCARD})")
    value = int(token)
    low, high = FIELD_RANGES[name]
    if not low <= value <= high:
        raise ValidationError(name, f"Invalid {name}: {value} (expected {low}-{high})")
    return value


def validate_schedule(fields, message):
    """
    Validate raw add arguments and build a Schedule.

    Args:
        fields: Raw minute, hour, day, month and weekday tokens.
        message (str): Remainder of the line; must not be empty.
    """
    if len(fields) < len(FIELD_NAMES) or not message:
        raise ValidationError(
            "fields",
            f"Expected {len(FIELD_NAMES)} time fields followed by a message",
        )
    return Schedule(*(parse_field(name, token) for name, token in zip(FIELD_NAMES, fields)))


def handle_add(command, request, registry):
    """
    Handle `%cron add`.

    Nothing is stored unless every field validates.
    """
    schedule = validate_schedule(command.fields, command.message)
    job = registry.insert(
        schedule,
        command.message,
        destination=request.destination,
        owner=request.identity,
    )
    return [f"✅ Cron job created {job.describe()}"]
