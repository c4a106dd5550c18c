"""
Module: cronbot/commands/help.py

Usage text for the cron commands, shared by `%help`, `%cron help`, and every
validation failure reply.
"""
from cronbot.commands.parser import DEFAULT_PREFIX


def usage(prefix=DEFAULT_PREFIX):
    return (
        f"{prefix}cron add <minute 0-59|*> <hour 0-23|*> <day of month 1-31|*> "
        f"<month 1-12|*> <day of week 0-6 (0=Sunday)|*> <message> | "
        f"{prefix}cron list | {prefix}cron del <id>"
    )


def handle_help(command, request, registry):
    """Reply with the list of available commands."""
    return ["Commands available:", f"    {usage(request.prefix)}"]


def handle_unknown(command, request, registry):
    return [f"Usage: {usage(request.prefix)}"]
