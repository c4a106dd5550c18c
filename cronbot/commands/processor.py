"""
Module: cronbot/commands/processor.py

Defines CommandProcessor: parses inbound text, dispatches the resulting
command variant to its handler, and turns cron errors into replies.
"""
from dataclasses import dataclass

from cronbot.commands.add import handle_add
from cronbot.commands.delete import handle_delete
from cronbot.commands.help import handle_help, handle_unknown, usage
from cronbot.commands.list import handle_list
from cronbot.commands.parser import (
    DEFAULT_PREFIX, AddCommand, DeleteCommand, HelpCommand, ListCommand,
    UnknownCommand, parse_command,
)
from cronbot.errors import CronError
from cronbot.utils import log_message


@dataclass(frozen=True)
class Request:
    """Who sent a command and where replies and new jobs go."""
    identity: str
    destination: str
    prefix: str = DEFAULT_PREFIX


HANDLERS = {
    AddCommand: handle_add,
    ListCommand: handle_list,
    DeleteCommand: handle_delete,
    HelpCommand: handle_help,
    UnknownCommand: handle_unknown,
}


class CommandProcessor:
    """
    Entry point for cron commands coming from the transport.

    Attributes:
      registry: Shared JobRegistry.
      prefix (str): Command prefix, "%" by default.
    """
    def __init__(self, registry, prefix=DEFAULT_PREFIX):
        self.registry = registry
        self.prefix = prefix

    def handle(self, text, identity, destination):
        """
        Process one chat line.

        Returns:
            list[str]: Reply lines for destination; empty when the line is not a
            cron command.
        """
        command = parse_command(text, self.prefix)
        if command is None:
            return []
        return self.dispatch(command, Request(identity, destination, self.prefix))

    def dispatch(self, command, request):
        handler = HANDLERS.get(type(command), handle_unknown)
        try:
            return handler(command, request, self.registry)
        except CronError as e:
            log_message(f"Rejected {type(command).__name__} from {request.identity}: {e}", "warning")
            return [f"❌ {e}", f"Usage: {usage(self.prefix)}"]
