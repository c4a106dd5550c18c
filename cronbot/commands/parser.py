"""
Module: cronbot/commands/parser.py

Turns raw message text into a tagged command variant. Parsing never fails:
malformed input becomes an AddCommand with missing pieces (rejected later by
validation) or an UnknownCommand.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_PREFIX = "%"


@dataclass(frozen=True)
class AddCommand:
    fields: Tuple[str, ...]
    message: str


@dataclass(frozen=True)
class ListCommand:
    pass


@dataclass(frozen=True)
class DeleteCommand:
    id_token: str


@dataclass(frozen=True)
class HelpCommand:
    pass


@dataclass(frozen=True)
class UnknownCommand:
    verb: str


def _split_head(text):
    parts = text.split(None, 1)
    if not parts:
        return "", ""
    return parts[0], parts[1].strip() if len(parts) > 1 else ""


def parse_command(text, prefix=DEFAULT_PREFIX):
    """
    Parse a chat line into a command.

    Returns None when the line is not addressed to the cron handler at all,
    so the caller can ignore ordinary chatter.

    Examples:
        "%cron add 30 9 * * 1 standup" -> AddCommand(("30","9","*","*","1"), "standup")
        "%cron del 4"                   -> DeleteCommand("4")
        "%help"                         -> HelpCommand()
    """
    head, rest = _split_head(text)
    if head == f"{prefix}help":
        return HelpCommand()
    if head != f"{prefix}cron":
        return None

    verb, args = _split_head(rest)

    if verb == "add":
        tokens = args.split(None, 5)
        message = tokens[5].strip() if len(tokens) == 6 else ""
        return AddCommand(fields=tuple(tokens[:5]), message=message)
    if verb == "list":
        return ListCommand()
    if verb == "del":
        return DeleteCommand(id_token=args.split(None, 1)[0] if args else "")
    if verb == "help":
        return HelpCommand()
    return UnknownCommand(verb=verb)
