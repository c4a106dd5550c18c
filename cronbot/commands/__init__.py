"""
Module: cronbot/commands

Text command handling for `%cron add`, `%cron list`, `%cron del` and `%help`.
"""
from .parser import (
    AddCommand, DeleteCommand, HelpCommand, ListCommand, UnknownCommand, parse_command,
)
from .processor import CommandProcessor, Request
