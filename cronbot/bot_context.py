"""
Module: cronbot/bot_context.py

Sets up the Discord bot and the cron subsystem: one JobRegistry shared by the
CommandProcessor and the CronScheduler, and the DiscordSink both reply through.
"""
import nextcord
from nextcord.ext import commands

from cronbot.auth import AuthorizationContext, user_identity
from cronbot.commands import CommandProcessor
from cronbot.config import CRON_ADMIN_ID, CRON_TIMEZONE, DELIVER_LATE, COMMAND_PREFIX, LOG_LEVEL
from cronbot.scheduler import CronScheduler, JobRegistry, resolve_timezone
from cronbot.sink import DiscordSink
from cronbot.utils import log_message, set_log_level

set_log_level(LOG_LEVEL)

# Raises TimezoneResolutionError before anything starts
timezone = resolve_timezone(CRON_TIMEZONE)

intents = nextcord.Intents.default()
intents.message_content = True
bot = commands.Bot(intents=intents)

auth = AuthorizationContext(admin=user_identity(CRON_ADMIN_ID) if CRON_ADMIN_ID else None)
registry = JobRegistry(auth)
sink = DiscordSink(bot)
processor = CommandProcessor(registry, prefix=COMMAND_PREFIX)
scheduler = CronScheduler(registry, sink, timezone, deliver_late=DELIVER_LATE)

if auth.admin is None:
    log_message("CRON_ADMIN_ID not set, no identity has cron admin rights", "warning")
