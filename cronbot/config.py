"""
Module: cronbot/config.py

Loads settings from the environment (and a .env file, if present).
"""
import os
from dotenv import load_dotenv
from datetime import timedelta
from cronbot.utils import parse_interval, interval_to_timedelta, is_ascii_number

load_dotenv()

DISCORD_BOT_TOKEN = os.getenv('DISCORD_BOT_TOKEN')

if not DISCORD_BOT_TOKEN:
    raise EnvironmentError("Missing DISCORD_BOT_TOKEN in .env file")

# Discord user id of the cron admin; unset means nobody has admin rights
RAW_ADMIN_ID = os.getenv("CRON_ADMIN_ID", "").strip()
if RAW_ADMIN_ID and not is_ascii_number(RAW_ADMIN_ID):
    raise EnvironmentError(f"CRON_ADMIN_ID must be a numeric Discord user id, got {RAW_ADMIN_ID!r}")
CRON_ADMIN_ID = int(RAW_ADMIN_ID or "0") or None

CRON_TIMEZONE = os.getenv("CRON_TIMEZONE", "America/Los_Angeles")

DELIVER_LATE = interval_to_timedelta(
    *parse_interval(os.getenv('DELIVER_LATE', '2min'))
) or timedelta(minutes=2)

COMMAND_PREFIX = os.getenv("COMMAND_PREFIX", "%")

VERBOSE = os.getenv("VERBOSE", "").lower() in ("1", "true", "yes", "on")

LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
