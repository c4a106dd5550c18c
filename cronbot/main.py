"""
Module: cronbot/main.py

Entry point for the cron bot.
Builds the bot context, wires `%cron`/`%help` text commands to the
CommandProcessor, starts the CronScheduler once connected, and logs
lifecycle events (ready, disconnect, resume, errors).
"""
import sys
import traceback

import nextcord

from cronbot.auth import channel_destination, user_identity
from cronbot.errors import TimezoneResolutionError
from cronbot.sink import chunk_lines
from cronbot.utils import log_message


def destination_for(message):
    """Direct messages answer to the author's identity, everything else to the channel."""
    if isinstance(message.channel, nextcord.DMChannel):
        return user_identity(message.author.id)
    return channel_destination(message.channel.id)


def register_events(bot, processor, scheduler, verbose=False):
    """Attach the lifecycle and message handlers to bot."""

    @bot.event
    async def on_ready():
        """
        Handler for the bot's ready event.

        Fires again after reconnects; the scheduler is only started once.
        """
        log_message(f'Logged in as {bot.user.name} ({bot.user.id})', "info")
        scheduler.start()

    @bot.event
    async def on_message(message):
        if message.author.bot:
            return
        if verbose:
            log_message(f"<{message.author} in {message.channel}> {message.content}", "debug")

        identity = user_identity(message.author.id)
        destination = destination_for(message)
        replies = processor.handle(message.content, identity, destination)
        if not replies:
            return
        log_message(f"Cron command from {identity} in {destination}: {message.content}", "info")
        for chunk in chunk_lines(replies):
            await message.channel.send(chunk)

    @bot.event
    async def on_error(event_method, *args, **kwargs):
        """
        Catch-all handler for unhandled errors in any event.

        Logs the event method name and full traceback when an error occurs.
        """
        tb = traceback.format_exc()
        log_message(f"Unhandled error in event {event_method}: {tb}", "error")

    @bot.event
    async def on_disconnect():
        log_message("Bot disconnected from Discord; cron jobs stay in memory.", "warning")

    @bot.event
    async def on_resumed():
        log_message("Bot resumed connection.", "info")


def main():
    log_message("Bot is starting up...")
    try:
        from cronbot import bot_context
        from cronbot.config import DISCORD_BOT_TOKEN, VERBOSE
    except (EnvironmentError, TimezoneResolutionError) as e:
        log_message(f"Startup failed: {e}", "error")
        sys.exit(1)

    register_events(
        bot_context.bot, bot_context.processor, bot_context.scheduler, verbose=VERBOSE
    )
    bot_context.bot.run(DISCORD_BOT_TOKEN)


if __name__ == "__main__":
    main()
