"""
Module: cronbot/sink.py

DiscordSink delivers text to a destination string: "#<channel id>" for a guild
channel, "<@user id>" for a direct message.
"""
import re

import nextcord

from cronbot.auth import CHANNEL_PREFIX

MESSAGE_LIMIT = 2000

_MENTION = re.compile(r"^<@!?(\d+)>$")


def chunk_lines(lines, limit=MESSAGE_LIMIT):
    """
    Join reply lines into as few messages as possible, each at most limit chars.
    A single line longer than limit is hard-split. Blank lines are kept, but
    a chunk with nothing but whitespace is dropped since it cannot be sent.
    """
    chunks, current, pending = [], "", False
    for line in lines:
        while len(line) > limit:
            if pending:
                chunks.append(current)
                current, pending = "", False
            chunks.append(line[:limit])
            line = line[limit:]
        candidate = f"{current}\n{line}" if pending else line
        if len(candidate) > limit:
            chunks.append(current)
            current = line
        else:
            current = candidate
        pending = True
    if pending:
        chunks.append(current)
    return [chunk for chunk in chunks if chunk.strip()]


class DiscordSink:
    """
    Message sink backed by a nextcord client.

    Attributes:
      bot: nextcord Client/Bot used to resolve channels and users.
    """
    def __init__(self, bot):
        self.bot = bot

    async def resolve(self, destination):
        """
        Return a messageable for destination.

        Raises:
            LookupError: Malformed destination, or nothing by that id.
        """
        if destination.startswith(CHANNEL_PREFIX):
            raw_id = destination[len(CHANNEL_PREFIX):]
            if not raw_id.isdigit():
                raise LookupError(f"Malformed channel destination {destination}")
            channel = self.bot.get_channel(int(raw_id))
            if channel is None:
                try:
                    channel = await self.bot.fetch_channel(int(raw_id))
                except nextcord.NotFound as e:
                    raise LookupError(f"Unknown channel {destination}") from e
            return channel

        match = _MENTION.match(destination)
        if not match:
            raise LookupError(f"Malformed private destination {destination}")
        try:
            return await self.bot.fetch_user(int(match.group(1)))
        except nextcord.NotFound as e:
            raise LookupError(f"Unknown user {destination}") from e

    async def send(self, destination, text):
        target = await self.resolve(destination)
        for chunk in chunk_lines(text.splitlines() or [text]):
            await target.send(chunk)
