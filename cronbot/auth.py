"""
Module: cronbot/auth.py

Destination helpers and the admin-based authorization policy for cron jobs.

Destinations are plain strings: a channel is "#<channel id>", a private
conversation is the peer's identity ("<@user id>" on Discord).
"""
from dataclasses import dataclass
from typing import Optional

CHANNEL_PREFIX = "#"


def channel_destination(channel_id) -> str:
    """Destination string for a guild channel."""
    return f"{CHANNEL_PREFIX}{channel_id}"


def user_identity(user_id) -> str:
    """Identity (and private destination) string for a user id, in mention form."""
    return f"<@{user_id}>"


def is_channel(destination: str) -> bool:
    return destination.startswith(CHANNEL_PREFIX)


@dataclass(frozen=True)
class AuthorizationContext:
    """
    Single admin identity, fixed for the registry's lifetime.

    Attributes:
        admin (str or None): Identity granted cross-destination visibility and
            universal delete rights. None disables the admin role.
    """
    admin: Optional[str] = None

    def is_admin(self, identity: str) -> bool:
        return self.admin is not None and identity == self.admin

    def can_delete(self, job, requester: str) -> bool:
        """Only the job's owner or the admin may delete it."""
        return requester == job.owner or self.is_admin(requester)

    def can_view(self, job, destination: str) -> bool:
        """
        Visibility rule for listings.

        A job is visible from its own destination. The admin, listing from
        their private conversation, additionally sees every channel job.
        Private jobs of other identities are never visible.
        """
        if job.destination == destination:
            return True
        return self.is_admin(destination) and is_channel(job.destination)
