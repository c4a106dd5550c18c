"""
Module: cronbot/commands/list.py

Defines the `%cron list` handler.
"""


def visible_jobs(registry, destination):
    """Jobs from a registry snapshot that may be shown at destination."""
    return [job for job in registry.snapshot() if registry.auth.can_view(job, destination)]


def handle_list(command, request, registry):
    """
    List the cron jobs visible from the caller's destination: jobs of the
    current channel or private chat, plus every channel job when the admin
    lists from a private chat.
    """
    jobs = visible_jobs(registry, request.destination)
    if not jobs:
        return ["ℹ️ No cron jobs."]
    return [f"Cron jobs ({len(jobs)}):"] + [f"    {job.describe()}" for job in jobs]
