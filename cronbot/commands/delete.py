"""
Module: cronbot/commands/delete.py

Defines the `%cron del` handler. Only the job's owner or the admin may delete.
"""
from cronbot.errors import ValidationError
from cronbot.scheduler.registry import RemoveResult
from cronbot.utils import is_ascii_number


def parse_job_id(token):
    if not is_ascii_number(token):
        raise ValidationError("id", f"Invalid cron job id {token or '(missing)'}")
    return int(token)


def handle_delete(command, request, registry):
    job_id = parse_job_id(command.id_token)
    result = registry.remove(job_id, request.identity)
    if result is RemoveResult.NOT_FOUND:
        return [f"❌ Cron job {job_id} not found"]
    if result is RemoveResult.FORBIDDEN:
        return [f"❌ Not authorized to delete cron job {job_id}"]
    return [f"✅ Cron job {job_id} deleted"]
