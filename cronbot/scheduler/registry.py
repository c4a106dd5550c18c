"""
Module: cronbot/scheduler/registry.py

Defines JobRegistry: the in-memory, lock-guarded collection of cron jobs shared
by the command handlers and the CronScheduler. Jobs are lost on restart.
"""
import itertools
import threading
from enum import Enum

from cronbot.auth import AuthorizationContext
from cronbot.scheduler.job import CronJob
from cronbot.utils import log_message


class RemoveResult(Enum):
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


class JobRegistry:
    """
    Ordered mapping of job id to CronJob.

    Every public method holds the registry lock for its whole duration, so no
    caller observes a partially applied insert or remove. Ids come from a
    counter that only moves forward, so deleted ids are never handed out again.

    Attributes:
      auth: AuthorizationContext deciding who may delete a job.
    """
    def __init__(self, auth=None):
        self.auth = auth or AuthorizationContext()
        self._jobs = {}
        self._ids = itertools.count()
        self._lock = threading.Lock()

    def insert(self, schedule, message, destination, owner) -> CronJob:
        """
        Assign the next id, store the job and return it.

        Args:
            schedule: Validated Schedule.
            message (str): Text to announce.
            destination (str): Where to announce.
            owner (str): Identity of the creator.
        """
        with self._lock:
            job = CronJob(
                id=next(self._ids),
                schedule=schedule,
                message=message,
                destination=destination,
                owner=owner,
            )
            self._jobs[job.id] = job
        log_message(f"Cron job {job.id} added by {owner} for {destination}", "info")
        return job

    def remove(self, job_id, requester) -> RemoveResult:
        """
        Delete a job if the requester is its owner or the admin.

        Returns:
            RemoveResult: NOT_FOUND, FORBIDDEN (registry unchanged) or REMOVED.
        """
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                result = RemoveResult.NOT_FOUND
            elif not self.auth.can_delete(job, requester):
                result = RemoveResult.FORBIDDEN
            else:
                del self._jobs[job_id]
                result = RemoveResult.REMOVED
        log_message(f"Remove cron job {job_id} by {requester}: {result.value}", "info")
        return result

    def snapshot(self):
        """Point-in-time copy of all jobs in insertion order."""
        with self._lock:
            return tuple(self._jobs.values())

    def get(self, job_id):
        with self._lock:
            return self._jobs.get(job_id)

    def __len__(self):
        with self._lock:
            return len(self._jobs)
