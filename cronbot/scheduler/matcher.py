"""
Module: cronbot/scheduler/matcher.py

Exact-or-wildcard matching of a job's five time fields against a Moment.
"""
from cronbot.scheduler.job import ANY


def matches(job, moment) -> bool:
    """
    Return True iff every field of the job's schedule is ANY or equal to the
    corresponding component of moment.

    No ranges, steps or lists: "*/5" and "1,15" are rejected at validation.
    """
    return all(
        wanted is ANY or wanted == actual
        for wanted, actual in zip(job.schedule, moment)
    )
