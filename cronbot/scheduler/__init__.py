"""
Package: cronbot/scheduler

Provides CronJob, JobRegistry, the field matcher, and the CronScheduler loop.
"""
from .job import ANY, CronJob, Moment, Schedule
from .matcher import matches
from .registry import JobRegistry, RemoveResult
from .manager import CronScheduler, SchedulerState, resolve_timezone
