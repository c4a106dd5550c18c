"""Tests for JobRegistry: id assignment, authorization on remove, snapshots."""
import dataclasses
import threading

import pytest

from cronbot.auth import AuthorizationContext
from cronbot.scheduler import ANY, JobRegistry, RemoveResult, Schedule
from tests.helpers import ADMIN, ALICE, BOB, TEAM

EVERY_MINUTE = Schedule(ANY, ANY, ANY, ANY, ANY)


class TestInsert:
    def test_ids_start_at_zero_and_increase(self, registry) -> None:
        ids = [registry.insert(EVERY_MINUTE, f"m{i}", TEAM, ALICE).id for i in range(3)]
        assert ids == [0, 1, 2]

    def test_deleted_ids_are_never_reused(self, registry) -> None:
        first = registry.insert(EVERY_MINUTE, "a", TEAM, ALICE)
        registry.insert(EVERY_MINUTE, "b", TEAM, ALICE)
        assert registry.remove(first.id, ALICE) is RemoveResult.REMOVED
        third = registry.insert(EVERY_MINUTE, "c", TEAM, ALICE)
        assert third.id == 2
        assert [job.id for job in registry.snapshot()] == [1, 2]

    def test_stored_job_carries_fields(self, registry) -> None:
        job = registry.insert(Schedule(30, 9, ANY, ANY, 1), "standup", TEAM, ALICE)
        assert registry.get(job.id) == job
        assert job.schedule.minute == 30
        assert job.owner == ALICE
        assert job.destination == TEAM


class TestRemove:
    def test_unknown_id_not_found(self, registry) -> None:
        assert registry.remove(42, ALICE) is RemoveResult.NOT_FOUND

    def test_non_owner_forbidden_and_unchanged(self, registry) -> None:
        job = registry.insert(EVERY_MINUTE, "a", TEAM, ALICE)
        assert registry.remove(job.id, BOB) is RemoveResult.FORBIDDEN
        assert registry.get(job.id) == job
        assert len(registry) == 1

    def test_owner_removes(self, registry) -> None:
        job = registry.insert(EVERY_MINUTE, "a", TEAM, ALICE)
        assert registry.remove(job.id, ALICE) is RemoveResult.REMOVED
        assert registry.remove(job.id, ALICE) is RemoveResult.NOT_FOUND
        assert len(registry) == 0

    def test_admin_removes_anything(self, registry) -> None:
        job = registry.insert(EVERY_MINUTE, "a", BOB, BOB)
        assert registry.remove(job.id, ADMIN) is RemoveResult.REMOVED

    def test_without_admin_only_owner_removes(self) -> None:
        registry = JobRegistry(AuthorizationContext(admin=None))
        job = registry.insert(EVERY_MINUTE, "a", TEAM, ALICE)
        assert registry.remove(job.id, ADMIN) is RemoveResult.FORBIDDEN


class TestSnapshot:
    def test_snapshot_is_detached_copy(self, registry) -> None:
        registry.insert(EVERY_MINUTE, "a", TEAM, ALICE)
        snap = registry.snapshot()
        registry.insert(EVERY_MINUTE, "b", TEAM, ALICE)
        assert isinstance(snap, tuple)
        assert len(snap) == 1
        assert len(registry.snapshot()) == 2

    def test_jobs_are_immutable(self, registry) -> None:
        job = registry.insert(EVERY_MINUTE, "a", TEAM, ALICE)
        with pytest.raises(dataclasses.FrozenInstanceError):
            job.message = "changed"

    def test_insertion_order_preserved(self, registry) -> None:
        for text in ("x", "y", "z"):
            registry.insert(EVERY_MINUTE, text, TEAM, ALICE)
        assert [job.message for job in registry.snapshot()] == ["x", "y", "z"]


class TestConcurrency:
    def test_parallel_inserts_get_unique_ids(self, registry) -> None:
        per_thread = 200
        results = []
        lock = threading.Lock()

        def worker():
            ids = [registry.insert(EVERY_MINUTE, "m", TEAM, ALICE).id for _ in range(per_thread)]
            with lock:
                results.extend(ids)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == len(set(results)) == 8 * per_thread
        assert len(registry) == 8 * per_thread

    def test_parallel_removes_remove_each_job_once(self, registry) -> None:
        jobs = [registry.insert(EVERY_MINUTE, "m", TEAM, ALICE) for _ in range(100)]
        outcomes = []
        lock = threading.Lock()

        def worker():
            for job in jobs:
                result = registry.remove(job.id, ALICE)
                with lock:
                    outcomes.append(result)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert outcomes.count(RemoveResult.REMOVED) == 100
        assert outcomes.count(RemoveResult.NOT_FOUND) == 300
        assert len(registry) == 0
