# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Sequence allocator unit tests against a real SQLite store.
Run:  pytest test_sequence_allocator.py -v
"""
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from teams_api.core.exceptions import AllocationFailure
from teams_api.repositories import SequenceRepository
from teams_api.services.sequence_allocator import DEFAULT_NAMESPACES, SequenceAllocator


@pytest.fixture
def allocator(engine):
    return SequenceAllocator(SequenceRepository(engine))


# ═══════════════════════════════════════════════════════════════════════════
# allocate()
# ═══════════════════════════════════════════════════════════════════════════
class TestAllocate:
    def test_first_call_returns_one(self, allocator):
        assert allocator.allocate("players") == "1"

    def test_returns_decimal_strings_in_sequence(self, allocator):
        ids = [allocator.allocate("events") for _ in range(5)]
        assert ids == ["1", "2", "3", "4", "5"]
        assert all(isinstance(i, str) for i in ids)

    def test_namespaces_are_isolated(self, allocator):
        allocator.allocate("groups")
        allocator.allocate("groups")
        allocator.allocate("groups")
        assert allocator.allocate("members") == "1"
        assert allocator.allocate("groups") == "4"

    def test_counter_is_durable_across_allocators(self, engine, allocator):
        allocator.allocate("teams")
        allocator.allocate("teams")
        other = SequenceAllocator(SequenceRepository(engine))
        assert other.allocate("teams") == "3"

    def test_current_reflects_last_value(self, allocator):
        assert allocator.current("invitations") == 0
        allocator.allocate("invitations")
        allocator.allocate("invitations")
        assert allocator.current("invitations") == 2

    def test_empty_namespace_rejected(self, allocator):
        with pytest.raises(ValueError):
            allocator.allocate("")


# ═══════════════════════════════════════════════════════════════════════════
# Concurrency
# ═══════════════════════════════════════════════════════════════════════════
class TestConcurrency:
    def test_concurrent_burst_is_gap_free_and_unique(self, allocator):
        for _ in range(3):
            allocator.allocate("members")
        base = allocator.current("members")

        n = 40
        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: allocator.allocate("members"), range(n)))

        assert len(set(ids)) == n
        assert sorted(int(i) for i in ids) == list(range(base + 1, base + n + 1))

    def test_concurrent_allocators_share_one_counter(self, engine):
        allocators = [SequenceAllocator(SequenceRepository(engine)) for _ in range(4)]
        with ThreadPoolExecutor(max_workers=4) as pool:
            ids = list(pool.map(lambda i: allocators[i % 4].allocate("events"), range(20)))
        assert sorted(int(i) for i in ids) == list(range(1, 21))

    def test_burst_in_one_namespace_leaves_other_untouched(self, allocator):
        allocator.allocate("shirtsets")
        with ThreadPoolExecutor(max_workers=4) as pool:
            list(pool.map(lambda _: allocator.allocate("teams"), range(12)))
        assert allocator.allocate("shirtsets") == "2"


# ═══════════════════════════════════════════════════════════════════════════
# bootstrap()
# ═══════════════════════════════════════════════════════════════════════════
class TestBootstrap:
    def test_creates_zero_counters(self, allocator):
        created = allocator.bootstrap()
        assert created == list(DEFAULT_NAMESPACES)
        assert all(allocator.current(ns) == 0 for ns in DEFAULT_NAMESPACES)
        assert allocator.allocate("groups") == "1"

    def test_is_idempotent_and_never_resets(self, allocator):
        allocator.allocate("members")
        allocator.allocate("members")
        created = allocator.bootstrap(["members", "events"])
        assert created == ["events"]
        assert allocator.current("members") == 2
        assert allocator.bootstrap(["members", "events"]) == []
        assert allocator.allocate("members") == "3"


# ═══════════════════════════════════════════════════════════════════════════
# Failures
# ═══════════════════════════════════════════════════════════════════════════
class TestFailures:
    def test_store_error_becomes_allocation_failure(self):
        repo = MagicMock()
        repo.increment.side_effect = OperationalError("UPDATE", {}, Exception("db down"))
        with pytest.raises(AllocationFailure) as exc_info:
            SequenceAllocator(repo).allocate("players")
        assert exc_info.value.namespace == "players"
        assert "db down" in str(exc_info.value)

    def test_missing_row_is_a_failure_not_a_value(self):
        repo = MagicMock()
        repo.increment.return_value = None
        with pytest.raises(AllocationFailure):
            SequenceAllocator(repo).allocate("players")

    def test_unmigrated_store_fails_cleanly(self, tmp_path):
        from teams_api.core.database import build_engine
        bare = build_engine(f"sqlite:///{tmp_path}/empty.db")
        try:
            with pytest.raises(AllocationFailure):
                SequenceAllocator(SequenceRepository(bare)).allocate("players")
        finally:
            bare.dispose()
