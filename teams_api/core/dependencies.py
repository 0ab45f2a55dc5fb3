# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire repositories and services.
"""
from teams_api.core.database import engine
from teams_api.repositories import GroupRepository, RosterRepository, SequenceRepository
from teams_api.services.group_service import GroupService
from teams_api.services.import_reconciler import ImportReconciler
from teams_api.services.sequence_allocator import SequenceAllocator

# ── Singleton repository instances ──
_sequence_repo = SequenceRepository(engine)
_group_repo = GroupRepository(engine)
_roster_repo = RosterRepository(engine)

# ── Service instances (with injected dependencies) ──
_allocator = SequenceAllocator(_sequence_repo)
_group_service = GroupService(_group_repo, _roster_repo, _allocator)
_import_reconciler = ImportReconciler(_allocator, _roster_repo)


# ── FastAPI dependency functions ──
def get_allocator() -> SequenceAllocator:
    return _allocator


def get_group_service() -> GroupService:
    return _group_service


def get_import_reconciler() -> ImportReconciler:
    return _import_reconciler


def get_group_repo() -> GroupRepository:
    return _group_repo


def get_roster_repo() -> RosterRepository:
    return _roster_repo
