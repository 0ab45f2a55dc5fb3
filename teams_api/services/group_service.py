# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic for groups and their rosters."""
from typing import Any, Dict, Optional

from teams_api.core.exceptions import GroupNotFound
from teams_api.core.logging import get_logger
from teams_api.models.domain import Group
from teams_api.repositories import GroupRepository, RosterRepository
from teams_api.services.sequence_allocator import SequenceAllocator

logger = get_logger(__name__)


class GroupService:
    def __init__(self, group_repo: GroupRepository, roster_repo: RosterRepository,
                 allocator: SequenceAllocator):
        self._groups = group_repo
        self._roster = roster_repo
        self._allocator = allocator

    def create_group(self, name: str, club: Optional[str] = None) -> Group:
        group_id = self._allocator.allocate("groups")
        result = self._groups.create_group(group_id, name, club)
        logger.info("Group created id=%s name=%s", group_id, name)
        return Group(**result)

    def get_group(self, group_id: str) -> Optional[Group]:
        row = self._groups.get_group(group_id)
        return Group(**row) if row else None

    def require_group(self, group_id: str) -> Group:
        group = self.get_group(group_id)
        if group is None:
            raise GroupNotFound(group_id)
        return group

    def list_members(self, group_id: str) -> Dict[str, Any]:
        self.require_group(group_id)
        return {
            "players": self._roster.list_players(group_id),
            "trainers": self._roster.list_trainers(group_id),
        }

    def list_events(self, group_id: str):
        self.require_group(group_id)
        return self._roster.list_events(group_id)

    def list_shirt_sets(self, group_id: str):
        self.require_group(group_id)
        return self._roster.list_shirt_sets(group_id)
