# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package: gateway contract and SQL implementations."""
from typing import Protocol

from teams_api.models.domain import Event, Player, ShirtSet, Trainer
from teams_api.repositories.group_repository import GroupRepository
from teams_api.repositories.roster_repository import RosterRepository
from teams_api.repositories.sequence_repository import SequenceRepository


class RepositoryGateway(Protocol):
    """Write side the import needs.

    Each call receives a fully formed entity with references already
    rewritten, persists it atomically, and returns it or raises
    PersistenceFailure.
    """

    def create_player(self, player: Player) -> Player: ...

    def create_trainer(self, trainer: Trainer) -> Trainer: ...

    def create_shirt_set(self, shirt_set: ShirtSet) -> ShirtSet: ...

    def create_event(self, event: Event) -> Event: ...


__all__ = ["GroupRepository", "RepositoryGateway", "RosterRepository", "SequenceRepository"]
