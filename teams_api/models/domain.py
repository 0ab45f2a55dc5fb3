# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.

Every group-scoped entity carries a sequence-allocated ``id`` (decimal
string) and the ``group_id`` of its owning group. Wire form is camelCase.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ShirtSize = Literal["128", "140", "152", "164", "XS", "S", "M", "L", "XL"]
InvitationStatus = Literal["open", "accepted", "declined", "injured"]


class DomainModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Group(DomainModel):
    id: str
    name: str
    club: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Player(DomainModel):
    id: str
    group_id: str
    first_name: str
    last_name: str
    birth_year: Optional[int] = None
    birth_date: Optional[str] = None
    level: int


class Trainer(DomainModel):
    id: str
    group_id: str
    first_name: str
    last_name: str
    email: Optional[str] = None


class Shirt(DomainModel):
    number: int
    size: ShirtSize
    is_goalkeeper: bool = False


class ShirtSet(DomainModel):
    id: str
    group_id: str
    sponsor: str
    color: str
    shirts: list[Shirt] = []
    active: bool = True


class ShirtAssignment(DomainModel):
    player_id: str
    shirt_number: int


class Team(DomainModel):
    """A team embedded in an event; references point at member/shirt-set ids."""
    id: str
    name: str
    strength: int = 2
    start_time: str
    selected_players: list[str] = []
    trainer_id: Optional[str] = None
    shirt_set_id: Optional[str] = None
    shirt_assignments: Optional[list[ShirtAssignment]] = None


class Invitation(DomainModel):
    id: str
    player_id: str
    status: InvitationStatus = "open"


class Event(DomainModel):
    id: str
    group_id: str
    name: str
    date: str
    max_players_per_team: int
    location: Optional[str] = None
    teams: list[Team] = []
    invitations: list[Invitation] = []
