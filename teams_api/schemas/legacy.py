# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Legacy snapshot, the denormalised export of the old local-storage client.

Parsed once at the boundary into these typed records; nothing downstream
touches the raw JSON. Legacy ids are opaque strings that only key the
per-run translation table and are never persisted.
"""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from teams_api.core.exceptions import MalformedSnapshot
from teams_api.models.domain import InvitationStatus, Shirt


def _legacy_id() -> Any:
    return Field(..., min_length=1, validation_alias=AliasChoices("id", "legacyId", "legacy_id"))


class LegacyRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LegacyPlayer(LegacyRecord):
    legacy_id: str = _legacy_id()
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    birth_year: Optional[int] = Field(None, alias="birthYear")
    level: int


class LegacyTrainer(LegacyRecord):
    legacy_id: str = _legacy_id()
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")


class LegacyShirtSet(LegacyRecord):
    legacy_id: str = _legacy_id()
    sponsor: str
    color: str
    shirts: list[Shirt] = []


class LegacyShirtAssignment(LegacyRecord):
    player_id: str = Field(..., alias="playerId")
    shirt_number: int = Field(..., alias="shirtNumber")


class LegacyTeam(LegacyRecord):
    legacy_id: str = _legacy_id()
    name: str
    strength: int = 2
    start_time: str = Field(..., alias="startTime")
    selected_players: list[str] = Field(default_factory=list, alias="selectedPlayers")
    trainer_id: Optional[str] = Field(None, alias="trainerId")
    shirt_set_id: Optional[str] = Field(None, alias="shirtSetId")
    shirt_assignments: Optional[list[LegacyShirtAssignment]] = Field(None, alias="shirtAssignments")


class LegacyInvitation(LegacyRecord):
    legacy_id: str = _legacy_id()
    player_id: str = Field(..., alias="playerId")
    status: InvitationStatus = "open"


class LegacyEvent(LegacyRecord):
    legacy_id: str = _legacy_id()
    name: str
    date: str
    max_players_per_team: int = Field(..., alias="maxPlayersPerTeam")
    location: Optional[str] = None
    teams: list[LegacyTeam] = []
    invitations: list[LegacyInvitation] = []

    @field_validator("teams", "invitations", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class LegacySnapshot(LegacyRecord):
    players: list[LegacyPlayer] = []
    trainers: list[LegacyTrainer] = []
    shirt_sets: list[LegacyShirtSet] = Field(default_factory=list, alias="shirtSets")
    events: list[LegacyEvent] = []

    @field_validator("players", "trainers", "shirt_sets", "events", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    def is_empty(self) -> bool:
        return not (self.players or self.trainers or self.shirt_sets or self.events)


def parse_snapshot(raw: Any) -> LegacySnapshot:
    """Validate a raw export document, raising MalformedSnapshot on any shape error."""
    if isinstance(raw, LegacySnapshot):
        return raw
    if not isinstance(raw, dict):
        raise MalformedSnapshot(
            f"snapshot must be a JSON object, got {type(raw).__name__}"
        )
    try:
        return LegacySnapshot.model_validate(raw)
    except ValidationError as exc:
        errors = [
            {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
            for err in exc.errors()
        ]
        raise MalformedSnapshot(
            f"snapshot has {len(errors)} structural error(s)", errors
        ) from exc
