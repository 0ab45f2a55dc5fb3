# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic request/response schemas."""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from teams_api.models.domain import Player, Trainer


class GroupCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    club: Optional[str] = Field(None, max_length=255)


class ImportSummary(BaseModel):
    """Outcome of one import run; always returned, even when every record failed."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    players_imported: int = 0
    trainers_imported: int = 0
    events_imported: int = 0
    shirt_sets_imported: int = 0
    errors: List[str] = []
    warnings: List[str] = []

    @property
    def total_imported(self) -> int:
        return (self.players_imported + self.trainers_imported
                + self.events_imported + self.shirt_sets_imported)


class ImportResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = "Import completed"
    summary: ImportSummary
    group_id: str


class MembersOut(BaseModel):
    players: List[Player]
    trainers: List[Trainer]


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[Any] = None
