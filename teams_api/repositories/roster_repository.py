# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: group-scoped members, shirt sets and events.

Implements the write side consumed by the legacy import (``create_*``) and
the read side used by the roster endpoints. Every create is one
transaction; an event row embeds its teams and invitations as JSON so it is
never stored half-built.
"""
import json
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from teams_api.core.exceptions import PersistenceFailure
from teams_api.core.logging import get_logger
from teams_api.models.domain import Event, Player, ShirtSet, Trainer

logger = get_logger(__name__)

MEMBER_COLS = "id, group_id, role, first_name, last_name, birth_year, birth_date, level, email"
SHIRT_SET_COLS = "id, group_id, sponsor, color, shirts, active"
EVENT_COLS = "id, group_id, name, event_date, max_players_per_team, location, teams, invitations"


def _json_col(value: Any) -> Any:
    if value is None:
        return []
    return value if isinstance(value, (list, dict)) else json.loads(value)


def _by_id(items: list) -> list:
    """Ids are decimal strings; order numerically, not lexically."""
    return sorted(items, key=lambda item: int(item.id) if item.id.isdigit() else 0)


def _row_to_player(row) -> Player:
    return Player(id=str(row[0]), group_id=row[1], first_name=row[3] or "",
                  last_name=row[4] or "", birth_year=row[5], birth_date=row[6],
                  level=row[7])


def _row_to_trainer(row) -> Trainer:
    return Trainer(id=str(row[0]), group_id=row[1], first_name=row[3] or "",
                   last_name=row[4] or "", email=row[8])


def _row_to_shirt_set(row) -> ShirtSet:
    return ShirtSet(id=str(row[0]), group_id=row[1], sponsor=row[2], color=row[3],
                    shirts=_json_col(row[4]), active=bool(row[5]))


def _row_to_event(row) -> Event:
    return Event(id=str(row[0]), group_id=row[1], name=row[2], date=row[3],
                 max_players_per_team=row[4], location=row[5],
                 teams=_json_col(row[6]), invitations=_json_col(row[7]))


class RosterRepository:
    """SQL-backed repository gateway for group-scoped entities."""

    def __init__(self, engine: Engine):
        self._engine = engine

    # ── Write ──────────────────────────────────────────────────────────

    def create_player(self, player: Player) -> Player:
        self._insert("player", player.id, """
            INSERT INTO members
                (id, group_id, role, first_name, last_name, birth_year, birth_date,
                 level, email, created_at, updated_at)
            VALUES
                (:id, :group_id, 'player', :first_name, :last_name, :birth_year,
                 :birth_date, :level, NULL, :ts, :ts)
        """, {"id": player.id, "group_id": player.group_id,
              "first_name": player.first_name, "last_name": player.last_name,
              "birth_year": player.birth_year, "birth_date": player.birth_date,
              "level": player.level})
        return player

    def create_trainer(self, trainer: Trainer) -> Trainer:
        self._insert("trainer", trainer.id, """
            INSERT INTO members
                (id, group_id, role, first_name, last_name, email, created_at, updated_at)
            VALUES
                (:id, :group_id, 'trainer', :first_name, :last_name, :email, :ts, :ts)
        """, {"id": trainer.id, "group_id": trainer.group_id,
              "first_name": trainer.first_name, "last_name": trainer.last_name,
              "email": trainer.email})
        return trainer

    def create_shirt_set(self, shirt_set: ShirtSet) -> ShirtSet:
        shirts = [s.model_dump(by_alias=True) for s in shirt_set.shirts]
        self._insert("shirt set", shirt_set.id, """
            INSERT INTO shirt_sets
                (id, group_id, sponsor, color, shirts, active, created_at, updated_at)
            VALUES
                (:id, :group_id, :sponsor, :color, :shirts, :active, :ts, :ts)
        """, {"id": shirt_set.id, "group_id": shirt_set.group_id,
              "sponsor": shirt_set.sponsor, "color": shirt_set.color,
              "shirts": json.dumps(shirts), "active": shirt_set.active})
        return shirt_set

    def create_event(self, event: Event) -> Event:
        teams = [t.model_dump(by_alias=True, exclude_none=True) for t in event.teams]
        invitations = [i.model_dump(by_alias=True) for i in event.invitations]
        self._insert("event", event.id, """
            INSERT INTO events
                (id, group_id, name, event_date, max_players_per_team, location,
                 teams, invitations, created_at, updated_at)
            VALUES
                (:id, :group_id, :name, :event_date, :max_players, :location,
                 :teams, :invitations, :ts, :ts)
        """, {"id": event.id, "group_id": event.group_id, "name": event.name,
              "event_date": event.date, "max_players": event.max_players_per_team,
              "location": event.location, "teams": json.dumps(teams),
              "invitations": json.dumps(invitations)})
        return event

    def _insert(self, entity: str, entity_id: str, sql: str, params: Dict[str, Any]):
        params["ts"] = datetime.now(timezone.utc).isoformat()
        try:
            with self._engine.begin() as conn:
                conn.execute(text(sql), params)
        except SQLAlchemyError as exc:
            logger.warning("Persist failed entity=%s id=%s: %s", entity, entity_id, exc)
            raise PersistenceFailure(entity, entity_id, exc) from exc

    # ── Read ───────────────────────────────────────────────────────────

    def list_players(self, group_id: str) -> List[Player]:
        return _by_id(self._select(f"SELECT {MEMBER_COLS} FROM members "
                                   "WHERE group_id = :gid AND role = 'player'",
                                   group_id, _row_to_player))

    def list_trainers(self, group_id: str) -> List[Trainer]:
        return _by_id(self._select(f"SELECT {MEMBER_COLS} FROM members "
                                   "WHERE group_id = :gid AND role = 'trainer'",
                                   group_id, _row_to_trainer))

    def list_shirt_sets(self, group_id: str) -> List[ShirtSet]:
        return _by_id(self._select(f"SELECT {SHIRT_SET_COLS} FROM shirt_sets "
                                   "WHERE group_id = :gid AND active = :active",
                                   group_id, _row_to_shirt_set, active=True))

    def list_events(self, group_id: str) -> List[Event]:
        events = _by_id(self._select(f"SELECT {EVENT_COLS} FROM events WHERE group_id = :gid",
                                     group_id, _row_to_event))
        return sorted(events, key=lambda e: e.date)

    def get_event(self, event_id: str) -> Optional[Event]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text(f"SELECT {EVENT_COLS} FROM events WHERE id = :id"),
                {"id": event_id},
            ).fetchone()
        return _row_to_event(row) if row else None

    def _select(self, sql: str, group_id: str, convert: Callable, **params) -> list:
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql), {"gid": group_id, **params}).fetchall()
        return [convert(r) for r in rows]
