# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: replay a legacy local-storage export into a group.

Phases run in a fixed order (players, trainers, shirt sets, then events)
because teams and invitations reference the entities of the first three.
Ids are allocated in snapshot order inside each phase; the writes of one
phase may run on a thread pool. The translation table is sealed once the
roster phases are done and only then read to rewrite event references.

Import is at-least-once: a record that fails is reported in the summary and
the run moves on; nothing already written is rolled back.
"""
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from teams_api.core.config import settings
from teams_api.core.exceptions import AllocationFailure, TeamsApiError
from teams_api.core.logging import get_logger
from teams_api.metrics import (
    IMPORT_DURATION, IMPORT_RECORDS, IMPORT_RUNS, IMPORT_UNRESOLVED_REFERENCES,
)
from teams_api.models.domain import (
    Event, Invitation, Player, ShirtAssignment, ShirtSet, Team, Trainer,
)
from teams_api.repositories import RepositoryGateway
from teams_api.schemas import ImportSummary
from teams_api.schemas.legacy import (
    LegacyEvent, LegacyInvitation, LegacyPlayer, LegacyShirtSet, LegacySnapshot,
    LegacyTeam, LegacyTrainer, parse_snapshot,
)
from teams_api.services.sequence_allocator import SequenceAllocator
from teams_api.services.translation import TranslationTable

logger = get_logger(__name__)

# Players and trainers live in one members collection and share its counter.
MEMBERS_NAMESPACE = "members"
SHIRT_SETS_NAMESPACE = "shirtsets"
EVENTS_NAMESPACE = "events"
TEAMS_NAMESPACE = "teams"
INVITATIONS_NAMESPACE = "invitations"


@dataclass
class _Pending:
    """One legacy record on its way through allocate → build → persist."""
    kind: str
    legacy_id: str
    label: str
    entity: Any = None
    error: Optional[str] = None
    warnings: List[str] = field(default_factory=list)
    future: Optional[Future] = None

    def fail(self, exc: Exception) -> None:
        self.error = f"Failed to import {self.kind} {self.legacy_id} ({self.label}): {exc}"


# ── Builders: legacy record + new id → target entity ──────────────────

def _build_player(record: LegacyPlayer, new_id: str, group_id: str) -> Player:
    return Player(id=new_id, group_id=group_id, first_name=record.first_name,
                  last_name=record.last_name, birth_year=record.birth_year,
                  level=record.level)


def _build_trainer(record: LegacyTrainer, new_id: str, group_id: str) -> Trainer:
    return Trainer(id=new_id, group_id=group_id, first_name=record.first_name,
                   last_name=record.last_name)


def _build_shirt_set(record: LegacyShirtSet, new_id: str, group_id: str) -> ShirtSet:
    return ShirtSet(id=new_id, group_id=group_id, sponsor=record.sponsor,
                    color=record.color, shirts=record.shirts)


def _person_label(record) -> str:
    return f"{record.first_name} {record.last_name}"


class ImportReconciler:
    def __init__(self, allocator: SequenceAllocator, gateway: RepositoryGateway,
                 max_workers: Optional[int] = None):
        self._allocator = allocator
        self._gateway = gateway
        self._max_workers = max(1, max_workers or settings.IMPORT_WORKERS)

    def import_snapshot(self, group_id: str, snapshot: Any) -> ImportSummary:
        """Import ``snapshot`` into the (already verified) group ``group_id``.

        Raises MalformedSnapshot before any id is allocated when the document
        has the wrong shape. Per-record failures end up in ``summary.errors``.
        """
        parsed: LegacySnapshot = parse_snapshot(snapshot)
        summary = ImportSummary()
        table = TranslationTable()
        started = time.monotonic()
        IMPORT_RUNS.inc()
        logger.info(
            "Import started group=%s players=%d trainers=%d shirt_sets=%d events=%d",
            group_id, len(parsed.players), len(parsed.trainers),
            len(parsed.shirt_sets), len(parsed.events),
            extra={"group_id": group_id},
        )

        with ThreadPoolExecutor(max_workers=self._max_workers,
                                thread_name_prefix="import") as pool:
            summary.players_imported = self._roster_phase(
                pool, summary, table, group_id, "player", parsed.players,
                MEMBERS_NAMESPACE, _build_player, _person_label,
                self._gateway.create_player,
            )
            summary.trainers_imported = self._roster_phase(
                pool, summary, table, group_id, "trainer", parsed.trainers,
                MEMBERS_NAMESPACE, _build_trainer, _person_label,
                self._gateway.create_trainer,
            )
            summary.shirt_sets_imported = self._roster_phase(
                pool, summary, table, group_id, "shirt set", parsed.shirt_sets,
                SHIRT_SETS_NAMESPACE, _build_shirt_set,
                lambda r: f"{r.sponsor} {r.color}",
                self._gateway.create_shirt_set,
            )

            # Barrier: every roster mapping is in place before events are rewritten.
            table.seal()

            pending = [self._prepare_event(record, group_id, table)
                       for record in parsed.events]
            summary.events_imported = self._persist_phase(
                pool, summary, "event", pending, self._gateway.create_event,
            )

        elapsed = time.monotonic() - started
        IMPORT_DURATION.observe(elapsed)
        logger.info(
            "Import finished group=%s players=%d trainers=%d shirt_sets=%d events=%d "
            "errors=%d warnings=%d seconds=%.3f",
            group_id, summary.players_imported, summary.trainers_imported,
            summary.shirt_sets_imported, summary.events_imported,
            len(summary.errors), len(summary.warnings), elapsed,
            extra={"group_id": group_id},
        )
        return summary

    # ── Phases ────────────────────────────────────────────────────────

    def _roster_phase(self, pool: ThreadPoolExecutor, summary: ImportSummary,
                      table: TranslationTable, group_id: str, kind: str,
                      records: list, namespace: str, build: Callable,
                      label: Callable, persist: Callable) -> int:
        pending = []
        for record in records:
            item = _Pending(kind, record.legacy_id, label(record))
            try:
                new_id = self._allocator.allocate(namespace)
            except AllocationFailure as exc:
                item.fail(exc)
                pending.append(item)
                continue
            table.record(record.legacy_id, new_id)
            try:
                item.entity = build(record, new_id, group_id)
            except Exception as exc:
                logger.error("Could not build %s %s", kind, record.legacy_id,
                             exc_info=True, extra={"group_id": group_id})
                item.fail(exc)
            pending.append(item)
        return self._persist_phase(pool, summary, kind, pending, persist)

    def _persist_phase(self, pool: ThreadPoolExecutor, summary: ImportSummary,
                       kind: str, pending: List[_Pending], persist: Callable) -> int:
        """Write every prepared record, then gather outcomes in snapshot order."""
        for item in pending:
            if item.error is None:
                item.future = pool.submit(persist, item.entity)

        imported = 0
        for item in pending:
            if item.future is not None:
                try:
                    item.future.result()
                except TeamsApiError as exc:
                    item.fail(exc)
                except Exception as exc:
                    logger.error("Unexpected error importing %s %s", kind, item.legacy_id,
                                 exc_info=True)
                    item.fail(exc)
                else:
                    imported += 1
                    summary.warnings.extend(item.warnings)
                    IMPORT_RECORDS.labels(kind=kind, outcome="imported").inc()
            if item.error is not None:
                logger.warning("Import record failed: %s", item.error)
                summary.errors.append(item.error)
                IMPORT_RECORDS.labels(kind=kind, outcome="failed").inc()
        return imported

    # ── Events ────────────────────────────────────────────────────────

    def _prepare_event(self, record: LegacyEvent, group_id: str,
                       table: TranslationTable) -> _Pending:
        """Allocate the event, team and invitation ids and rewrite all references.

        Any failure here, allocation or otherwise, fails the whole event; it is
        never persisted with only part of its teams or invitations.
        """
        item = _Pending("event", record.legacy_id, record.name)
        try:
            event_id = self._allocator.allocate(EVENTS_NAMESPACE)
            teams = [
                self._rewrite_team(team, self._allocator.allocate(TEAMS_NAMESPACE),
                                   table, f"event {record.legacy_id} team {team.legacy_id}",
                                   item.warnings)
                for team in record.teams
            ]
            invitations = [
                self._rewrite_invitation(invitation,
                                         self._allocator.allocate(INVITATIONS_NAMESPACE),
                                         table, f"event {record.legacy_id} invitation "
                                                f"{invitation.legacy_id}",
                                         item.warnings)
                for invitation in record.invitations
            ]
            item.entity = Event(
                id=event_id, group_id=group_id, name=record.name, date=record.date,
                max_players_per_team=record.max_players_per_team,
                location=record.location, teams=teams, invitations=invitations,
            )
        except AllocationFailure as exc:
            item.fail(exc)
            item.warnings.clear()
        except Exception as exc:
            logger.error("Could not prepare event %s", record.legacy_id,
                         exc_info=True, extra={"group_id": group_id})
            item.fail(exc)
            item.warnings.clear()
        return item

    def _rewrite_team(self, team: LegacyTeam, new_id: str, table: TranslationTable,
                      context: str, warnings: List[str]) -> Team:
        def ref(legacy_id: str, field_name: str) -> str:
            return _resolve(table, legacy_id, field_name, context, warnings)

        assignments = None
        if team.shirt_assignments is not None:
            assignments = [
                ShirtAssignment(player_id=ref(a.player_id, "shirtAssignments.playerId"),
                                shirt_number=a.shirt_number)
                for a in team.shirt_assignments
            ]
        return Team(
            id=new_id,
            name=team.name,
            strength=team.strength,
            start_time=team.start_time,
            selected_players=[ref(p, "selectedPlayers") for p in team.selected_players],
            trainer_id=ref(team.trainer_id, "trainerId") if team.trainer_id else None,
            shirt_set_id=ref(team.shirt_set_id, "shirtSetId") if team.shirt_set_id else None,
            shirt_assignments=assignments,
        )

    def _rewrite_invitation(self, invitation: LegacyInvitation, new_id: str,
                            table: TranslationTable, context: str,
                            warnings: List[str]) -> Invitation:
        return Invitation(
            id=new_id,
            player_id=_resolve(table, invitation.player_id, "playerId", context, warnings),
            status=invitation.status,
        )


def _resolve(table: TranslationTable, legacy_id: str, field_name: str,
             context: str, warnings: List[str]) -> str:
    """New id for a legacy reference; unknown references pass through unchanged."""
    new_id = table.resolve(legacy_id)
    if new_id is not None:
        return new_id
    IMPORT_UNRESOLVED_REFERENCES.labels(field=field_name).inc()
    message = f"{context}: unresolved {field_name} reference '{legacy_id}' kept as-is"
    logger.warning("%s", message)
    warnings.append(message)
    return legacy_id
