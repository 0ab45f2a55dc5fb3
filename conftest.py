# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Shared pytest setup. Points the service at a throwaway SQLite file before import."""
import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="teams-api-test-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_DB_DIR}/teams-api.db")
os.environ.setdefault("BOOTSTRAP_SEQUENCES", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402

from teams_api.core.database import build_engine, init_schema  # noqa: E402


@pytest.fixture
def engine(tmp_path):
    """A private, fully migrated SQLite database per test."""
    eng = build_engine(f"sqlite:///{tmp_path}/store.db")
    init_schema(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def legacy_export():
    """The export shape produced by the old local-storage client."""
    return {
        "players": [
            {"id": "550e8400-e29b-41d4-a716-446655440000", "firstName": "John",
             "lastName": "Doe", "birthYear": 2010, "level": 3},
            {"id": "550e8400-e29b-41d4-a716-446655440001", "firstName": "Jane",
             "lastName": "Smith", "birthYear": 2011, "level": 4},
        ],
        "trainers": [
            {"id": "trainer-uuid-1", "firstName": "Coach", "lastName": "Wilson"},
        ],
        "events": [
            {
                "id": "event-uuid-1",
                "name": "Training Match",
                "date": "2025-01-15",
                "maxPlayersPerTeam": 5,
                "teams": [
                    {
                        "id": "team-uuid-1",
                        "name": "Team Red",
                        "strength": 2,
                        "startTime": "09:00",
                        "selectedPlayers": ["550e8400-e29b-41d4-a716-446655440000"],
                        "trainerId": "trainer-uuid-1",
                        "shirtSetId": "shirtset-uuid-1",
                        "shirtAssignments": [
                            {"playerId": "550e8400-e29b-41d4-a716-446655440000",
                             "shirtNumber": 1},
                        ],
                    },
                    {
                        "id": "team-uuid-2",
                        "name": "Team Blue",
                        "strength": 2,
                        "startTime": "09:00",
                        "selectedPlayers": ["550e8400-e29b-41d4-a716-446655440001"],
                    },
                ],
                "invitations": [
                    {"id": "invitation-uuid-1",
                     "playerId": "550e8400-e29b-41d4-a716-446655440000",
                     "status": "accepted"},
                    {"id": "invitation-uuid-2",
                     "playerId": "550e8400-e29b-41d4-a716-446655440001",
                     "status": "accepted"},
                ],
            }
        ],
        "shirtSets": [
            {
                "id": "shirtset-uuid-1",
                "sponsor": "Nike",
                "color": "Red",
                "shirts": [
                    {"number": 1, "size": "M", "isGoalkeeper": False},
                    {"number": 2, "size": "L", "isGoalkeeper": False},
                ],
            }
        ],
    }
