# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Data-access layer for groups."""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

GROUP_COLS = "id, name, club, created_at, updated_at"


def _row_to_dict(row) -> Dict[str, Any]:
    return {
        "id": str(row[0]),
        "name": row[1],
        "club": row[2],
        "created_at": row[3],
        "updated_at": row[4],
    }


class GroupRepository:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_group(self, group_id: str, name: str, club: Optional[str]) -> Dict[str, Any]:
        now = datetime.now(timezone.utc).isoformat()
        with self._engine.begin() as conn:
            conn.execute(
                text("""
                    INSERT INTO groups (id, name, club, created_at, updated_at)
                    VALUES (:id, :name, :club, :ts, :ts)
                """),
                {"id": group_id, "name": name, "club": club, "ts": now},
            )
        return {"id": group_id, "name": name, "club": club,
                "created_at": now, "updated_at": now}

    def get_group(self, group_id: str) -> Optional[Dict[str, Any]]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text(f"SELECT {GROUP_COLS} FROM groups WHERE id = :id"),
                {"id": group_id},
            ).fetchone()
        return _row_to_dict(row) if row else None

    def verify_connection(self):
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))
