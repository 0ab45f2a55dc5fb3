# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: named counters backing the sequence allocator.

The increment is a single upsert-with-RETURNING statement so the database
applies read-modify-write atomically; there is no application-side lock.
"""
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from teams_api.core.logging import get_logger

logger = get_logger(__name__)

_INCREMENT_SQL = text("""
    INSERT INTO sequences (sequence_name, sequence_value)
    VALUES (:name, 1)
    ON CONFLICT (sequence_name)
    DO UPDATE SET sequence_value = sequences.sequence_value + 1
    RETURNING sequence_value
""")

_ENSURE_SQL = text("""
    INSERT INTO sequences (sequence_name, sequence_value)
    VALUES (:name, 0)
    ON CONFLICT (sequence_name) DO NOTHING
""")


class SequenceRepository:
    """Handles all direct database operations on the sequences table."""

    def __init__(self, engine: Engine):
        self._engine = engine

    # ── Write ──

    def increment(self, name: str) -> Optional[int]:
        """Increment-and-fetch. Creates the counter at 1 on first use."""
        with self._engine.begin() as conn:
            row = conn.execute(_INCREMENT_SQL, {"name": name}).fetchone()
        return int(row[0]) if row else None

    def ensure(self, name: str) -> bool:
        """Create a zero counter if absent. Returns True when a row was inserted."""
        with self._engine.begin() as conn:
            result = conn.execute(_ENSURE_SQL, {"name": name})
        return result.rowcount == 1

    # ── Read ──

    def current(self, name: str) -> int:
        with self._engine.connect() as conn:
            value = conn.execute(
                text("SELECT sequence_value FROM sequences WHERE sequence_name = :name"),
                {"name": name},
            ).scalar()
        return int(value) if value is not None else 0
