# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""SQLAlchemy engine singleton and table definitions."""
from sqlalchemy import (
    JSON, Boolean, Column, Integer, MetaData, String, Table, create_engine,
)
from sqlalchemy.engine import Engine

from teams_api.core.config import settings

metadata = MetaData()

groups = Table(
    "groups", metadata,
    Column("id", String(32), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("club", String(255)),
    Column("created_at", String(40), nullable=False),
    Column("updated_at", String(40), nullable=False),
)

# Players and trainers share one collection, discriminated by role.
members = Table(
    "members", metadata,
    Column("id", String(32), primary_key=True),
    Column("group_id", String(32), nullable=False, index=True),
    Column("role", String(16), nullable=False),
    Column("first_name", String(255)),
    Column("last_name", String(255)),
    Column("birth_year", Integer),
    Column("birth_date", String(10)),
    Column("level", Integer),
    Column("email", String(255)),
    Column("created_at", String(40), nullable=False),
    Column("updated_at", String(40), nullable=False),
)

shirt_sets = Table(
    "shirt_sets", metadata,
    Column("id", String(32), primary_key=True),
    Column("group_id", String(32), nullable=False, index=True),
    Column("sponsor", String(255), nullable=False),
    Column("color", String(255), nullable=False),
    Column("shirts", JSON, nullable=False),
    Column("active", Boolean, nullable=False, default=True),
    Column("created_at", String(40), nullable=False),
    Column("updated_at", String(40), nullable=False),
)

# Teams and invitations are embedded so an event is always one row.
events = Table(
    "events", metadata,
    Column("id", String(32), primary_key=True),
    Column("group_id", String(32), nullable=False, index=True),
    Column("name", String(255), nullable=False),
    Column("event_date", String(32), nullable=False),
    Column("max_players_per_team", Integer, nullable=False),
    Column("location", String(255)),
    Column("teams", JSON, nullable=False),
    Column("invitations", JSON, nullable=False),
    Column("created_at", String(40), nullable=False),
    Column("updated_at", String(40), nullable=False),
)

sequences = Table(
    "sequences", metadata,
    Column("sequence_name", String(64), primary_key=True),
    Column("sequence_value", Integer, nullable=False, default=0),
)


def build_engine(url: str) -> Engine:
    """Create an engine; SQLite gets thread-shareable connections instead of pool sizing."""
    if url.startswith("sqlite"):
        return create_engine(
            url, connect_args={"check_same_thread": False, "timeout": 30},
        )
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_recycle=settings.POOL_RECYCLE,
    )


def init_schema(bind: Engine) -> None:
    """Create missing tables. Existing tables are left untouched."""
    metadata.create_all(bind)


engine = build_engine(settings.DATABASE_URL)
