"""
Database ORM models for tumaps.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from core.db.schemas.base import Base
from core.db.schemas.trip import TRIP_STATUSES, Trip

__all__ = ["Base", "TRIP_STATUSES", "Trip"]
