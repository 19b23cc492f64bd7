"""SQLAlchemy ORM model for the trips table in the hosted Postgres."""

from datetime import date

from sqlalchemy import CheckConstraint, Date, Double, Index, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from core.db.schemas.base import Base

TRIP_STATUSES = ("completed", "in_progress", "cancelled")


class Trip(Base):
    __tablename__ = "trips"

    id: Mapped[str] = mapped_column(UUID, primary_key=True, server_default=text("gen_random_uuid()"))
    # auth.users(id) in Supabase; the foreign key is created by the migration
    user_id: Mapped[str] = mapped_column(UUID, nullable=False, server_default=text("auth.uid()"))
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date)
    departure: Mapped[str] = mapped_column(String(255), nullable=False)
    destination: Mapped[str] = mapped_column(String(255), nullable=False)
    departure_lat: Mapped[float | None] = mapped_column(Double)
    departure_lng: Mapped[float | None] = mapped_column(Double)
    destination_lat: Mapped[float | None] = mapped_column(Double)
    destination_lng: Mapped[float | None] = mapped_column(Double)
    status: Mapped[str | None] = mapped_column(String(20))
    created_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))

    __table_args__ = (
        CheckConstraint(
            "status IS NULL OR status IN (" + ", ".join(f"'{s}'" for s in TRIP_STATUSES) + ")", name="chk_trips_status"
        ),
        CheckConstraint("end_date IS NULL OR end_date >= start_date", name="chk_trips_dates"),
        Index("idx_trips_user_id", "user_id"),
    )
