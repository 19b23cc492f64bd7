from datetime import date, datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

TripStatus = Literal["completed", "in_progress", "cancelled"]


class TripFilter(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: str | None) -> "TripFilter":
        """Unknown or missing values fall back to ALL."""
        try:
            return cls(value or cls.ALL.value)
        except ValueError:
            return cls.ALL


class Trip(BaseModel):
    id: str
    user_id: str
    title: str
    description: str = ""
    start_date: date
    end_date: date | None = None
    departure: str
    destination: str
    departure_lat: float | None = None
    departure_lng: float | None = None
    destination_lat: float | None = None
    destination_lng: float | None = None
    status: TripStatus | None = None
    created_at: datetime | None = None

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def has_departure_coords(self) -> bool:
        return self.departure_lat is not None and self.departure_lng is not None

    @property
    def has_destination_coords(self) -> bool:
        return self.destination_lat is not None and self.destination_lng is not None


def filter_trips(trips: list[Trip], trip_filter: TripFilter) -> list[Trip]:
    if trip_filter is TripFilter.ALL:
        return list(trips)
    return [trip for trip in trips if trip.status == trip_filter.value]


class TripCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)
    start_date: date
    end_date: date | None = None
    departure: str = Field(..., min_length=1, max_length=255)
    destination: str = Field(..., min_length=1, max_length=255)
    departure_lat: float | None = Field(default=None, ge=-90.0, le=90.0)
    departure_lng: float | None = Field(default=None, ge=-180.0, le=180.0)
    destination_lat: float | None = Field(default=None, ge=-90.0, le=90.0)
    destination_lng: float | None = Field(default=None, ge=-180.0, le=180.0)
    status: TripStatus | None = None

    @field_validator("title", "departure", "destination", "description", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator(
        "end_date", "departure_lat", "departure_lng", "destination_lat", "destination_lng", "status", mode="before"
    )
    @classmethod
    def _blank_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _check_dates_and_pairs(self) -> "TripCreate":
        if self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        if (self.departure_lat is None) != (self.departure_lng is None):
            raise ValueError("departure coordinates require both latitude and longitude")
        if (self.destination_lat is None) != (self.destination_lng is None):
            raise ValueError("destination coordinates require both latitude and longitude")
        return self

    def to_record(self, user_id: str) -> dict[str, Any]:
        record = self.model_dump(mode="json")
        record["user_id"] = user_id
        return record
