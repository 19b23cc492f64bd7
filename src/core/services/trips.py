"""Trip reads and writes against the hosted Postgres (Supabase PostgREST)."""

import logging
from typing import Any

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError as PydanticValidationError
from supabase import Client

from core.errors import ErrorCode, TripStoreError, ValidationError
from core.models.trip import Trip, TripCreate

logger = logging.getLogger(__name__)

# PostgREST reports a malformed uuid as invalid_text_representation.
_INVALID_TEXT_REPRESENTATION = "22P02"


def parse_trip_form(form: dict[str, str]) -> TripCreate:
    """Validate a submitted trip form, mapping pydantic errors to field messages."""
    try:
        return TripCreate.model_validate(form)
    except PydanticValidationError as e:
        field_errors: dict[str, str] = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "__all__"
            message = str(error["msg"]).removeprefix("Value error, ")
            field_errors.setdefault(field, message)
        raise ValidationError(
            f"Invalid trip form: {len(field_errors)} field(s)",
            code=ErrorCode.VALIDATION_ERROR,
            field_errors=field_errors,
        ) from e


def _to_trips(rows: list[dict[str, Any]], code: ErrorCode) -> list[Trip]:
    try:
        return [Trip.model_validate(row) for row in rows]
    except PydanticValidationError as e:
        raise TripStoreError(f"Malformed trip row: {e.error_count()} error(s)", code=code) from e


class TripRepository:
    """Queries run with the user's access token so row-level security applies."""

    def __init__(self, client: Client, table: str = "trips") -> None:
        self._client = client
        self._table = table

    def _query(self, access_token: str) -> Any:
        return self._client.postgrest.auth(access_token).from_(self._table)

    def list_trips(self, access_token: str, user_id: str) -> list[Trip]:
        try:
            response = (
                self._query(access_token)
                .select("*")
                .eq("user_id", user_id)
                .order("start_date", desc=True)
                .execute()
            )
        except (APIError, httpx.HTTPError) as e:
            raise TripStoreError(f"Failed to load trips: {e}", code=ErrorCode.TRIPS_UNAVAILABLE) from e
        return _to_trips(response.data or [], ErrorCode.TRIPS_UNAVAILABLE)

    def get_trip(self, access_token: str, user_id: str, trip_id: str) -> Trip | None:
        try:
            response = (
                self._query(access_token)
                .select("*")
                .eq("id", trip_id)
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
        except APIError as e:
            if e.code == _INVALID_TEXT_REPRESENTATION:
                return None
            raise TripStoreError(f"Failed to load trip {trip_id}: {e}", code=ErrorCode.TRIPS_UNAVAILABLE) from e
        except httpx.HTTPError as e:
            raise TripStoreError(f"Failed to load trip {trip_id}: {e}", code=ErrorCode.TRIPS_UNAVAILABLE) from e

        trips = _to_trips(response.data or [], ErrorCode.TRIPS_UNAVAILABLE)
        return trips[0] if trips else None

    def create_trip(self, access_token: str, user_id: str, trip: TripCreate) -> Trip:
        try:
            response = self._query(access_token).insert(trip.to_record(user_id)).execute()
        except (APIError, httpx.HTTPError) as e:
            raise TripStoreError(f"Failed to save trip: {e}", code=ErrorCode.TRIP_SAVE_FAILED) from e

        created_rows = _to_trips(response.data or [], ErrorCode.TRIP_SAVE_FAILED)
        if not created_rows:
            raise TripStoreError("Insert returned no row", code=ErrorCode.TRIP_SAVE_FAILED)
        created = created_rows[0]
        logger.info("Created trip %s for user %s", created.id, user_id)
        return created
