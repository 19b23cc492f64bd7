"""GET /api/trips/map: map configuration and markers as JSON for client-side refresh."""

import logging
from typing import Any

from core.clients import get_supabase_client
from core.config import get_config
from core.errors import ErrorCode, TripStoreError, USER_MESSAGES
from core.models.maps import LatLng
from core.models.trip import TripFilter, filter_trips
from core.services.maps import build_map_view
from core.services.trips import TripRepository
from core.web import current_session, handle_errors, json_response, parse_request

logger = logging.getLogger(__name__)


@handle_errors(as_json=True)
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    config = get_config()
    request = parse_request(event)
    auth_session = current_session(request, config)
    if auth_session is None:
        return json_response(
            {"error": ErrorCode.SESSION_EXPIRED.value, "message": USER_MESSAGES[ErrorCode.SESSION_EXPIRED]},
            status_code=401,
        )

    repository = TripRepository(get_supabase_client(), config.trips_table)
    try:
        trips = repository.list_trips(auth_session.access_token, auth_session.user.user_id)
    except TripStoreError as e:
        logger.exception("Could not list trips for map")
        return json_response({"error": e.code.value, "message": e.user_message}, status_code=502)

    trips = filter_trips(trips, TripFilter.parse(request.query.get("filter")))
    map_view = build_map_view(
        trips,
        config.google_maps_api_key,
        LatLng(lat=config.map_default_lat, lng=config.map_default_lng),
    )
    return json_response(map_view.model_dump(mode="json"))
