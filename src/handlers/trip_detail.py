"""GET /trips/{trip_id}: a single trip with its departure and destination on the map."""

import logging
from typing import Any

from core.clients import get_supabase_client
from core.config import get_config
from core.errors import ErrorCode, TripStoreError, USER_MESSAGES
from core.models.maps import LatLng
from core.services.maps import build_map_view, map_template_context
from core.services.trips import TripRepository
from core.web import current_session, handle_errors, html_response, parse_request, redirect_to_login, render

logger = logging.getLogger(__name__)


def _not_found() -> dict[str, Any]:
    body = render("not_found.html", message=USER_MESSAGES[ErrorCode.TRIP_NOT_FOUND], back_href="/trips")
    return html_response(body, status_code=404)


@handle_errors()
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    config = get_config()
    request = parse_request(event)
    auth_session = current_session(request, config)
    if auth_session is None:
        return redirect_to_login(request, config)

    trip_id = request.path_params.get("trip_id", "")
    if not trip_id:
        return _not_found()

    repository = TripRepository(get_supabase_client(), config.trips_table)
    try:
        trip = repository.get_trip(auth_session.access_token, auth_session.user.user_id, trip_id)
    except TripStoreError as e:
        logger.exception("Could not load trip %s", trip_id)
        body = render("not_found.html", message=e.user_message, back_href="/trips")
        return html_response(body, status_code=502)

    if trip is None:
        return _not_found()

    map_view = build_map_view(
        [trip],
        config.google_maps_api_key,
        LatLng(lat=config.map_default_lat, lng=config.map_default_lng),
    )
    return html_response(render("trip_detail.html", trip=trip, **map_template_context(map_view)))
