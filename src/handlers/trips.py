"""GET /trips: the signed-in user's trips with a status filter and a map of their coordinates."""

import logging
from typing import Any

from core.clients import get_supabase_client
from core.config import get_config
from core.errors import TripStoreError
from core.models.maps import LatLng
from core.models.trip import TripFilter, filter_trips
from core.services.maps import build_map_view, map_template_context
from core.services.trips import TripRepository
from core.web import current_session, handle_errors, html_response, parse_request, redirect_to_login, render

logger = logging.getLogger(__name__)


@handle_errors()
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    config = get_config()
    request = parse_request(event)
    auth_session = current_session(request, config)
    if auth_session is None:
        return redirect_to_login(request, config)

    active_filter = TripFilter.parse(request.query.get("filter"))
    repository = TripRepository(get_supabase_client(), config.trips_table)

    error = None
    try:
        trips = repository.list_trips(auth_session.access_token, auth_session.user.user_id)
    except TripStoreError as e:
        logger.exception("Could not list trips for user %s", auth_session.user.user_id)
        trips = []
        error = e.user_message

    visible = filter_trips(trips, active_filter)
    map_view = build_map_view(
        visible,
        config.google_maps_api_key,
        LatLng(lat=config.map_default_lat, lng=config.map_default_lng),
    )
    body = render(
        "trips.html",
        user=auth_session.user,
        trips=visible,
        error=error,
        filters=list(TripFilter),
        active_filter=active_filter,
        **map_template_context(map_view),
    )
    return html_response(body)
