"""Google Maps widget configuration built from trip records.

The browser script in core/web/templates/_map.html consumes the MapView JSON;
everything the vendor SDK needs that can be decided server-side is decided here.
"""

from urllib.parse import urlencode

from core.errors import ErrorCode, MapConfigurationError
from core.models.maps import LatLng, MapErrorGuide, MapMarker, MapView
from core.models.trip import Trip

MAPS_SCRIPT_BASE = "https://maps.googleapis.com/maps/api/js"
PLACEHOLDER_API_KEY = "SUA_CHAVE_AQUI"

DEFAULT_ZOOM = 5
MAX_FIT_ZOOM = 15
USER_LOCATION_ZOOM = 15
MAP_CALLBACK = "initTumapsMap"

DEPARTURE_COLOR = "#8b5cf6"
DESTINATION_COLOR = "#ec4899"

MAP_ERROR_GUIDES: dict[str, MapErrorGuide] = {
    "configure_api_key": MapErrorGuide(
        title="Configure your Google Maps API key",
        steps=[
            "Open the .env file at the project root",
            "Add GOOGLE_MAPS_API_KEY=your_key_here",
            "Get a key at console.cloud.google.com/google/maps-apis",
            "Enable billing in the Google Cloud Console",
            "Restart the server",
        ],
    ),
    "billing_not_enabled": MapErrorGuide(
        title="Billing is not enabled on Google Cloud",
        steps=[
            "Go to console.cloud.google.com/billing",
            "Link a billing account to your project",
            "Enable the Maps JavaScript API",
            "Wait a few minutes for activation",
            "Reload this page",
        ],
        billing_note=True,
    ),
    "api_not_activated": MapErrorGuide(
        title="The Google Maps API is not activated",
        steps=[
            "Go to console.cloud.google.com/apis/library",
            'Search for "Maps JavaScript API"',
            'Click "Enable"',
            "Wait a few minutes for activation",
            "Reload this page",
        ],
        billing_note=True,
    ),
    "invalid_key": MapErrorGuide(
        title="Invalid API key",
        steps=[
            "Go to console.cloud.google.com/apis/credentials",
            "Check that the key is correct",
            "Confirm the key is allowed to use the Maps JavaScript API",
            "Update GOOGLE_MAPS_API_KEY with the correct key",
            "Restart the server",
        ],
    ),
    "load_error": MapErrorGuide(
        title="Could not load Google Maps",
        steps=[
            "Check that your API key is correct",
            "Confirm the Maps JavaScript API is enabled",
            "Check your internet connection",
            "Try reloading the page",
        ],
    ),
    "map_init_error": MapErrorGuide(
        title="Could not initialize the map",
        steps=[
            "Try reloading the page",
            "Check your Google Maps credentials",
            "Confirm billing is active",
            "Contact support if the problem persists",
        ],
    ),
}


def error_guide(error: str | None) -> MapErrorGuide:
    return MAP_ERROR_GUIDES.get(error or "", MAP_ERROR_GUIDES["load_error"])


def is_api_key_configured(api_key: str) -> bool:
    return bool(api_key) and api_key != PLACEHOLDER_API_KEY


def script_url(api_key: str, callback: str) -> str:
    if not is_api_key_configured(api_key):
        raise MapConfigurationError(
            "Google Maps API key is missing or still the placeholder", code=ErrorCode.MAP_NOT_CONFIGURED
        )
    query = urlencode({"key": api_key, "libraries": "places", "callback": callback})
    return f"{MAPS_SCRIPT_BASE}?{query}"


def trip_markers(trip: Trip) -> list[MapMarker]:
    markers = []
    if trip.has_departure_coords:
        markers.append(
            MapMarker(
                trip_id=trip.id,
                kind="departure",
                position=LatLng(lat=trip.departure_lat, lng=trip.departure_lng),
                title=f"{trip.title} - Departure",
                label="Departure",
                place=trip.departure,
                color=DEPARTURE_COLOR,
            )
        )
    if trip.has_destination_coords:
        markers.append(
            MapMarker(
                trip_id=trip.id,
                kind="destination",
                position=LatLng(lat=trip.destination_lat, lng=trip.destination_lng),
                title=f"{trip.title} - Destination",
                label="Destination",
                place=trip.destination,
                color=DESTINATION_COLOR,
            )
        )
    return markers


def build_map_view(trips: list[Trip], api_key: str, default_center: LatLng) -> MapView:
    """Markers for every trip coordinate, centered on the first departure point."""
    markers = [marker for trip in trips for marker in trip_markers(trip)]

    center = default_center
    for trip in trips:
        if trip.has_departure_coords:
            center = LatLng(lat=trip.departure_lat, lng=trip.departure_lng)
            break

    return MapView(
        center=center,
        zoom=DEFAULT_ZOOM,
        max_zoom=MAX_FIT_ZOOM,
        fit_bounds=bool(markers),
        markers=markers,
        error=None if is_api_key_configured(api_key) else "configure_api_key",
        api_key=api_key,
    )


def map_template_context(map_view: MapView) -> dict[str, object]:
    """Variables consumed by the _map.html partial."""
    return {
        "map_view": map_view,
        "map_error_guide": error_guide(map_view.error) if map_view.error else None,
        "map_guides_json": {key: guide.model_dump() for key, guide in MAP_ERROR_GUIDES.items()},
        "map_script_url": script_url(map_view.api_key, MAP_CALLBACK) if map_view.error is None else "",
        "map_callback": MAP_CALLBACK,
        "user_location_zoom": USER_LOCATION_ZOOM,
    }
