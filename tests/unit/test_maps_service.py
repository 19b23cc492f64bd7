"""Unit tests for map configuration."""

from urllib.parse import parse_qs, urlsplit

import pytest

from core.errors import ErrorCode, MapConfigurationError
from core.models.maps import LatLng
from core.models.trip import Trip
from core.services.maps import (
    DEFAULT_ZOOM,
    DEPARTURE_COLOR,
    DESTINATION_COLOR,
    MAP_CALLBACK,
    MAP_ERROR_GUIDES,
    MAX_FIT_ZOOM,
    build_map_view,
    error_guide,
    is_api_key_configured,
    map_template_context,
    script_url,
    trip_markers,
)

DEFAULT_CENTER = LatLng(lat=-23.5505, lng=-46.6333)


def _trip(trip_id="t1", **coords):
    return Trip(
        id=trip_id,
        user_id="user-123",
        title="Trip",
        start_date="2024-03-01",
        departure="Rio",
        destination="Niterói",
        **coords,
    )


@pytest.mark.parametrize("key,expected", [("", False), ("SUA_CHAVE_AQUI", False), ("AIza-real", True)])
def test_is_api_key_configured(key, expected):
    assert is_api_key_configured(key) is expected


def test_script_url():
    url = script_url("AIza key", MAP_CALLBACK)
    query = parse_qs(urlsplit(url).query)

    assert url.startswith("https://maps.googleapis.com/maps/api/js?")
    assert query == {"key": ["AIza key"], "libraries": ["places"], "callback": [MAP_CALLBACK]}


def test_trip_markers_both_ends():
    markers = trip_markers(
        _trip(departure_lat=-22.9, departure_lng=-43.2, destination_lat=-22.88, destination_lng=-43.1)
    )

    assert [m.kind for m in markers] == ["departure", "destination"]
    assert markers[0].title == "Trip - Departure"
    assert markers[0].color == DEPARTURE_COLOR
    assert markers[1].title == "Trip - Destination"
    assert markers[1].color == DESTINATION_COLOR
    assert markers[1].place == "Niterói"


def test_trip_markers_without_coordinates():
    assert trip_markers(_trip()) == []


def test_build_map_view_centers_on_first_departure():
    trips = [
        _trip("a", destination_lat=10.0, destination_lng=20.0),
        _trip("b", departure_lat=-22.9, departure_lng=-43.2),
        _trip("c", departure_lat=1.0, departure_lng=1.0),
    ]

    view = build_map_view(trips, "AIza-real", DEFAULT_CENTER)

    assert view.center == LatLng(lat=-22.9, lng=-43.2)
    assert view.zoom == DEFAULT_ZOOM
    assert view.max_zoom == MAX_FIT_ZOOM
    assert view.fit_bounds is True
    assert len(view.markers) == 3
    assert view.error is None


def test_build_map_view_without_trips():
    view = build_map_view([], "AIza-real", DEFAULT_CENTER)

    assert view.center == DEFAULT_CENTER
    assert view.fit_bounds is False
    assert view.markers == []


def test_build_map_view_placeholder_key():
    view = build_map_view([], "SUA_CHAVE_AQUI", DEFAULT_CENTER)
    assert view.error == "configure_api_key"


def test_error_guide_unknown_falls_back_to_load_error():
    assert error_guide("nope") is MAP_ERROR_GUIDES["load_error"]
    assert error_guide(None) is MAP_ERROR_GUIDES["load_error"]


def test_billing_guides_carry_note():
    assert MAP_ERROR_GUIDES["billing_not_enabled"].billing_note
    assert MAP_ERROR_GUIDES["api_not_activated"].billing_note
    assert not MAP_ERROR_GUIDES["invalid_key"].billing_note


def test_map_template_context_configured():
    context = map_template_context(build_map_view([], "AIza-real", DEFAULT_CENTER))

    assert context["map_error_guide"] is None
    assert "key=AIza-real" in context["map_script_url"]
    assert set(context["map_guides_json"]) == set(MAP_ERROR_GUIDES)


def test_map_template_context_unconfigured():
    context = map_template_context(build_map_view([], "", DEFAULT_CENTER))

    assert context["map_script_url"] == ""
    assert context["map_error_guide"] is MAP_ERROR_GUIDES["configure_api_key"]


def test_script_url_requires_configured_key():
    with pytest.raises(MapConfigurationError) as exc_info:
        script_url("SUA_CHAVE_AQUI", MAP_CALLBACK)
    assert exc_info.value.code == ErrorCode.MAP_NOT_CONFIGURED
