"""
Pydantic models for tumaps.
"""

from core.models.dashboard import AlertItem, Dashboard, QuickAction, RecentTrip, StatCard
from core.models.maps import LatLng, MapErrorGuide, MapMarker, MapView
from core.models.trip import Trip, TripCreate, TripFilter, filter_trips

__all__ = [
    "AlertItem",
    "Dashboard",
    "LatLng",
    "MapErrorGuide",
    "MapMarker",
    "MapView",
    "QuickAction",
    "RecentTrip",
    "StatCard",
    "Trip",
    "TripCreate",
    "TripFilter",
    "filter_trips",
]
