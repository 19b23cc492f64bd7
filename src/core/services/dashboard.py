"""Dashboard view model. Statistics, recent trips and alerts are static placeholders."""

from core.auth.interface import AuthUser
from core.models.dashboard import AlertItem, Dashboard, QuickAction, RecentTrip, StatCard

_STATS = [
    StatCard(label="Trips taken", value="342", icon="map-pin"),
    StatCard(label="Navigation time", value="127h", icon="clock"),
    StatCard(label="Alerts sent", value="89", icon="alert-triangle"),
    StatCard(label="Average rating", value="4.8", icon="zap"),
]

_RECENT_TRIPS = [
    RecentTrip(origin="Centro", destination="Zona Sul", duration="25 min", distance="12.5 km", status="completed"),
    RecentTrip(origin="Aeroporto", destination="Centro", duration="35 min", distance="18.2 km", status="completed"),
    RecentTrip(origin="Zona Norte", destination="Shopping", duration="18 min", distance="8.7 km", status="completed"),
]

_ALERTS = [
    AlertItem(kind="Accident", location="Av. Principal", when="2 hours ago", color="red"),
    AlertItem(kind="Traffic", location="Rua das Flores", when="5 hours ago", color="yellow"),
    AlertItem(kind="Police", location="Rodovia BR-101", when="1 day ago", color="blue"),
]

_QUICK_ACTIONS = [
    QuickAction(label="New route", icon="navigation", href="/trips/new"),
    QuickAction(label="Report", icon="alert-triangle"),
    QuickAction(label="Favorites", icon="map-pin"),
    QuickAction(label="Achievements", icon="award"),
]


def build_dashboard(user: AuthUser) -> Dashboard:
    return Dashboard(
        email=user.email,
        role_label="Professional Driver",
        points=1250,
        stats=[stat.model_copy() for stat in _STATS],
        recent_trips=[trip.model_copy() for trip in _RECENT_TRIPS],
        alerts=[alert.model_copy() for alert in _ALERTS],
        quick_actions=[action.model_copy() for action in _QUICK_ACTIONS],
    )
