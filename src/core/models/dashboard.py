from typing import Literal

from pydantic import BaseModel


class StatCard(BaseModel):
    label: str
    value: str
    icon: str


class RecentTrip(BaseModel):
    origin: str
    destination: str
    duration: str
    distance: str
    status: Literal["completed", "in_progress", "cancelled"]


class AlertItem(BaseModel):
    kind: str
    location: str
    when: str
    color: Literal["red", "yellow", "blue"]


class QuickAction(BaseModel):
    label: str
    icon: str
    href: str | None = None


class Dashboard(BaseModel):
    email: str
    role_label: str
    points: int
    stats: list[StatCard]
    recent_trips: list[RecentTrip]
    alerts: list[AlertItem]
    quick_actions: list[QuickAction]

    @property
    def points_display(self) -> str:
        return f"{self.points:,}"
