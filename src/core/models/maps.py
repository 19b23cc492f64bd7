from typing import Literal

from pydantic import BaseModel, Field


class LatLng(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)


class MapMarker(BaseModel):
    trip_id: str
    kind: Literal["departure", "destination"]
    position: LatLng
    title: str
    label: str
    place: str
    color: str


class MapErrorGuide(BaseModel):
    title: str
    steps: list[str]
    billing_note: bool = False


class MapView(BaseModel):
    center: LatLng
    zoom: int
    max_zoom: int
    fit_bounds: bool
    markers: list[MapMarker]
    error: str | None = None
    api_key: str = Field(default="", exclude=True)

    @property
    def has_markers(self) -> bool:
        return bool(self.markers)
