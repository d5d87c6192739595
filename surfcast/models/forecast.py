"""Forecast output models.

Field names are snake_case in Python; ``to_dict`` produces the camelCase
keys the static frontend reads.
"""

from dataclasses import dataclass
from enum import StrEnum


class RatingLabel(StrEnum):
    EPIC = "Epic"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    FLAT = "Flat"
    NO_DATA = "No Data"


class TideType(StrEnum):
    HIGH = "High"
    LOW = "Low"


@dataclass(frozen=True)
class Rating:
    score: int  # 1-10, or 0 only for NO_DATA
    label: RatingLabel
    color: str

    def to_dict(self) -> dict:
        return {"score": self.score, "label": str(self.label), "color": self.color}


@dataclass(frozen=True)
class Wave:
    height_ft: float | None
    period: float | None
    direction: float | None
    direction_label: str | None

    def to_dict(self) -> dict:
        return {
            "heightFt": self.height_ft,
            "period": self.period,
            "direction": self.direction,
            "directionLabel": self.direction_label,
        }


# Swell has the same shape as the combined sea state.
Swell = Wave


@dataclass(frozen=True)
class Wind:
    speed_mph: int | None
    gusts_mph: int | None
    direction: float | None
    direction_label: str | None

    def to_dict(self) -> dict:
        return {
            "speedMph": self.speed_mph,
            "gustsMph": self.gusts_mph,
            "direction": self.direction,
            "directionLabel": self.direction_label,
        }


@dataclass(frozen=True)
class HourlyObservation:
    time: str
    wave: Wave
    swell: Swell
    wind: Wind
    rating: Rating

    def to_dict(self) -> dict:
        return {
            "time": self.time,
            "wave": self.wave.to_dict(),
            "swell": self.swell.to_dict(),
            "wind": self.wind.to_dict(),
            "rating": self.rating.to_dict(),
        }


@dataclass(frozen=True)
class TideEvent:
    time: str  # station local time as returned by NOAA, e.g. "2026-02-11 04:37"
    type: TideType
    height_ft: float | None

    def to_dict(self) -> dict:
        return {"time": self.time, "type": str(self.type), "heightFt": self.height_ft}


@dataclass(frozen=True)
class SpotIndexEntry:
    name: str
    slug: str
    description: str
    lat: float
    lon: float

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "lat": self.lat,
            "lon": self.lon,
        }


@dataclass(frozen=True)
class Forecast:
    spot: str
    slug: str
    description: str
    lat: float
    lon: float
    updated: str
    tides: list[TideEvent]
    hourly: list[HourlyObservation]

    @property
    def current(self) -> HourlyObservation | None:
        return self.hourly[0] if self.hourly else None

    def to_dict(self) -> dict:
        current = self.current
        return {
            "spot": self.spot,
            "slug": self.slug,
            "description": self.description,
            "lat": self.lat,
            "lon": self.lon,
            "updated": self.updated,
            "tides": [t.to_dict() for t in self.tides],
            "hourly": [h.to_dict() for h in self.hourly],
            "current": current.to_dict() if current is not None else None,
        }
