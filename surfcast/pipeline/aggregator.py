"""Per-spot aggregation: merges raw wave, wind and tide payloads into a Forecast."""

import logging
from datetime import UTC, datetime, tzinfo

from surfcast.conditions.rating import rate_conditions
from surfcast.conditions.units import compass_label, meters_to_feet, round_or_none
from surfcast.config.schema import SpotConfig
from surfcast.models.forecast import (
    Forecast,
    HourlyObservation,
    SpotIndexEntry,
    Swell,
    TideEvent,
    TideType,
    Wave,
    Wind,
)

logger = logging.getLogger(__name__)

MAX_TIDE_EVENTS = 6


def build_forecast(
    spot: SpotConfig,
    marine: dict,
    wind: dict,
    tides: list[dict],
    now: datetime,
    updated: str | None = None,
    local_tz: tzinfo = UTC,
    max_tide_events: int = MAX_TIDE_EVENTS,
) -> Forecast:
    """Build the forecast for one spot from raw source payloads.

    The hourly timeline is the marine ``time`` array; wind values are taken
    at the same index. ``local_tz`` is the zone NOAA station times are
    reported in. ``updated`` defaults to ``now``.
    """
    hourly = build_hourly(marine, wind, spot.facing)
    upcoming = upcoming_tides(tides, now, local_tz, limit=max_tide_events)
    return Forecast(
        spot=spot.name,
        slug=spot.slug,
        description=spot.description,
        lat=spot.lat,
        lon=spot.lon,
        updated=updated if updated is not None else now.isoformat(),
        tides=upcoming,
        hourly=hourly,
    )


def build_hourly(marine: dict, wind: dict, facing: float) -> list[HourlyObservation]:
    marine_hourly = marine.get("hourly") or {}
    wind_hourly = wind.get("hourly") or {}
    times = marine_hourly.get("time") or []

    records: list[HourlyObservation] = []
    for i, time in enumerate(times):
        wave_ft = meters_to_feet(_value_at(marine_hourly, "wave_height", i))
        wave_dir = _value_at(marine_hourly, "wave_direction", i)
        swell_dir = _value_at(marine_hourly, "swell_wave_direction", i)
        wind_speed = _value_at(wind_hourly, "windspeed_10m", i)
        wind_dir = _value_at(wind_hourly, "winddirection_10m", i)
        gusts = _value_at(wind_hourly, "windgusts_10m", i)

        records.append(
            HourlyObservation(
                time=time,
                wave=Wave(
                    height_ft=wave_ft,
                    period=_value_at(marine_hourly, "wave_period", i),
                    direction=wave_dir,
                    direction_label=compass_label(wave_dir),
                ),
                swell=Swell(
                    height_ft=meters_to_feet(
                        _value_at(marine_hourly, "swell_wave_height", i)
                    ),
                    period=_value_at(marine_hourly, "swell_wave_period", i),
                    direction=swell_dir,
                    direction_label=compass_label(swell_dir),
                ),
                wind=Wind(
                    speed_mph=round_or_none(wind_speed),
                    gusts_mph=round_or_none(gusts),
                    direction=wind_dir,
                    direction_label=compass_label(wind_dir),
                ),
                # Rated on the unrounded wind speed.
                rating=rate_conditions(wave_ft, wind_speed, wind_dir, facing),
            )
        )
    return records


def upcoming_tides(
    tides: list[dict],
    now: datetime,
    local_tz: tzinfo = UTC,
    limit: int = MAX_TIDE_EVENTS,
) -> list[TideEvent]:
    """Keep events strictly after ``now``, in source order, at most ``limit``."""
    events: list[TideEvent] = []
    for raw in tides:
        if len(events) >= limit:
            break
        when = _parse_tide_time(raw.get("t"), local_tz)
        if when is None or when <= now:
            continue
        events.append(
            TideEvent(
                time=raw["t"],
                type=TideType.HIGH if raw.get("type") == "H" else TideType.LOW,
                height_ft=_parse_float(raw.get("v")),
            )
        )
    return events


def build_spot_index(spots: list[SpotConfig]) -> list[SpotIndexEntry]:
    return [
        SpotIndexEntry(
            name=s.name,
            slug=s.slug,
            description=s.description,
            lat=s.lat,
            lon=s.lon,
        )
        for s in spots
    ]


def _value_at(hourly: dict, key: str, index: int) -> float | None:
    values = hourly.get(key)
    if not values or index >= len(values):
        return None
    return values[index]


def _parse_tide_time(value: str | None, local_tz: tzinfo) -> datetime | None:
    if not value:
        return None
    try:
        when = datetime.fromisoformat(value)
    except ValueError:
        logger.warning("Unparseable tide time %r, skipping", value)
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=local_tz)
    return when


def _parse_float(value: str | float | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
