"""Unit conversion and compass direction helpers.

All rounding here is half-up (halves go toward +infinity), matching what
the frontend has always displayed. Python's built-in ``round`` rounds
half to even and is not used.
"""

import math

FEET_PER_METER = 3.28084

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]
DEGREES_PER_POINT = 360 / len(COMPASS_POINTS)  # 22.5


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round_or_none(value: float | None) -> int | None:
    if value is None:
        return None
    return round_half_up(value)


def meters_to_feet(meters: float | None) -> float | None:
    """Convert meters to feet, rounded to one decimal place."""
    if meters is None:
        return None
    return round_half_up(meters * FEET_PER_METER * 10) / 10


def compass_label(degrees: float | None) -> str | None:
    """Map a bearing to the nearest of 16 compass points.

    Each point owns the bucket centered on its bearing (+-11.25 deg).
    A bearing exactly on a bucket edge goes to the clockwise neighbour,
    e.g. 11.25 -> NNE.
    """
    if degrees is None:
        return None
    index = round_half_up(degrees / DEGREES_PER_POINT) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]
