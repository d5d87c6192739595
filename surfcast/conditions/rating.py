"""Heuristic surf quality rating from wave height, wind speed and wind direction.

The score starts at 5 and three independent adjustments are added:

    wave height (ft)   <1: -3   [1,2): -1   [2,4]: +2   (4,6]: +1   (6,8]: -1   >8: -2
    wind direction     offshore +2, cross-offshore +1, cross-onshore -1, onshore -2
    wind speed (mph)   <5: +1   [5,15): 0   [15,25): -1   >=25: -2

The sum is clamped to [1, 10] and mapped to a label. Bounds are exact;
moving a single ``<`` to ``<=`` changes the rating users see.
"""

from surfcast.models.forecast import Rating, RatingLabel

BASELINE_SCORE = 5
MIN_SCORE = 1
MAX_SCORE = 10

NO_DATA = Rating(score=0, label=RatingLabel.NO_DATA, color="#888")

# Descending score thresholds; the first match wins.
LABEL_THRESHOLDS: list[tuple[int, RatingLabel, str]] = [
    (8, RatingLabel.EPIC, "#00c853"),
    (6, RatingLabel.GOOD, "#76c442"),
    (4, RatingLabel.FAIR, "#f9a825"),
    (2, RatingLabel.POOR, "#ef6c00"),
]
FLAT_COLOR = "#c62828"


def wave_height_adjustment(wave_height_ft: float) -> int:
    if wave_height_ft < 1:
        return -3
    if wave_height_ft < 2:
        return -1
    if wave_height_ft <= 4:
        return 2
    if wave_height_ft <= 6:
        return 1
    if wave_height_ft <= 8:
        return -1
    return -2


def offshore_difference(wind_direction_deg: float, beach_facing_deg: float) -> float:
    """Angle in [0, 180] between the wind source and the offshore direction.

    Wind directions are where the wind blows FROM. A beach facing east
    (90) is offshore when the wind comes from the west (270).
    """
    offshore_source = (beach_facing_deg + 180) % 360
    return abs(((wind_direction_deg - offshore_source) + 180) % 360 - 180)


def wind_direction_adjustment(
    wind_direction_deg: float | None, beach_facing_deg: float
) -> int:
    if wind_direction_deg is None:
        return 0
    diff = offshore_difference(wind_direction_deg, beach_facing_deg)
    if diff < 45:
        return 2  # offshore
    if diff < 90:
        return 1  # cross-offshore
    if diff < 135:
        return -1  # cross-onshore
    return -2  # onshore


def wind_speed_adjustment(wind_speed_mph: float) -> int:
    if wind_speed_mph < 5:
        return 1
    if wind_speed_mph < 15:
        return 0
    if wind_speed_mph < 25:
        return -1
    return -2


def label_for_score(score: int) -> Rating:
    for threshold, label, color in LABEL_THRESHOLDS:
        if score >= threshold:
            return Rating(score=score, label=label, color=color)
    return Rating(score=score, label=RatingLabel.FLAT, color=FLAT_COLOR)


def rate_conditions(
    wave_height_ft: float | None,
    wind_speed_mph: float | None,
    wind_direction_deg: float | None,
    beach_facing_deg: float,
) -> Rating:
    """Rate one hour of conditions at a beach.

    Returns the NO_DATA rating (score 0) when wave height or wind speed is
    missing. A missing wind direction contributes no direction adjustment.
    """
    if wave_height_ft is None or wind_speed_mph is None:
        return NO_DATA

    score = (
        BASELINE_SCORE
        + wave_height_adjustment(wave_height_ft)
        + wind_direction_adjustment(wind_direction_deg, beach_facing_deg)
        + wind_speed_adjustment(wind_speed_mph)
    )
    score = max(MIN_SCORE, min(MAX_SCORE, score))
    return label_for_score(score)
