"""Default North Carolina surf spots with NOAA tide station ids."""

from surfcast.config.schema import SpotConfig

DEFAULT_SPOTS: list[SpotConfig] = [
    SpotConfig(
        name="Duck",
        slug="duck",
        description="Northern Outer Banks beach break near the FRF pier",
        lat=36.1826,
        lon=-75.7449,
        facing=75,
        tide_station_id="8651370",
    ),
    SpotConfig(
        name="Nags Head",
        slug="nags-head",
        description="Outer Banks beach break with sandbars along the piers",
        lat=35.9574,
        lon=-75.6241,
        facing=80,
        tide_station_id="8652587",
    ),
    SpotConfig(
        name="Cape Hatteras",
        slug="cape-hatteras",
        description="Buxton lighthouse breaks, the most consistent swell magnet in the state",
        lat=35.2503,
        lon=-75.5191,
        facing=110,
        tide_station_id="8654467",
    ),
    SpotConfig(
        name="Emerald Isle",
        slug="emerald-isle",
        description="South-facing Crystal Coast beach, best on south swells",
        lat=34.6555,
        lon=-77.0336,
        facing=170,
        tide_station_id="8656483",
    ),
    SpotConfig(
        name="Wrightsville Beach",
        slug="wrightsville-beach",
        description="Southeast-facing beach break around Johnnie Mercer's Pier",
        lat=34.2130,
        lon=-77.7866,
        facing=120,
        tide_station_id="8658163",
    ),
]
