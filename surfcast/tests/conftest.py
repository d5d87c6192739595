"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from surfcast.config.defaults import DEFAULT_SPOTS
from surfcast.config.schema import OpsConfig, OutputConfig, SpotConfig, SurfcastConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str):
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def duck() -> SpotConfig:
    return DEFAULT_SPOTS[0]


@pytest.fixture
def marine_payload() -> dict:
    return load_fixture("open_meteo_marine_duck.json")


@pytest.fixture
def wind_payload() -> dict:
    return load_fixture("open_meteo_wind_duck.json")


@pytest.fixture
def tide_payload() -> dict:
    return load_fixture("noaa_tides_8651370.json")


@pytest.fixture
def test_config(tmp_path: Path) -> SurfcastConfig:
    """Config with three spots writing into tmp_path and the default 600ms pause."""
    spots = [
        SpotConfig(
            name=f"Spot {c}", slug=f"spot-{c.lower()}", lat=35.0, lon=-75.5,
            facing=90, tide_station_id=f"86500{i}",
        )
        for i, c in enumerate("ABC")
    ]
    return SurfcastConfig(
        output=OutputConfig(
            forecasts_dir=str(tmp_path / "forecasts"),
            index_path=str(tmp_path / "spots.json"),
        ),
        ops=OpsConfig(request_delay_ms=600),
        spots=spots,
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "sources": {"timezone": "America/New_York", "forecast_days": 3},
        "ops": {"request_delay_ms": 0},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
