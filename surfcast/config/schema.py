"""Pydantic v2 configuration schema with strict validation."""

from pydantic import AliasChoices, BaseModel, Field

MARINE_BASE_URL = "https://marine-api.open-meteo.com/v1/marine"
WIND_BASE_URL = "https://api.open-meteo.com/v1/forecast"
TIDES_BASE_URL = "https://api.tidesandcurrents.noaa.gov/api/prod/datagetter"


class SpotConfig(BaseModel):
    model_config = {"extra": "forbid", "populate_by_name": True, "frozen": True}

    name: str
    slug: str = Field(pattern=r"^[a-z0-9][a-z0-9-]*$")
    description: str = ""
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    facing: int = Field(ge=0, le=359)  # bearing the beach faces, toward the water
    tide_station_id: str = Field(
        validation_alias=AliasChoices("tide_station_id", "tideStationId")
    )
    enabled: bool = True


class SourcesConfig(BaseModel):
    model_config = {"extra": "forbid"}

    marine_url: str = MARINE_BASE_URL
    wind_url: str = WIND_BASE_URL
    tides_url: str = TIDES_BASE_URL
    timezone: str = "America/New_York"
    forecast_days: int = Field(default=7, ge=1, le=16)
    tide_window_days: int = Field(default=7, ge=1, le=31)
    tide_datum: str = "MLLW"
    application: str = "surf_forecast"
    user_agent: str = "surfcast/0.1.0"
    timeout: float = Field(default=30.0, gt=0.0)


class OutputConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecasts_dir: str = "public/data/forecasts"
    index_path: str = "public/data/spots.json"


class OpsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    request_delay_ms: int = Field(default=600, ge=0)
    max_tide_events: int = Field(default=6, ge=0)


class SurfcastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    sources: SourcesConfig = SourcesConfig()
    output: OutputConfig = OutputConfig()
    ops: OpsConfig = OpsConfig()
    spots_file: str | None = None
    spots: list[SpotConfig] = []
