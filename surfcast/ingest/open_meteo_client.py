"""Open-Meteo clients for hourly marine (wave/swell) and wind forecasts."""

import logging

import httpx

from surfcast.config.schema import MARINE_BASE_URL, WIND_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "surfcast/0.1.0"

MARINE_HOURLY_FIELDS = (
    "wave_height",
    "wave_period",
    "wave_direction",
    "swell_wave_height",
    "swell_wave_period",
    "swell_wave_direction",
)
WIND_HOURLY_FIELDS = (
    "windspeed_10m",
    "winddirection_10m",
    "windgusts_10m",
)


class _OpenMeteoClient:
    hourly_fields: tuple[str, ...] = ()
    source_name = "Open-Meteo"

    def __init__(
        self,
        base_url: str,
        timezone: str = "America/New_York",
        forecast_days: int = 7,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.timezone = timezone
        self.forecast_days = forecast_days
        self.user_agent = user_agent
        self.timeout = timeout

    def _extra_params(self) -> dict:
        return {}

    def get_hourly(self, lat: float, lon: float) -> dict:
        """Fetch the hourly forecast for a point.

        Raises httpx.HTTPStatusError on a non-2xx response. No retry.
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "hourly": ",".join(self.hourly_fields),
            "timezone": self.timezone,
            "forecast_days": self.forecast_days,
            **self._extra_params(),
        }
        headers = {"User-Agent": self.user_agent}
        resp = httpx.get(
            self.base_url, params=params, headers=headers, timeout=self.timeout
        )
        if resp.is_error:
            logger.error(
                "%s API error %d for (%.4f, %.4f)",
                self.source_name, resp.status_code, lat, lon,
            )
        resp.raise_for_status()
        return resp.json()


class MarineClient(_OpenMeteoClient):
    hourly_fields = MARINE_HOURLY_FIELDS
    source_name = "Wave"

    def __init__(self, base_url: str = MARINE_BASE_URL, **kwargs):
        super().__init__(base_url, **kwargs)


class WindClient(_OpenMeteoClient):
    hourly_fields = WIND_HOURLY_FIELDS
    source_name = "Wind"

    def __init__(self, base_url: str = WIND_BASE_URL, **kwargs):
        super().__init__(base_url, **kwargs)

    def _extra_params(self) -> dict:
        return {"wind_speed_unit": "mph"}
