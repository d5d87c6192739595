"""NOAA CO-OPS client for high/low tide predictions."""

import logging
from datetime import UTC, datetime, timedelta, tzinfo

import httpx

from surfcast.config.schema import TIDES_BASE_URL
from surfcast.models.common import utc_now

logger = logging.getLogger(__name__)

DEFAULT_APPLICATION = "surf_forecast"


class TideClient:
    def __init__(
        self,
        base_url: str = TIDES_BASE_URL,
        datum: str = "MLLW",
        window_days: int = 7,
        application: str = DEFAULT_APPLICATION,
        timeout: float = 30.0,
        local_tz: tzinfo = UTC,
    ):
        self.base_url = base_url
        self.datum = datum
        self.window_days = window_days
        self.application = application
        self.timeout = timeout
        self.local_tz = local_tz

    def get_predictions(self, station_id: str, now: datetime | None = None) -> list[dict]:
        """Fetch hi/lo predictions for a station over the next window_days.

        Each prediction looks like ``{"t": "2026-02-11 04:37", "v": "3.512",
        "type": "H"}`` with times in station local time. An ``error`` object
        in the payload is logged as a warning and yields no events; a non-2xx
        response raises httpx.HTTPStatusError.

        The date window is in the station's local zone, the same zone the
        returned times are in.
        """
        if now is None:
            now = utc_now()
        now = now.astimezone(self.local_tz)
        end = now + timedelta(days=self.window_days)
        params = {
            "begin_date": now.strftime("%Y%m%d"),
            "end_date": end.strftime("%Y%m%d"),
            "station": station_id,
            "product": "predictions",
            "datum": self.datum,
            "time_zone": "lst_ldt",
            "interval": "hilo",
            "units": "english",
            "application": self.application,
            "format": "json",
        }
        resp = httpx.get(self.base_url, params=params, timeout=self.timeout)
        if resp.is_error:
            logger.error("Tide API error %d for station %s", resp.status_code, station_id)
        resp.raise_for_status()
        data = resp.json()

        error = data.get("error")
        if error:
            message = error.get("message", error) if isinstance(error, dict) else error
            logger.warning("Tide warning for %s: %s", station_id, message)
            return []
        return data.get("predictions") or []
