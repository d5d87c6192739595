"""Spot fetcher: retrieves wave, wind and tide data for one spot in parallel."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from surfcast.config.schema import SourcesConfig, SpotConfig
from surfcast.ingest.open_meteo_client import MarineClient, WindClient
from surfcast.ingest.tide_client import TideClient

logger = logging.getLogger(__name__)

FETCH_WORKERS = 3


@dataclass(frozen=True)
class SpotData:
    marine: dict
    wind: dict
    tides: list[dict]


class SpotFetcher:
    def __init__(
        self,
        marine_client: MarineClient,
        wind_client: WindClient,
        tide_client: TideClient,
    ):
        self.marine = marine_client
        self.wind = wind_client
        self.tides = tide_client

    @classmethod
    def from_config(cls, sources: SourcesConfig) -> "SpotFetcher":
        common = {
            "timezone": sources.timezone,
            "forecast_days": sources.forecast_days,
            "user_agent": sources.user_agent,
            "timeout": sources.timeout,
        }
        return cls(
            MarineClient(sources.marine_url, **common),
            WindClient(sources.wind_url, **common),
            TideClient(
                sources.tides_url,
                datum=sources.tide_datum,
                window_days=sources.tide_window_days,
                application=sources.application,
                timeout=sources.timeout,
                local_tz=ZoneInfo(sources.timezone),
            ),
        )

    def fetch(self, spot: SpotConfig, now: datetime) -> SpotData:
        """Fetch all three sources concurrently and wait for every one.

        The first failure is re-raised; the spot gets no partial data.
        """
        logger.info("Fetching %s...", spot.name)
        with ThreadPoolExecutor(max_workers=FETCH_WORKERS) as pool:
            marine_f = pool.submit(self.marine.get_hourly, spot.lat, spot.lon)
            wind_f = pool.submit(self.wind.get_hourly, spot.lat, spot.lon)
            tides_f = pool.submit(self.tides.get_predictions, spot.tide_station_id, now)
            return SpotData(
                marine=marine_f.result(),
                wind=wind_f.result(),
                tides=tides_f.result(),
            )
