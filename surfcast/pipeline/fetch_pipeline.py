"""Fetch pipeline: one full batch over all configured spots."""

import logging
import time
import uuid
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from surfcast.config.loader import config_hash
from surfcast.config.schema import SpotConfig, SurfcastConfig
from surfcast.ingest.spot_fetcher import SpotFetcher
from surfcast.models.common import utc_now
from surfcast.models.forecast import Forecast
from surfcast.models.reporting import RunSummary
from surfcast.pipeline.aggregator import build_forecast, build_spot_index
from surfcast.reporting.formatters import format_summary_text
from surfcast.reporting.run_summarizer import RunSummarizer
from surfcast.storage.json_writer import write_forecast, write_index

logger = logging.getLogger(__name__)


class FetchPipeline:
    def __init__(
        self,
        config: SurfcastConfig,
        fetcher: SpotFetcher | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.config = config
        self.fetcher = fetcher or SpotFetcher.from_config(config.sources)
        self.sleep = sleep
        self.clock = clock
        self.local_tz = ZoneInfo(config.sources.timezone)

    def run(self, slugs: list[str] | None = None) -> RunSummary:
        """Fetch, rate and write every enabled spot, then the index.

        ``slugs`` limits which spots are fetched; the index always lists
        every enabled spot.

        Spots run one after another with a fixed pause between them. A
        failing spot is logged and skipped; it never stops the batch.
        """
        start_time = time.monotonic()
        run_id = str(uuid.uuid4())
        summarizer = RunSummarizer(run_id)

        enabled = [s for s in self.config.spots if s.enabled]
        spots = [s for s in enabled if slugs is None or s.slug in slugs]
        summarizer.record_spots(len(spots))
        logger.info(
            "Surf forecast fetch %s: %d spots (config %s)",
            run_id[:8], len(spots), config_hash(self.config),
        )

        Path(self.config.output.forecasts_dir).mkdir(parents=True, exist_ok=True)

        delay = self.config.ops.request_delay_ms / 1000
        for i, spot in enumerate(spots):
            if i > 0 and delay > 0:
                self.sleep(delay)
            try:
                forecast = self.process_spot(spot)
            except Exception as e:
                logger.exception("✗ %s: %s", spot.name, e)
                summarizer.record_spot_failure(spot.slug, str(e))
                continue
            summarizer.record_forecast(forecast)
            logger.info(
                "✓ %s.json (%d hours, %d tides)",
                spot.slug, len(forecast.hourly), len(forecast.tides),
            )

        try:
            write_index(build_spot_index(enabled), self.config.output.index_path)
            summarizer.record_index()
        except OSError as e:
            logger.exception("Failed to write spot index")
            summarizer.record_error(f"index: {e}")

        summarizer.record_duration(time.monotonic() - start_time)
        summary = summarizer.finalize()
        logger.info("\n%s", format_summary_text(summary))
        return summary

    def process_spot(self, spot: SpotConfig) -> Forecast:
        """Fetch, aggregate and write one spot. Any error propagates."""
        now = self.clock()
        data = self.fetcher.fetch(spot, now)
        forecast = build_forecast(
            spot,
            data.marine,
            data.wind,
            data.tides,
            now=now,
            updated=self.clock().isoformat(),
            local_tz=self.local_tz,
            max_tide_events=self.config.ops.max_tide_events,
        )
        write_forecast(forecast, self.config.output.forecasts_dir)
        return forecast
