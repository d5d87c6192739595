"""Run summarizer: aggregates per-spot outcomes into a RunSummary."""

from surfcast.models.forecast import Forecast
from surfcast.models.reporting import RunSummary, SpotFailure


class RunSummarizer:
    def __init__(self, run_id: str):
        self.summary = RunSummary(run_id=run_id)

    def record_spots(self, spots_total: int) -> None:
        self.summary.spots_total = spots_total

    def record_forecast(self, forecast: Forecast) -> None:
        self.summary.spots_written.append(forecast.slug)
        self.summary.hourly_records += len(forecast.hourly)
        self.summary.tide_events += len(forecast.tides)

    def record_spot_failure(self, slug: str, error: str) -> None:
        self.summary.spots_failed.append(SpotFailure(slug=slug, error=error))

    def record_index(self) -> None:
        self.summary.index_written = True

    def record_duration(self, seconds: float) -> None:
        self.summary.duration_seconds = seconds

    def record_error(self, error: str) -> None:
        self.summary.errors.append(error)

    def finalize(self) -> RunSummary:
        return self.summary
