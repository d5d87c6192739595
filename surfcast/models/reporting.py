"""Run reporting models."""

from dataclasses import dataclass, field


@dataclass
class SpotFailure:
    slug: str
    error: str


@dataclass
class RunSummary:
    run_id: str
    spots_total: int = 0
    spots_written: list[str] = field(default_factory=list)
    spots_failed: list[SpotFailure] = field(default_factory=list)
    hourly_records: int = 0
    tide_events: int = 0
    index_written: bool = False
    duration_seconds: float = 0.0
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.spots_failed and not self.errors
