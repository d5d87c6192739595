"""Tests for reporting: summarizer, formatters."""

import json

from surfcast.models.forecast import Forecast
from surfcast.reporting.formatters import format_summary_json, format_summary_text
from surfcast.reporting.run_summarizer import RunSummarizer


def _forecast(slug: str) -> Forecast:
    return Forecast(
        spot=slug.title(), slug=slug, description="", lat=35.0, lon=-75.0,
        updated="2026-02-11T10:00:00+00:00", tides=[], hourly=[],
    )


class TestRunSummarizer:
    def test_basic_flow(self):
        s = RunSummarizer("run12345-abcd")
        s.record_spots(3)
        s.record_forecast(_forecast("duck"))
        s.record_spot_failure("nags-head", "Wind API error: 502")
        s.record_forecast(_forecast("emerald-isle"))
        s.record_index()
        s.record_duration(2.5)

        summary = s.finalize()
        assert summary.spots_total == 3
        assert summary.spots_written == ["duck", "emerald-isle"]
        assert summary.spots_failed[0].slug == "nags-head"
        assert summary.index_written
        assert not summary.ok

    def test_ok_when_everything_written(self):
        s = RunSummarizer("run1")
        s.record_spots(1)
        s.record_forecast(_forecast("duck"))
        assert s.finalize().ok

    def test_error_makes_run_not_ok(self):
        s = RunSummarizer("run1")
        s.record_error("index: disk full")
        assert not s.finalize().ok


class TestFormatters:
    def _summary(self):
        s = RunSummarizer("run12345-abcd")
        s.record_spots(2)
        s.record_forecast(_forecast("duck"))
        s.record_spot_failure("nags-head", "Wind API error: 502")
        s.record_duration(1.5)
        return s.finalize()

    def test_text(self):
        text = format_summary_text(self._summary())
        assert "Run run12345" in text
        assert "Spots: 1/2 written, 1 failed" in text
        assert "✗ nags-head: Wind API error: 502" in text
        assert "Index: NOT written" in text
        assert "Duration: 1.5s" in text

    def test_json(self):
        data = json.loads(format_summary_json(self._summary()))
        assert data["spots_written"] == ["duck"]
        assert data["spots_failed"] == [
            {"slug": "nags-head", "error": "Wind API error: 502"}
        ]
