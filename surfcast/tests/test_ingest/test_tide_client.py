"""Tests for the NOAA CO-OPS tide client with mocked httpx."""

import json
from datetime import UTC, datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import httpx
import pytest
import respx

from surfcast.ingest.tide_client import TideClient

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"
TIDES_URL = "https://test-tides.example.com/api/prod/datagetter"
NOW = datetime(2026, 2, 11, 10, 0, tzinfo=UTC)


def _load(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def tides() -> TideClient:
    return TideClient(base_url=TIDES_URL)


class TestGetPredictions:
    @respx.mock
    def test_success(self, tides: TideClient, tide_payload: dict):
        respx.get(TIDES_URL).mock(return_value=httpx.Response(200, json=tide_payload))

        result = tides.get_predictions("8651370", NOW)
        assert len(result) == 9
        assert result[1] == {"t": "2026-02-11 02:14", "v": "3.571", "type": "H"}

    @respx.mock
    def test_query_params(self, tides: TideClient, tide_payload: dict):
        route = respx.get(TIDES_URL).mock(
            return_value=httpx.Response(200, json=tide_payload)
        )

        tides.get_predictions("8651370", NOW)
        params = route.calls[0].request.url.params
        assert params["station"] == "8651370"
        assert params["begin_date"] == "20260211"
        assert params["end_date"] == "20260218"
        assert params["product"] == "predictions"
        assert params["datum"] == "MLLW"
        assert params["time_zone"] == "lst_ldt"
        assert params["interval"] == "hilo"
        assert params["units"] == "english"
        assert params["format"] == "json"
        assert params["application"] == "surf_forecast"

    @respx.mock
    def test_error_payload_is_soft(self, tides: TideClient, caplog):
        respx.get(TIDES_URL).mock(
            return_value=httpx.Response(200, json=_load("noaa_tides_error.json"))
        )

        with caplog.at_level("WARNING"):
            result = tides.get_predictions("0000000", NOW)
        assert result == []
        assert "No Predictions data was found" in caplog.text

    @respx.mock
    def test_missing_predictions(self, tides: TideClient):
        respx.get(TIDES_URL).mock(return_value=httpx.Response(200, json={}))

        assert tides.get_predictions("8651370", NOW) == []

    @respx.mock
    def test_http_error_raises(self, tides: TideClient):
        respx.get(TIDES_URL).mock(return_value=httpx.Response(500))

        with pytest.raises(httpx.HTTPStatusError):
            tides.get_predictions("8651370", NOW)

    @respx.mock
    def test_date_window_in_station_local_time(self, tide_payload: dict):
        # 02:00 UTC on Jul 11 is still 22:00 on Jul 10 in New York
        client = TideClient(base_url=TIDES_URL, local_tz=ZoneInfo("America/New_York"))
        route = respx.get(TIDES_URL).mock(
            return_value=httpx.Response(200, json=tide_payload)
        )

        client.get_predictions("8651370", datetime(2026, 7, 11, 2, 0, tzinfo=UTC))
        params = route.calls[0].request.url.params
        assert params["begin_date"] == "20260710"
        assert params["end_date"] == "20260717"
