"""Static JSON output for the frontend: one file per spot plus an index."""

import json
import logging
import os
import tempfile
from pathlib import Path

from surfcast.models.forecast import Forecast, SpotIndexEntry

logger = logging.getLogger(__name__)


def write_forecast(forecast: Forecast, forecasts_dir: str | Path) -> Path:
    """Write ``<slug>.json`` into forecasts_dir and return its path."""
    path = Path(forecasts_dir) / f"{forecast.slug}.json"
    _write_json_atomic(path, forecast.to_dict())
    return path


def write_index(entries: list[SpotIndexEntry], index_path: str | Path) -> Path:
    path = Path(index_path)
    _write_json_atomic(path, [e.to_dict() for e in entries])
    return path


def _write_json_atomic(path: Path, data: object) -> None:
    """Write JSON via a temp file in the same directory, then rename over path.

    Readers see either the previous file or the complete new one.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
        # mkstemp creates 0600; published files get the usual umask-based mode
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug("Wrote %s", path)


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask
