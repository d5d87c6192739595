"""YAML config loader and spot list loading."""

import hashlib
import json
from pathlib import Path

import yaml

from surfcast.config.defaults import DEFAULT_SPOTS
from surfcast.config.schema import SpotConfig, SurfcastConfig


def load_config(path: str | Path | None = None) -> SurfcastConfig:
    """Load and validate config from a YAML file.

    A missing path or file yields the defaults. Spots come from, in order:
    the ``spots`` list in the YAML, the JSON file named by ``spots_file``
    (resolved relative to the config file), or DEFAULT_SPOTS.
    """
    raw: dict = {}
    base_dir = Path.cwd()
    if path is not None:
        path = Path(path)
        base_dir = path.parent
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}

    if not raw.get("spots"):
        spots_file = raw.get("spots_file")
        if spots_file:
            spots = load_spots(base_dir / spots_file)
        else:
            spots = DEFAULT_SPOTS
        raw["spots"] = [s.model_dump() for s in spots]

    return SurfcastConfig(**raw)


def load_spots(path: str | Path) -> list[SpotConfig]:
    """Load a spot list from JSON.

    Accepts the frontend's camelCase records (``tideStationId``) as well
    as snake_case ones.
    """
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Spot file {path} must contain a JSON list")
    return [SpotConfig.model_validate(item) for item in data]


def config_hash(config: SurfcastConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]
