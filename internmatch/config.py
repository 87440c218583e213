"""Load env settings, the saved search profile and operator weight overrides."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from internmatch.errors import ConfigError
from internmatch.log import get_logger
from internmatch.models import UserProfile

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
PROFILE_PATH: Path = CONFIG_DIR / "profile.yaml"
WEIGHTS_PATH: Path = CONFIG_DIR / "weights.yaml"
DATA_DIR: Path = ROOT_DIR / "data"
REPORTS_DIR: Path = ROOT_DIR / "reports"

DEFAULT_DATASET_PATH: Path = DATA_DIR / "dataset.json"
DEFAULT_RESULT_LIMIT = 50

# skills > location > education > sector; sums to 1.0
DEFAULT_WEIGHTS: dict[str, float] = {
    "skills": 0.52,
    "location": 0.20,
    "education": 0.16,
    "sector": 0.12,
}


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def dataset_path() -> Path:
    raw = get_env("INTERNMATCH_DATASET_PATH")
    return Path(raw) if raw else DEFAULT_DATASET_PATH


def dataset_url() -> str:
    return get_env("INTERNMATCH_DATASET_URL")


def result_limit() -> int:
    raw = get_env("INTERNMATCH_RESULT_LIMIT")
    if not raw:
        return DEFAULT_RESULT_LIMIT
    try:
        value = int(raw)
    except ValueError:
        log.warning("INTERNMATCH_RESULT_LIMIT=%r is not an integer, using %d", raw, DEFAULT_RESULT_LIMIT)
        return DEFAULT_RESULT_LIMIT
    return max(1, value)


def ensure_dirs() -> None:
    for d in (DATA_DIR, REPORTS_DIR):
        d.mkdir(parents=True, exist_ok=True)


def _read_yaml(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path.name}: invalid YAML ({exc})") from exc


def load_profile(path: Path | None = None) -> UserProfile:
    """Read a saved query. A missing file is an empty profile."""
    path = path or PROFILE_PATH
    if not path.exists():
        log.debug("No saved profile at %s", path)
        return UserProfile()
    data = _read_yaml(path) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name}: expected a mapping, got {type(data).__name__}")
    return UserProfile.from_dict(data)


def load_weights(path: Path | None = None) -> dict[str, float]:
    """Built-in weights, overridden key-by-key from weights.yaml when present."""
    path = path or WEIGHTS_PATH
    weights = dict(DEFAULT_WEIGHTS)
    if not path.exists():
        return weights

    data = _read_yaml(path) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name}: expected a mapping of factor -> weight")
    for key, value in data.items():
        if key not in weights:
            raise ConfigError(f"{path.name}: unknown factor {key!r}")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{path.name}: weight for {key!r} must be a number")
        weights[key] = float(value)

    total = sum(weights.values())
    if abs(total - 1.0) > 1e-6:
        log.warning("Weights in %s sum to %.3f, not 1.0", path.name, total)
    log.info("Loaded weight overrides from %s", path.name)
    return weights
