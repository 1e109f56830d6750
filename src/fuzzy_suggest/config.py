from __future__ import annotations

import json
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any

from fuzzy_suggest.exceptions import ConfigurationError
from fuzzy_suggest.logger import get_logger
from fuzzy_suggest.metric import METRICS

logger = get_logger(__name__)

DEFAULT_METRIC = "damerau_levenshtein"

# Five propositions, no distance ceiling, representations not memoized.
DEFAULT_CONFIG: dict[str, Any] = {
    "max_results": 5,
    "max_distance": None,
    "memoize": False,
    "metric": DEFAULT_METRIC,
}


@dataclass(frozen=True)
class EngineConfig:
    max_results: int = DEFAULT_CONFIG["max_results"]
    max_distance: int | None = DEFAULT_CONFIG["max_distance"]
    memoize: bool = DEFAULT_CONFIG["memoize"]
    metric: str = DEFAULT_METRIC

    def merged(self, **overrides) -> "EngineConfig":
        """Return a copy with every non-``None`` override applied and validated."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        return normalize_engine_config({**asdict(self), **updates})

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def validate_count(raw, key: str, *, allow_none: bool = False) -> int | None:
    """Return ``raw`` if it is a non-negative int (or ``None`` when allowed).

    Booleans are rejected even though they are ``int`` subclasses.
    """
    if raw is None and allow_none:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}")
    if raw < 0:
        raise ConfigurationError(f"{key} must be >= 0, got {raw}")
    return raw


def _normalize_metric(raw) -> str:
    if not isinstance(raw, str) or raw.strip().lower() not in METRICS:
        choices = ", ".join(sorted(METRICS))
        raise ConfigurationError(f"unknown metric {raw!r} (choose from: {choices})")
    return raw.strip().lower()


def normalize_engine_config(raw: dict[str, Any]) -> EngineConfig:
    """Merge ``raw`` over the defaults and validate every field.

    Unknown keys are ignored. Invalid values raise ``ConfigurationError``;
    nothing is clamped.
    """
    if not isinstance(raw, dict):
        raise ConfigurationError(f"config must be a JSON object, got {type(raw).__name__}")
    unknown = sorted(set(raw) - set(DEFAULT_CONFIG))
    if unknown:
        logger.info("Ignoring unknown config keys: %s", ", ".join(unknown))
    merged = {**DEFAULT_CONFIG, **{k: v for k, v in raw.items() if k in DEFAULT_CONFIG}}
    memoize = merged["memoize"]
    if not isinstance(memoize, bool):
        raise ConfigurationError(f"memoize must be true or false, got {memoize!r}")
    return EngineConfig(
        max_results=validate_count(merged["max_results"], "max_results"),
        max_distance=validate_count(merged["max_distance"], "max_distance", allow_none=True),
        memoize=memoize,
        metric=_normalize_metric(merged["metric"]),
    )


def load_config(path: Path) -> EngineConfig:
    """Read an engine config from a JSON file; a missing file yields the defaults."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("No config at %s, using defaults", path)
        return EngineConfig()
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"cannot read config {path}: {exc}") from exc
    return normalize_engine_config(data)

