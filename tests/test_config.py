import json
from pathlib import Path

import pytest

from fuzzy_suggest.config import DEFAULT_CONFIG, EngineConfig, load_config, normalize_engine_config
from fuzzy_suggest.exceptions import ConfigurationError


def test_defaults_match_default_config() -> None:
    config = EngineConfig()

    assert config.as_dict() == DEFAULT_CONFIG
    assert config.max_results == 5
    assert config.max_distance is None


def test_normalize_merges_over_defaults_and_ignores_unknown_keys() -> None:
    config = normalize_engine_config({"max_distance": 3, "metric": " OSA ", "theme": "dark"})

    assert config == EngineConfig(max_results=5, max_distance=3, memoize=False, metric="osa")


@pytest.mark.parametrize(
    "raw",
    [
        {"max_results": -1},
        {"max_distance": -2},
        {"max_results": "5"},
        {"max_results": False},
        {"memoize": "yes"},
        {"metric": "soundex"},
        {"metric": None},
    ],
)
def test_normalize_rejects_invalid_values(raw) -> None:
    with pytest.raises(ConfigurationError):
        normalize_engine_config(raw)


def test_normalize_rejects_non_object() -> None:
    with pytest.raises(ConfigurationError):
        normalize_engine_config([1, 2])  # type: ignore[arg-type]


def test_merged_applies_only_given_overrides() -> None:
    base = EngineConfig(max_results=8, max_distance=4)

    merged = base.merged(max_results=None, max_distance=2, memoize=True, metric=None)

    assert merged == EngineConfig(max_results=8, max_distance=2, memoize=True)


def test_merged_validates_overrides() -> None:
    with pytest.raises(ConfigurationError):
        EngineConfig().merged(max_results=-3)


def test_load_config_reads_json(tmp_path: Path) -> None:
    path = tmp_path / "engine.json"
    path.write_text(json.dumps({"max_results": 10, "memoize": True}), encoding="utf-8")

    config = load_config(path)

    assert config.max_results == 10
    assert config.memoize is True


def test_load_config_missing_file_uses_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "missing.json") == EngineConfig()


def test_load_config_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "engine.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(path)


def test_validate_count_is_shared_by_engine_and_config() -> None:
    from fuzzy_suggest.config import validate_count
    from fuzzy_suggest.engine import SuggestionEngine

    assert validate_count(0, "max_results") == 0
    assert validate_count(None, "max_distance", allow_none=True) is None
    with pytest.raises(ConfigurationError, match="max_distance must be >= 0"):
        validate_count(-1, "max_distance", allow_none=True)
    with pytest.raises(ConfigurationError, match="max_results must be an integer"):
        SuggestionEngine([], max_results=True)
