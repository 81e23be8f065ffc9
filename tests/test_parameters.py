"""Unit tests for configuration loading."""

from pathlib import Path

import pytest

from activity_summary_analyzer.utils.exceptions import ConfigurationError
from activity_summary_analyzer.utils.parameters import (
    DEFAULT_ATTRIBUTE_MAPPINGS,
    ParameterLoader,
    RecommendationConfig,
)


def test_defaults_without_config_file() -> None:
    """Test that built-in defaults are used when no file is given."""
    loader = ParameterLoader()

    if loader.get_parser_config().tag_name != "ActivitySummary":
        raise AssertionError("Unexpected default tag name")
    if loader.get_parser_config().attribute_mappings != DEFAULT_ATTRIBUTE_MAPPINGS:
        raise AssertionError("Unexpected default attribute mappings")
    if loader.get_loader_config().max_full_read_bytes != 10_000_000:
        raise AssertionError("Unexpected default full read threshold")
    if loader.get_loader_config().tail_window_bytes != 5_000_000:
        raise AssertionError("Unexpected default tail window")
    if loader.get_recommendation_config().raise_threshold != 0.8:
        raise AssertionError("Unexpected default raise threshold")
    if loader.get_recommendation_config().lower_threshold != 0.3:
        raise AssertionError("Unexpected default lower threshold")


def test_load_partial_yaml(tmp_path: Path) -> None:
    """Test that YAML values override defaults section by section."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "loader:\n"
        "  tail_window_bytes: 1000\n"
        "logging:\n"
        "  level: DEBUG\n"
        "  console: false\n",
        encoding="utf-8",
    )

    loader = ParameterLoader(str(config_file))

    if loader.get_loader_config().tail_window_bytes != 1000:
        raise AssertionError("tail_window_bytes was not loaded")
    if loader.get_loader_config().max_full_read_bytes != 10_000_000:
        raise AssertionError("max_full_read_bytes should keep its default")
    if loader.get_logging_config().level != "DEBUG" or loader.get_logging_config().console:
        raise AssertionError("logging section was not loaded")
    if loader.get_raw_config()["recommendation"]["labels"]["stand"] != "stand hours":
        raise AssertionError("recommendation section should keep its defaults")


def test_shipped_config_is_valid() -> None:
    """Test that the sample configuration file loads."""
    config_file = Path(__file__).resolve().parent.parent / "config" / "config.yaml"

    loader = ParameterLoader(str(config_file))

    if loader.get_parser_config().date_attribute != "dateComponents":
        raise AssertionError("Unexpected date attribute in shipped config")


def test_missing_config_file_raises(tmp_path: Path) -> None:
    """Test that an explicit but missing file is an error."""
    with pytest.raises(ConfigurationError):
        ParameterLoader(str(tmp_path / "missing.yaml"))


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    """Test that broken YAML or invalid values are configuration errors."""
    broken = tmp_path / "broken.yaml"
    broken.write_text("loader: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ParameterLoader(str(broken))

    invalid = tmp_path / "invalid.yaml"
    invalid.write_text("loader:\n  tail_window_bytes: -5\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ParameterLoader(str(invalid))

    not_mapping = tmp_path / "list.yaml"
    not_mapping.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ParameterLoader(str(not_mapping))


def test_recommendation_thresholds_must_be_ordered() -> None:
    """Test that a lower threshold above the raise threshold is rejected."""
    with pytest.raises(ValueError):
        RecommendationConfig(raise_threshold=0.3, lower_threshold=0.8)
