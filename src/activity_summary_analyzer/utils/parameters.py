"""
Configuration and parameter loading using Pydantic.

This module provides centralized configuration management for the entire application.
Parameters are loaded from YAML and validated using Pydantic models. Every section
has defaults, so the analyzer also runs without a configuration file.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from activity_summary_analyzer.utils.exceptions import ConfigurationError

DEFAULT_ATTRIBUTE_MAPPINGS = {
    "activeEnergyBurned": "calories_burned",
    "activeEnergyBurnedGoal": "calories_goal",
    "appleExerciseTime": "exercise_minutes",
    "appleExerciseTimeGoal": "exercise_goal",
    "appleStandHours": "stand_hours",
    "appleStandHoursGoal": "stand_goal",
}


class ParserConfig(BaseModel):
    """Export parsing configuration."""

    tag_name: str = Field("ActivitySummary", pattern=r"^[A-Za-z_][\w.-]*$")
    date_attribute: str = "dateComponents"
    attribute_mappings: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_ATTRIBUTE_MAPPINGS)
    )


class LoaderConfig(BaseModel):
    """Export file loading configuration."""

    max_full_read_bytes: int = Field(10_000_000, gt=0)
    tail_window_bytes: int = Field(5_000_000, gt=0)
    encoding: str = "utf-8"


class RecommendationConfig(BaseModel):
    """Goal recommendation configuration."""

    raise_threshold: float = Field(0.8, ge=0.0, le=1.0)
    lower_threshold: float = Field(0.3, ge=0.0, le=1.0)
    labels: dict[str, str] = Field(
        default_factory=lambda: {
            "calories": "calories",
            "exercise": "exercise",
            "stand": "stand hours",
        }
    )

    @model_validator(mode="after")
    def _check_thresholds(self) -> "RecommendationConfig":
        if self.lower_threshold > self.raise_threshold:
            raise ValueError("lower_threshold must not exceed raise_threshold")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str | None = None
    console: bool = True


class AppConfig(BaseSettings):
    """Main application configuration."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    recommendation: RecommendationConfig = Field(default_factory=RecommendationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="ACTIVITY_ANALYZER_", env_nested_delimiter="__", case_sensitive=False
    )


class ParameterLoader:
    """
    Centralized parameter loader for the application.

    Loads and validates configuration from YAML files using Pydantic models.
    Provides type-safe access to all configuration parameters.
    """

    def __init__(self, config_path: str | None = None) -> None:
        """
        Initialize parameter loader.

        Args:
            config_path: Path to the YAML configuration file. If None, built-in
                defaults are used.

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid.
        """
        self.config_path = Path(config_path) if config_path else None
        self.config: AppConfig
        self._load_config()

    def _load_config(self) -> None:
        """
        Load configuration from YAML file.

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid.
        """
        if self.config_path is None:
            try:
                self.config = AppConfig()
            except Exception as e:
                raise ConfigurationError(f"Failed to load configuration: {e}") from e
            return

        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}

            if not isinstance(config_dict, dict):
                raise ConfigurationError(
                    f"Configuration root must be a mapping: {self.config_path}"
                )

            self.config = AppConfig(**config_dict)

        except ConfigurationError:
            raise
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML configuration: {e}") from e
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

    def get_parser_config(self) -> ParserConfig:
        """Get export parsing configuration."""
        return self.config.parser

    def get_loader_config(self) -> LoaderConfig:
        """Get file loading configuration."""
        return self.config.loader

    def get_recommendation_config(self) -> RecommendationConfig:
        """Get goal recommendation configuration."""
        return self.config.recommendation

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.config.logging

    def get_raw_config(self) -> dict[str, Any]:
        """
        Get raw configuration dictionary.

        Returns:
            Dictionary representation of the configuration.
        """
        return self.config.model_dump()
