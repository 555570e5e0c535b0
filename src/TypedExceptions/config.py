# ============================================================================
# TypedExceptions - Configuration Management
#
# Purpose: Load command line settings from YAML and env vars
# Inputs: YAML files, environment variables
# Outputs: Config model with logging and display settings
# Dependencies: pyyaml, pydantic, pathlib
# Usage: config = Config.from_default() or Config.from_yaml("path.yaml")
#
# Changelog:
#   2026-09-30: Initial configuration (logging, display sections)
#   2026-10-08: Validate logging level names at load time
# ============================================================================

import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, Field, field_validator

from TypedExceptions.logging_utils import DEFAULT_FORMAT, get_logger

logger = get_logger(__name__)

ENV_PREFIX = "TYPEDEXCEPTIONS_"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    format: str = DEFAULT_FORMAT

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if not isinstance(logging.getLevelName(value.upper()), int):
            raise ValueError(f"Unknown logging level: {value}")
        return value.upper()


class DisplayConfig(BaseModel):
    """Which exception fields the CLI prints besides the message."""

    show_kind: bool = True
    show_parameter: bool = True
    show_tags: bool = False


class Config(BaseModel):
    """Root configuration object."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """
        Load configuration from a YAML file with environment variable overrides.

        Args:
            path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(yaml_path, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}

        logger.debug(f"Loaded configuration from {yaml_path}")
        return cls(**cls._apply_env_overrides(data))

    @classmethod
    def from_default(cls) -> "Config":
        """Load configs/default.yaml from the source tree, or built-in defaults."""
        default_config = Path(__file__).parent.parent.parent / "configs" / "default.yaml"

        if default_config.exists():
            return cls.from_yaml(str(default_config))
        return cls(**cls._apply_env_overrides({}))

    @classmethod
    def _apply_env_overrides(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration data.

        Variables follow the pattern TYPEDEXCEPTIONS_<SECTION>_<FIELD>=value,
        e.g. TYPEDEXCEPTIONS_LOGGING_LEVEL=DEBUG or
        TYPEDEXCEPTIONS_DISPLAY_SHOW_TAGS=true. Field names may contain
        underscores, so sections are matched against the model's known names.

        Args:
            data: Configuration dictionary

        Returns:
            Updated configuration dictionary
        """
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(ENV_PREFIX):
                continue

            remainder = env_key[len(ENV_PREFIX) :].lower()
            for section in cls.model_fields:
                section_prefix = section + "_"
                if not remainder.startswith(section_prefix):
                    continue

                field = remainder[len(section_prefix) :]
                section_data = data.get(section)
                if section_data is None:
                    section_data = data[section] = {}
                if isinstance(section_data, dict):
                    section_data[field] = cls._parse_env_value(env_value)
                    logger.debug(f"Config override from {env_key}")
                break

        return data

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        """
        Parse an environment variable value to bool, int, float or str.

        Args:
            value: String value from environment

        Returns:
            Parsed value
        """
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value
