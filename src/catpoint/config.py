"""
Configuration for the Catpoint security service.

Settings come from an optional YAML file; anything missing falls back to the
model defaults.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "catpoint.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a configuration file cannot be parsed or validated."""


class SecurityConfig(BaseModel):
    """Security service settings."""
    # Percent confidence the classifier needs before reporting a cat
    confidence_threshold: float = Field(default=50.0, ge=0.0, le=100.0)
    log_level: str = "INFO"

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def load_config(config_path: Optional[Union[str, Path]] = None) -> SecurityConfig:
    """Load configuration from a YAML file, or defaults if the file doesn't exist."""
    config_file = Path(config_path or DEFAULT_CONFIG_PATH)

    if not config_file.exists():
        logger.info(f"Configuration file {config_file} not found, using defaults")
        return SecurityConfig()

    logger.info(f"Loading configuration from {config_file}")
    try:
        with open(config_file, 'r') as f:
            config_data = yaml.safe_load(f) or {}
        if not isinstance(config_data, dict):
            raise ConfigError(f"{config_file}: expected a mapping at top level")
        config = SecurityConfig(**config_data)
    except ValidationError as e:
        logger.error(f"Configuration validation error: {e}")
        raise ConfigError(str(e)) from e
    except yaml.YAMLError as e:
        logger.error(f"Error parsing configuration: {e}")
        raise ConfigError(str(e)) from e

    logger.info(f"Confidence threshold: {config.confidence_threshold}")
    return config


def configure_logging(level: str = "INFO") -> None:
    """Console logging for applications embedding the service.

    The level is applied to the root logger even when handlers already exist.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger().setLevel(log_level)
