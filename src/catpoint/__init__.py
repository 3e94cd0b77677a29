"""Catpoint home security alarm controller."""

from .config import SecurityConfig, ConfigError, load_config, configure_logging
from .domain import SensorType, ArmingStatus, AlarmStatus, Sensor, AlarmTransition
from .services import (
    SecurityRepository,
    InMemorySecurityRepository,
    ImageClassifier,
    FixedImageClassifier,
    StatusListener,
    SecurityService,
)

__version__ = "1.0.0"

__all__ = [
    'SecurityConfig',
    'ConfigError',
    'load_config',
    'configure_logging',
    'SensorType',
    'ArmingStatus',
    'AlarmStatus',
    'Sensor',
    'AlarmTransition',
    'SecurityRepository',
    'InMemorySecurityRepository',
    'ImageClassifier',
    'FixedImageClassifier',
    'StatusListener',
    'SecurityService',
]
