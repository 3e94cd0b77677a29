"""Catpoint Domain Models"""

from .enums import (
    SensorType,
    ArmingStatus,
    AlarmStatus,
)

from .models import (
    Sensor,
    AlarmTransition,
)

__all__ = [
    # Enums
    'SensorType',
    'ArmingStatus',
    'AlarmStatus',

    # Models
    'Sensor',
    'AlarmTransition',
]
