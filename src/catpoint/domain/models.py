"""
Catpoint Core Models

Sensor records and alarm transition records.
Sensor uses Pydantic for validation; identity is (name, sensor_type).
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from .enums import AlarmStatus, SensorType


# =============================================================================
# Sensor
# =============================================================================

class Sensor(BaseModel):
    """Door/window/motion device reporting a boolean active state.

    Two sensors with the same name and type are the same sensor, so a
    repository keyed on sensors replaces records instead of duplicating them.
    Name and type are frozen; only ``active`` changes after creation.
    """
    name: str = Field(min_length=1, frozen=True)
    sensor_type: SensorType = Field(frozen=True)
    active: bool = False
    sensor_id: str = Field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def key(self) -> tuple[str, SensorType]:
        return (self.name, self.sensor_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __lt__(self, other: "Sensor") -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return (self.name, self.sensor_type.value, self.sensor_id) < (
            other.name, other.sensor_type.value, other.sensor_id
        )


# =============================================================================
# Alarm transitions
# =============================================================================

@dataclass
class AlarmTransition:
    """One alarm-status write."""
    from_status: AlarmStatus
    to_status: AlarmStatus
    reason: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def changed(self) -> bool:
        return self.from_status != self.to_status
