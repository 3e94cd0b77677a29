"""
Catpoint Core Enums

Arming status, alarm status and sensor type. Values are the lowercase names
so they serialize cleanly through pydantic models and YAML config.
"""

from enum import Enum


# =============================================================================
# Sensors
# =============================================================================

class SensorType(str, Enum):
    """Physical sensor kind."""
    DOOR = "door"
    WINDOW = "window"
    MOTION = "motion"


# =============================================================================
# Arming & Alarm
# =============================================================================

class ArmingStatus(str, Enum):
    """Whether the system is disarmed or armed (home/away profile)."""
    DISARMED = "disarmed"
    ARMED_HOME = "armed_home"
    ARMED_AWAY = "armed_away"

    @property
    def description(self) -> str:
        return _ARMING_DESCRIPTIONS[self]

    @property
    def is_armed(self) -> bool:
        return self in (ArmingStatus.ARMED_HOME, ArmingStatus.ARMED_AWAY)


class AlarmStatus(str, Enum):
    """Current alert level (none / pending / triggered)."""
    NO_ALARM = "no_alarm"
    PENDING_ALARM = "pending_alarm"
    ALARM = "alarm"

    @property
    def description(self) -> str:
        return _ALARM_DESCRIPTIONS[self]


_ARMING_DESCRIPTIONS = {
    ArmingStatus.DISARMED: "Disarmed",
    ArmingStatus.ARMED_HOME: "Armed - At Home",
    ArmingStatus.ARMED_AWAY: "Armed - Away",
}

_ALARM_DESCRIPTIONS = {
    AlarmStatus.NO_ALARM: "Cool and Good",
    AlarmStatus.PENDING_ALARM: "I'm in Danger...",
    AlarmStatus.ALARM: "Awooga!",
}
