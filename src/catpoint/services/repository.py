"""
Security repository - storage boundary for arming status, alarm status and sensors.

The service only talks to SecurityRepository; how records are stored is up to
the implementation. InMemorySecurityRepository keeps everything for the
process lifetime.
"""

import logging
from abc import ABC, abstractmethod
from typing import Set

from ..domain.enums import AlarmStatus, ArmingStatus
from ..domain.models import Sensor

logger = logging.getLogger(__name__)


class SecurityRepository(ABC):
    """Capability set the security service reads and writes state through."""

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        pass

    @abstractmethod
    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        pass

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        pass

    @abstractmethod
    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        pass

    @abstractmethod
    def get_sensors(self) -> Set[Sensor]:
        """Return a snapshot of all known sensors."""
        pass

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Store the sensor, replacing any record with the same identity."""
        pass

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        pass

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        pass


class InMemorySecurityRepository(SecurityRepository):
    """Process-lifetime repository.

    Starts DISARMED with NO_ALARM and no sensors.
    """

    def __init__(
        self,
        arming_status: ArmingStatus = ArmingStatus.DISARMED,
        alarm_status: AlarmStatus = AlarmStatus.NO_ALARM,
    ):
        self._arming_status = arming_status
        self._alarm_status = alarm_status
        self._sensors: dict[tuple, Sensor] = {}

    def get_alarm_status(self) -> AlarmStatus:
        return self._alarm_status

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self._alarm_status = alarm_status

    def get_arming_status(self) -> ArmingStatus:
        return self._arming_status

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        self._arming_status = arming_status

    def get_sensors(self) -> Set[Sensor]:
        return set(self._sensors.values())

    def update_sensor(self, sensor: Sensor) -> None:
        if sensor.key not in self._sensors:
            logger.debug(f"Storing previously unknown sensor {sensor.name}")
        self._sensors[sensor.key] = sensor

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors[sensor.key] = sensor

    def remove_sensor(self, sensor: Sensor) -> None:
        self._sensors.pop(sensor.key, None)
