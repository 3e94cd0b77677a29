"""
Catpoint Security Service - alarm state machine

Derives the alarm status from arming status, sensor activity and camera
images:
NO_ALARM → PENDING_ALARM → ALARM

Key rules:
1. Sensor activation escalates one step (NO_ALARM → PENDING_ALARM → ALARM)
2. Once ALARM, sensor activity alone never changes the alarm status
3. PENDING_ALARM returns to NO_ALARM when the last active sensor deactivates
4. Disarm always writes NO_ALARM; arming resets every sensor to inactive
5. Cat while ARMED_HOME writes ALARM; no cat with no active sensor writes NO_ALARM
"""

import logging
import threading
from typing import Any, List, Optional, Set

from ..config import SecurityConfig
from ..domain.enums import AlarmStatus, ArmingStatus
from ..domain.models import AlarmTransition, Sensor
from .image_classifier import ImageClassifier
from .repository import SecurityRepository
from .status_listener import StatusListener

logger = logging.getLogger(__name__)


# Alarm status reached when a sensor activates. Missing entries (ALARM) mean
# activation is ignored.
SENSOR_ACTIVATED_TRANSITIONS = {
    AlarmStatus.NO_ALARM: AlarmStatus.PENDING_ALARM,
    AlarmStatus.PENDING_ALARM: AlarmStatus.ALARM,
}

# Alarm status reached when the last active sensor deactivates.
ALL_SENSORS_INACTIVE_TRANSITIONS = {
    AlarmStatus.PENDING_ALARM: AlarmStatus.NO_ALARM,
}


class SecurityService:
    """Alarm state machine.

    Holds no alarm or sensor state itself: everything is read from and
    written to the injected repository. The only local state is the result
    of the latest processed image, so arming to ARMED_HOME while the camera
    shows a cat raises the alarm without re-running classification.

    Every public operation runs under one re-entrant lock so its
    read-modify-write sequence on the repository is atomic.
    """

    def __init__(
        self,
        repository: SecurityRepository,
        image_classifier: ImageClassifier,
        config: Optional[SecurityConfig] = None,
    ):
        self.repository = repository
        self.image_classifier = image_classifier
        self.config = config or SecurityConfig()

        self._cat_detected = False
        self._listeners: List[StatusListener] = []
        self._transitions: List[AlarmTransition] = []
        self._lock = threading.RLock()

    # =========================================================================
    # State Queries
    # =========================================================================

    @property
    def alarm_status(self) -> AlarmStatus:
        return self.repository.get_alarm_status()

    @property
    def arming_status(self) -> ArmingStatus:
        return self.repository.get_arming_status()

    @property
    def cat_detected(self) -> bool:
        """Whether the latest processed image contained a cat."""
        return self._cat_detected

    def get_sensors(self) -> Set[Sensor]:
        return self.repository.get_sensors()

    def get_transition_history(self) -> List[AlarmTransition]:
        """Get list of all alarm status writes made by this service."""
        return list(self._transitions)

    # =========================================================================
    # Listeners & Sensors
    # =========================================================================

    def add_status_listener(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def add_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self.repository.add_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self.repository.remove_sensor(sensor)

    # =========================================================================
    # Operations
    # =========================================================================

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Persist a new arming status and apply its side effects.

        DISARMED always writes NO_ALARM. Either armed status resets every
        known sensor to inactive; ARMED_HOME also raises the alarm if the
        latest processed image contained a cat.
        """
        with self._lock:
            self.repository.set_arming_status(arming_status)
            logger.debug(f"Arming status set to {arming_status.value}")

            if not arming_status.is_armed:
                self.set_alarm_status(AlarmStatus.NO_ALARM, reason="disarmed")
                return

            for sensor in sorted(self.repository.get_sensors()):
                sensor.active = False
                self.repository.update_sensor(sensor)

            if arming_status == ArmingStatus.ARMED_HOME and self._cat_detected:
                self.set_alarm_status(
                    AlarmStatus.ALARM, reason="armed home while camera shows a cat"
                )

    def change_sensor_activation_status(self, sensor: Sensor, active: bool) -> None:
        """Apply a sensor activation change and persist the sensor.

        Unknown sensors are stored like any other update.
        """
        with self._lock:
            alarm_status = self.repository.get_alarm_status()
            stored = self._find_stored_sensor(sensor)
            was_active = stored.active if stored is not None else sensor.active

            sensor.active = active
            self.repository.update_sensor(sensor)
            logger.debug(f"Sensor {sensor.name} ({sensor.sensor_type.value}) active={active}")

            if alarm_status != AlarmStatus.ALARM:
                if active:
                    self._handle_sensor_activated(alarm_status, sensor)
                elif was_active:
                    self._handle_sensor_deactivated(alarm_status, sensor)

            for listener in list(self._listeners):
                listener.sensor_status_changed()

    def process_image(self, image: Any) -> None:
        """Classify a camera image and update the alarm status from the result."""
        with self._lock:
            cat_detected = self.image_classifier.image_contains_cat(
                image, self.config.confidence_threshold
            )
            self._cat_detected = cat_detected
            logger.debug(f"Image processed, cat detected={cat_detected}")

            if cat_detected:
                if self.repository.get_arming_status() == ArmingStatus.ARMED_HOME:
                    self.set_alarm_status(AlarmStatus.ALARM, reason="cat detected while armed home")
            elif not self._any_sensor_active():
                self.set_alarm_status(AlarmStatus.NO_ALARM, reason="no cat and no active sensors")

            for listener in list(self._listeners):
                listener.cat_detected(cat_detected)

    def set_alarm_status(self, alarm_status: AlarmStatus, reason: str = "manual") -> None:
        """Write the alarm status, record the transition and notify listeners."""
        with self._lock:
            from_status = self.repository.get_alarm_status()
            self.repository.set_alarm_status(alarm_status)

            transition = AlarmTransition(
                from_status=from_status,
                to_status=alarm_status,
                reason=reason,
            )
            self._transitions.append(transition)
            logger.info(f"Alarm status {from_status.value} → {alarm_status.value} ({reason})")

            for listener in list(self._listeners):
                listener.notify(alarm_status)

    # =========================================================================
    # Internal Transitions
    # =========================================================================

    def _handle_sensor_activated(self, alarm_status: AlarmStatus, sensor: Sensor) -> None:
        if self.repository.get_arming_status() == ArmingStatus.DISARMED:
            return
        next_status = SENSOR_ACTIVATED_TRANSITIONS.get(alarm_status)
        if next_status is not None:
            self.set_alarm_status(next_status, reason=f"sensor {sensor.name} activated")

    def _handle_sensor_deactivated(self, alarm_status: AlarmStatus, sensor: Sensor) -> None:
        next_status = ALL_SENSORS_INACTIVE_TRANSITIONS.get(alarm_status)
        if next_status is not None and not self._any_sensor_active():
            self.set_alarm_status(next_status, reason=f"sensor {sensor.name} deactivated, all sensors inactive")

    def _find_stored_sensor(self, sensor: Sensor) -> Optional[Sensor]:
        return next(
            (s for s in self.repository.get_sensors() if s.key == sensor.key), None
        )

    def _any_sensor_active(self) -> bool:
        return any(sensor.active for sensor in self.repository.get_sensors())
