"""Shared fixtures for the Catpoint test suite."""

from unittest.mock import Mock

import pytest

from catpoint.domain.enums import AlarmStatus, ArmingStatus, SensorType
from catpoint.domain.models import Sensor
from catpoint.services.image_classifier import ImageClassifier
from catpoint.services.repository import InMemorySecurityRepository, SecurityRepository
from catpoint.services.security_service import SecurityService


@pytest.fixture
def mock_repository():
    """Mock repository, armed home with no alarm and no sensors."""
    repository = Mock(spec=SecurityRepository)
    repository.get_alarm_status.return_value = AlarmStatus.NO_ALARM
    repository.get_arming_status.return_value = ArmingStatus.ARMED_HOME
    repository.get_sensors.return_value = set()
    return repository


@pytest.fixture
def mock_classifier():
    classifier = Mock(spec=ImageClassifier)
    classifier.image_contains_cat.return_value = False
    return classifier


@pytest.fixture
def service(mock_repository, mock_classifier):
    return SecurityService(mock_repository, mock_classifier)


@pytest.fixture
def door_sensor():
    return Sensor(name="door", sensor_type=SensorType.DOOR)


@pytest.fixture
def repository():
    """Real in-memory repository, armed home with three inactive sensors."""
    repo = InMemorySecurityRepository(arming_status=ArmingStatus.ARMED_HOME)
    repo.add_sensor(Sensor(name="door", sensor_type=SensorType.DOOR))
    repo.add_sensor(Sensor(name="window", sensor_type=SensorType.WINDOW))
    repo.add_sensor(Sensor(name="motion", sensor_type=SensorType.MOTION))
    return repo


@pytest.fixture
def alarm_writes(mock_repository):
    """Count set_alarm_status(status) calls on the mock repository."""
    def count(status):
        return sum(
            1 for call in mock_repository.set_alarm_status.call_args_list
            if call.args == (status,)
        )
    return count
