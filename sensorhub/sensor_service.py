"""Sensor registration and lookup."""

from __future__ import annotations

import re

from sensorhub.domain import Sensor, SensorType
from sensorhub.errors import (
    SensorNotFoundError,
    WrongSensorSerialNumberError,
    WrongSensorTypeError,
)
from sensorhub.ports import SensorRepository

_SERIAL_NUMBER = re.compile(r"[0-9]{10}")
_SUPPORTED_TYPES = frozenset({SensorType.ADC, SensorType.CONTACT_CLOSURE})


class SensorService:
    """Registers sensors and reads them back from a repository."""

    def __init__(self, sensor_repository: SensorRepository | None) -> None:
        self._sensors = sensor_repository

    @staticmethod
    def _valid_serial_number(serial_number: str) -> bool:
        return _SERIAL_NUMBER.fullmatch(serial_number) is not None

    @staticmethod
    def _valid_type(sensor_type: SensorType | str) -> bool:
        return sensor_type in _SUPPORTED_TYPES

    def register_sensor(self, sensor: Sensor) -> Sensor:
        """Register a sensor, or refresh the one already known by its serial number.

        For a known serial number the stored sensor takes over the new state,
        activity, description and activity flag and is returned as it is.
        """
        if sensor is None:
            raise ValueError("got no sensor to register")
        if not self._valid_serial_number(sensor.serial_number):
            raise WrongSensorSerialNumberError()
        if not self._valid_type(sensor.type):
            raise WrongSensorTypeError()

        try:
            existing = self._sensors.get_sensor_by_serial_number(sensor.serial_number)
        except SensorNotFoundError:
            self._sensors.save_sensor(sensor)
            return sensor

        existing.last_activity = sensor.last_activity
        existing.current_state = sensor.current_state
        existing.description = sensor.description
        existing.is_active = sensor.is_active
        return existing

    def get_sensors(self) -> list[Sensor]:
        """Return every registered sensor."""
        return self._sensors.get_sensors()

    def get_sensor_by_id(self, sensor_id: int) -> Sensor:
        """Return the sensor with this id or raise SensorNotFoundError."""
        return self._sensors.get_sensor_by_id(sensor_id)