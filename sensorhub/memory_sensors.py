"""Sensor repository kept in memory."""

from __future__ import annotations

import itertools
import threading
from dataclasses import replace
from datetime import datetime, timezone

from sensorhub.domain import Sensor
from sensorhub.errors import SensorNotFoundError


class InMemorySensorRepository:
    """Thread-safe sensor storage indexed by id and by serial number."""

    def __init__(self) -> None:
        self._by_id: dict[int, Sensor] = {}
        self._by_serial: dict[str, Sensor] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save_sensor(self, sensor: Sensor) -> None:
        """Register a new sensor; sensors already registered are left as they are."""
        if sensor is None:
            raise ValueError("got no sensor to save")
        if sensor.registered_at is not None:
            return
        sensor.registered_at = datetime.now(timezone.utc)
        with self._lock:
            sensor.id = next(self._ids)
            self._by_id[sensor.id] = sensor
            self._by_serial[sensor.serial_number] = sensor

    def get_sensors(self) -> list[Sensor]:
        """Return copies of every stored sensor."""
        with self._lock:
            return [replace(sensor) for sensor in self._by_id.values()]

    def get_sensor_by_id(self, sensor_id: int) -> Sensor:
        with self._lock:
            sensor = self._by_id.get(sensor_id)
        if sensor is None:
            raise SensorNotFoundError()
        return sensor

    def get_sensor_by_serial_number(self, serial_number: str) -> Sensor:
        with self._lock:
            sensor = self._by_serial.get(serial_number)
        if sensor is None:
            raise SensorNotFoundError()
        return sensor