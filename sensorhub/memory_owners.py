"""Sensor ownership repository kept in memory."""

from __future__ import annotations

import threading

from sensorhub.domain import SensorOwner


class InMemorySensorOwnerRepository:
    """Thread-safe set of user-to-sensor links."""

    def __init__(self) -> None:
        self._links: dict[SensorOwner, None] = {}
        self._lock = threading.Lock()

    def save_sensor_owner(self, sensor_owner: SensorOwner) -> None:
        with self._lock:
            self._links[sensor_owner] = None

    def get_sensors_by_user_id(self, user_id: int) -> list[SensorOwner]:
        with self._lock:
            return [link for link in self._links if link.user_id == user_id]