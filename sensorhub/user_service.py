"""User registration and sensor ownership."""

from __future__ import annotations

from dataclasses import replace

from sensorhub.domain import Sensor, SensorOwner, User
from sensorhub.errors import InvalidUserNameError
from sensorhub.ports import SensorOwnerRepository, SensorRepository, UserRepository


class UserService:
    """Registers users and links them to the sensors they own."""

    def __init__(
        self,
        user_repository: UserRepository | None,
        sensor_owner_repository: SensorOwnerRepository | None,
        sensor_repository: SensorRepository | None,
    ) -> None:
        self._users = user_repository
        self._owners = sensor_owner_repository
        self._sensors = sensor_repository

    def register_user(self, user: User) -> User:
        """Store a user with a non-empty name; the repository assigns its id."""
        if user is None:
            raise ValueError("got no user to register")
        if not user.name:
            raise InvalidUserNameError()
        self._users.save_user(user)
        return user

    def attach_sensor_to_user(self, user_id: int, sensor_id: int) -> None:
        """Link an existing sensor to an existing user."""
        self._users.get_user_by_id(user_id)
        self._sensors.get_sensor_by_id(sensor_id)
        self._owners.save_sensor_owner(SensorOwner(user_id=user_id, sensor_id=sensor_id))

    def get_user_sensors(self, user_id: int) -> list[Sensor]:
        """Return copies of the sensors linked to an existing user."""
        self._users.get_user_by_id(user_id)
        links = self._owners.get_sensors_by_user_id(user_id)
        return [replace(self._sensors.get_sensor_by_id(link.sensor_id)) for link in links]