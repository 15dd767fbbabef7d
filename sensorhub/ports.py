"""Repository interfaces the services depend on."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Generic, Protocol, TypeVar

from sensorhub.domain import BroadcastHandle, Event, Sensor, SensorOwner, Subscription, User

T = TypeVar("T")


class SensorRepository(Protocol):
    """Storage of sensors."""

    def save_sensor(self, sensor: Sensor) -> None:
        """Store a sensor, assigning it an id if it is new."""

    def get_sensors(self) -> list[Sensor]:
        """Return every stored sensor."""

    def get_sensor_by_id(self, sensor_id: int) -> Sensor:
        """Return the sensor with this id or raise SensorNotFoundError."""

    def get_sensor_by_serial_number(self, serial_number: str) -> Sensor:
        """Return the sensor with this serial number or raise SensorNotFoundError."""


class SubscriptionRepository(Protocol, Generic[T]):
    """Storage of subscriptions to sensor updates."""

    def subscribe(self, sensor_id: int) -> Subscription[T]:
        """Create a subscription to updates of a sensor."""

    def unsubscribe(self, sensor_id: int, subscription_id: uuid.UUID) -> None:
        """Remove a subscription and close its channel."""

    def get_broadcast_handle_by_id(self, sensor_id: int) -> BroadcastHandle[T]:
        """Return a handle that delivers an update to every subscriber."""


class EventRepository(Protocol):
    """Storage of sensor events."""

    def save_event(self, event: Event) -> None:
        """Store an event."""

    def get_last_event_by_sensor_id(self, sensor_id: int) -> Event:
        """Return the latest event of a sensor or raise EventNotFoundError."""

    def get_events_history_by_sensor_id(
        self, sensor_id: int, start_time: datetime, end_time: datetime
    ) -> list[Event]:
        """Return events of a sensor with timestamps in the closed range."""


class UserRepository(Protocol):
    """Storage of users."""

    def save_user(self, user: User) -> None:
        """Store a user, assigning it a new id."""

    def get_user_by_id(self, user_id: int) -> User:
        """Return the user with this id or raise UserNotFoundError."""


class SensorOwnerRepository(Protocol):
    """Storage of links between users and sensors."""

    def save_sensor_owner(self, sensor_owner: SensorOwner) -> None:
        """Store a link between a user and a sensor."""

    def get_sensors_by_user_id(self, user_id: int) -> list[SensorOwner]:
        """Return every link belonging to a user."""