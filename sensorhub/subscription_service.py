"""Subscribing to sensor updates."""

from __future__ import annotations

import uuid
from typing import Generic, TypeVar

from sensorhub.domain import Subscription
from sensorhub.ports import SensorRepository, SubscriptionRepository

T = TypeVar("T")


class SubscriptionService(Generic[T]):
    """Creates and removes subscriptions to sensors that exist."""

    def __init__(
        self,
        subscription_repository: SubscriptionRepository[T] | None,
        sensor_repository: SensorRepository | None,
    ) -> None:
        self._subscriptions = subscription_repository
        self._sensors = sensor_repository

    def subscribe(self, sensor_id: int) -> Subscription[T]:
        """Subscribe to a sensor; raises SensorNotFoundError if it is unknown."""
        self._sensors.get_sensor_by_id(sensor_id)
        return self._subscriptions.subscribe(sensor_id)

    def unsubscribe(self, sensor_id: int, subscription_id: uuid.UUID) -> None:
        """Remove a subscription."""
        self._subscriptions.unsubscribe(sensor_id, subscription_id)