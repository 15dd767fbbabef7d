"""Subscription repository kept in memory."""

from __future__ import annotations

import threading
import uuid
from typing import Generic, TypeVar

from sensorhub.domain import BroadcastHandle, Channel, Subscription
from sensorhub.errors import SensorNotFoundError, SubscriptionNotFoundError

T = TypeVar("T")


class InMemorySubscriptionRepository(Generic[T]):
    """Thread-safe storage of subscribers, grouped by sensor id."""

    def __init__(self) -> None:
        self._subscribers: dict[int, dict[uuid.UUID, Subscription[T]]] = {}
        self._lock = threading.Lock()

    def subscribe(self, sensor_id: int) -> Subscription[T]:
        """Create a subscription with a channel holding one pending update."""
        subscription: Subscription[T] = Subscription(
            sensor_id=sensor_id, channel=Channel(capacity=1)
        )
        with self._lock:
            self._subscribers.setdefault(sensor_id, {})[subscription.id] = subscription
        return subscription

    def unsubscribe(self, sensor_id: int, subscription_id: uuid.UUID) -> None:
        """Remove a subscription and close its channel."""
        with self._lock:
            subscribers = self._subscribers.get(sensor_id)
            if subscribers is None:
                raise SensorNotFoundError()
            subscription = subscribers.pop(subscription_id, None)
            if subscription is None:
                raise SubscriptionNotFoundError()
            subscription.write_handle.close()

    def get_broadcast_handle_by_id(self, sensor_id: int) -> BroadcastHandle[T]:
        """Return a handle whose updates reach every subscriber of the sensor.

        Closing the handle stops the delivery.
        """
        with self._lock:
            subscribers = self._subscribers.get(sensor_id)
            if subscribers is None:
                raise SensorNotFoundError()

        incoming: Channel[T] = Channel(capacity=1)

        def deliver() -> None:
            for update in incoming:
                # Held for the whole broadcast so nobody unsubscribes midway.
                with self._lock:
                    for subscription in subscribers.values():
                        subscription.write_handle.send(update)

        threading.Thread(target=deliver, daemon=True).start()
        return BroadcastHandle(incoming)