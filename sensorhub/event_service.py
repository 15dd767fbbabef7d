"""Receiving sensor events and querying their history."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from sensorhub.domain import Event
from sensorhub.errors import InvalidEventTimestampError, SensorNotFoundError
from sensorhub.ports import EventRepository, SensorRepository, SubscriptionRepository


class EventService:
    """Stores incoming events, updates sensor state and notifies subscribers."""

    def __init__(
        self,
        event_repository: EventRepository | None,
        sensor_repository: SensorRepository | None,
        subscription_repository: SubscriptionRepository[Event] | None,
    ) -> None:
        self._events = event_repository
        self._sensors = sensor_repository
        self._subscriptions = subscription_repository

    def _broadcast(self, sensor_id: int, event: Event) -> None:
        try:
            handle = self._subscriptions.get_broadcast_handle_by_id(sensor_id)
        except SensorNotFoundError:
            return
        handle.send(replace(event))
        handle.close()

    def receive_event(self, event: Event) -> None:
        """Store an event, record it as the sensor's state and broadcast it."""
        if event is None:
            raise ValueError("got no event to receive")
        if event.timestamp is None:
            raise InvalidEventTimestampError()

        sensor = self._sensors.get_sensor_by_serial_number(event.sensor_serial_number)
        event.sensor_id = sensor.id
        self._events.save_event(event)

        sensor.current_state = event.payload
        sensor.last_activity = event.timestamp
        self._sensors.save_sensor(sensor)

        self._broadcast(sensor.id, event)

    def get_last_event_by_sensor_id(self, sensor_id: int) -> Event:
        """Return the latest event of a sensor."""
        return self._events.get_last_event_by_sensor_id(sensor_id)

    def get_events_history_by_sensor_id(
        self, sensor_id: int, start_time: datetime, end_time: datetime
    ) -> list[Event]:
        """Return a sensor's events between two times, both included."""
        if start_time > end_time:
            raise InvalidEventTimestampError()
        return self._events.get_events_history_by_sensor_id(sensor_id, start_time, end_time)