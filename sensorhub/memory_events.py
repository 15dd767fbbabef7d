"""Event repository kept in memory."""

from __future__ import annotations

import threading
from datetime import datetime
from itertools import takewhile

from sortedcontainers import SortedDict

from sensorhub.domain import Event
from sensorhub.errors import EventNotFoundError


def _event_key(timestamp: datetime | None, payload: int) -> tuple[datetime, int]:
    """Order events by timestamp, then by payload."""
    return (timestamp if timestamp is not None else datetime.min, payload)


class InMemoryEventRepository:
    """Thread-safe event storage, kept ordered per sensor.

    Two events of one sensor with the same timestamp and payload count as
    the same event; the one saved first is kept.
    """

    def __init__(self) -> None:
        self._events: dict[int, SortedDict] = {}
        self._lock = threading.Lock()

    def save_event(self, event: Event) -> None:
        if event is None:
            raise ValueError("got no event to save")
        key = _event_key(event.timestamp, event.payload)
        with self._lock:
            events = self._events.setdefault(event.sensor_id, SortedDict())
            events.setdefault(key, event)

    def get_last_event_by_sensor_id(self, sensor_id: int) -> Event:
        """Return the latest event of a sensor or raise EventNotFoundError."""
        with self._lock:
            events = self._events.get(sensor_id)
            if not events:
                raise EventNotFoundError()
            return events.peekitem(-1)[1]

    def get_events_history_by_sensor_id(
        self, sensor_id: int, start_time: datetime, end_time: datetime
    ) -> list[Event]:
        """Return a sensor's events from ``start_time`` to ``end_time`` inclusive, oldest first."""
        with self._lock:
            events = self._events.get(sensor_id)
            if not events:
                return []
            keys = takewhile(
                lambda key: key[0] <= end_time,
                events.irange(minimum=_event_key(start_time, 0)),
            )
            return [events[key] for key in keys]