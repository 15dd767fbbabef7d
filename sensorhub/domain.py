"""Domain objects: sensors, events, users, ownership and subscriptions."""

from __future__ import annotations

import enum
import threading
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Deque, Generic, Iterator, TypeVar

from sensorhub.errors import ChannelClosedError

T = TypeVar("T")


class SensorType(str, enum.Enum):
    """Kinds of sensor the hub accepts."""

    ADC = "adc"
    CONTACT_CLOSURE = "contact_closure"


@dataclass
class Sensor:
    """A registered sensor and its latest known state."""

    id: int = 0
    serial_number: str = ""
    type: SensorType | str = ""
    current_state: int = 0
    description: str = ""
    is_active: bool = False
    registered_at: datetime | None = None
    last_activity: datetime | None = None


@dataclass
class Event:
    """A reading reported by a sensor."""

    timestamp: datetime | None = None
    sensor_serial_number: str = ""
    sensor_id: int = 0
    payload: int = 0


@dataclass
class User:
    """A user who may own sensors."""

    id: int = 0
    name: str = ""


@dataclass(frozen=True)
class SensorOwner:
    """A link between a user and a sensor."""

    user_id: int = 0
    sensor_id: int = 0


class Channel(Generic[T]):
    """A thread-safe FIFO channel with an optional capacity.

    Sending blocks while the channel is full; receiving blocks while it is
    empty. Items already buffered can still be received after closing.
    """

    def __init__(self, capacity: int | None = 1) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError("channel capacity must be at least 1")
        self._capacity = capacity
        self._items: Deque[T] = deque()
        self._closed = False
        self._cond = threading.Condition()

    @property
    def capacity(self) -> int | None:
        return self._capacity

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    def _has_room(self) -> bool:
        return self._capacity is None or len(self._items) < self._capacity

    def send(self, item: T) -> None:
        """Put an item on the channel, waiting for room if it is full."""
        with self._cond:
            self._cond.wait_for(lambda: self._closed or self._has_room())
            if self._closed:
                raise ChannelClosedError("send on closed channel")
            self._items.append(item)
            self._cond.notify_all()

    def receive(self, timeout: float | None = None) -> T:
        """Take the next item, waiting up to ``timeout`` seconds.

        Raises TimeoutError if nothing arrives in time and ChannelClosedError
        once the channel is closed and drained.
        """
        with self._cond:
            self._cond.wait_for(lambda: self._items or self._closed, timeout)
            if self._items:
                item = self._items.popleft()
                self._cond.notify_all()
                return item
            if self._closed:
                raise ChannelClosedError("receive on closed channel")
            raise TimeoutError("no item received before timeout")

    def close(self) -> None:
        """Close the channel; closing twice is an error."""
        with self._cond:
            if self._closed:
                raise ChannelClosedError("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.receive()
            except ChannelClosedError:
                return


@dataclass(frozen=True)
class BroadcastHandle(Generic[T]):
    """The writing end of a channel."""

    channel: Channel[T]

    def send(self, item: T) -> None:
        self.channel.send(item)

    def close(self) -> None:
        self.channel.close()


@dataclass
class Subscription(Generic[T]):
    """A subscriber's channel of updates for one sensor."""

    sensor_id: int = 0
    channel: Channel[T] = field(default_factory=Channel)
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    write_handle: BroadcastHandle[T] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.write_handle = BroadcastHandle(self.channel)