import threading
import time
import uuid
from datetime import datetime, timezone

import pytest

from sensorhub.domain import (
    BroadcastHandle,
    Channel,
    Event,
    Sensor,
    SensorOwner,
    SensorType,
    Subscription,
    User,
)
from sensorhub.errors import ChannelClosedError


def test_sensor_type_from_value():
    assert SensorType(SensorType.ADC.value) is SensorType.ADC
    assert SensorType(SensorType.CONTACT_CLOSURE.value) is SensorType.CONTACT_CLOSURE


def test_sensor_defaults_are_empty():
    sensor = Sensor()
    assert sensor.id == 0
    assert sensor.registered_at is None
    assert sensor.last_activity is None
    assert sensor.is_active is False


def test_user_and_event_defaults():
    assert User().name == ""
    assert Event().timestamp is None
    assert Event().payload == 0


def test_sensor_owner_is_hashable_value():
    owners = {SensorOwner(user_id=1, sensor_id=2), SensorOwner(user_id=1, sensor_id=2)}
    assert len(owners) == 1


def test_channel_round_trip():
    ch = Channel()
    ch.send("a")
    assert ch.receive(timeout=1) == "a"


def test_channel_is_fifo():
    ch = Channel(capacity=None)
    for item in range(5):
        ch.send(item)
    assert [ch.receive(timeout=1) for _ in range(5)] == list(range(5))


def test_channel_rejects_bad_capacity():
    with pytest.raises(ValueError):
        Channel(capacity=0)


def test_receive_times_out_on_empty_channel():
    ch = Channel()
    with pytest.raises(TimeoutError):
        ch.receive(timeout=0.01)


def test_send_blocks_while_full():
    ch = Channel(capacity=1)
    ch.send(1)
    done = threading.Event()

    def writer():
        ch.send(2)
        done.set()

    thread = threading.Thread(target=writer)
    thread.start()
    time.sleep(0.05)
    assert not done.is_set()
    assert ch.receive(timeout=1) == 1
    thread.join(timeout=1)
    assert done.is_set()
    assert ch.receive(timeout=1) == 2


def test_closed_channel_drains_then_raises():
    ch = Channel(capacity=2)
    ch.send("x")
    ch.close()
    assert ch.closed
    assert ch.receive(timeout=1) == "x"
    with pytest.raises(ChannelClosedError):
        ch.receive(timeout=1)


def test_send_on_closed_channel_raises():
    ch = Channel()
    ch.close()
    with pytest.raises(ChannelClosedError):
        ch.send(1)


def test_double_close_raises():
    ch = Channel()
    ch.close()
    with pytest.raises(ChannelClosedError):
        ch.close()


def test_iteration_stops_when_closed():
    ch = Channel(capacity=None)
    for item in ("a", "b", "c"):
        ch.send(item)
    ch.close()
    assert list(ch) == ["a", "b", "c"]


def test_close_wakes_blocked_receiver():
    ch = Channel()
    outcomes = []

    def reader():
        try:
            outcomes.append(("received", ch.receive()))
        except ChannelClosedError:
            outcomes.append(("closed", None))

    thread = threading.Thread(target=reader)
    thread.start()
    time.sleep(0.02)
    ch.close()
    thread.join(timeout=1)
    assert ch.closed is True
    assert outcomes == [("closed", None)]


def test_broadcast_handle_writes_to_channel():
    ch = Channel()
    handle = BroadcastHandle(ch)
    handle.send(7)
    assert ch.receive(timeout=1) == 7
    handle.close()
    assert ch.closed


def test_subscription_write_handle_shares_channel():
    sub = Subscription(sensor_id=1)
    event = Event(timestamp=datetime.now(timezone.utc), sensor_id=228, payload=0)
    assert sub.sensor_id == 1
    sub.write_handle.send(event)
    assert sub.channel.receive(timeout=1) == event


def test_subscription_equality_uses_id_and_channel():
    sub_id = uuid.uuid4()
    ch = Channel()
    first = Subscription(sensor_id=3, channel=ch, id=sub_id)
    second = Subscription(sensor_id=3, channel=ch, id=sub_id)
    assert first.id == sub_id
    assert first.sensor_id == 3
    assert first.channel is ch
    assert (first == second) is True
    other_a = Subscription()
    other_b = Subscription()
    assert (other_a.id == other_b.id) is False