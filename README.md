# sensorhub

A small library for keeping track of sensors, the events they report, the
users who own them, and live subscriptions to a sensor's events. All
storage is in memory and thread-safe.

## Contents

- `sensorhub.domain`: `SensorType` (`ADC`, `CONTACT_CLOSURE`), the
  dataclasses `Sensor`, `Event`, `User`, `SensorOwner` and `Subscription`,
  and the thread-safe `Channel` with its writing end `BroadcastHandle`.
- `sensorhub.ports`: the repository interfaces `SensorRepository`,
  `EventRepository`, `UserRepository`, `SensorOwnerRepository` and
  `SubscriptionRepository`.
- In-memory repositories:
  `sensorhub.memory_sensors.InMemorySensorRepository`,
  `sensorhub.memory_events.InMemoryEventRepository`,
  `sensorhub.memory_users.InMemoryUserRepository`,
  `sensorhub.memory_owners.InMemorySensorOwnerRepository` and
  `sensorhub.memory_subscriptions.InMemorySubscriptionRepository`.
- Services that hold the rules: `SensorService`, `EventService`,
  `UserService` and `SubscriptionService`, each in its own module
  (`sensor_service`, `event_service`, `user_service`,
  `subscription_service`).
- `sensorhub.errors`: exceptions, all derived from `SensorHubError`.
  Validation errors (`WrongSensorSerialNumberError`, `WrongSensorTypeError`,
  `InvalidEventTimestampError`, `InvalidUserNameError`) are also
  `ValueError`s; lookup errors (`SensorNotFoundError`, `UserNotFoundError`,
  `EventNotFoundError`, `SubscriptionNotFoundError`) are also
  `LookupError`s. `ChannelClosedError` is raised when a closed channel is
  used.

## Installation

```
pip install sensorhub
```

## Rules

- A sensor serial number is exactly ten digits and its type must be a
  `SensorType` member. Registering a serial number that is already known
  copies the new current state, last activity, description and active flag
  onto the stored sensor and returns it, instead of creating another one.
- `InMemorySensorRepository.save_sensor` assigns an id and a registration
  time only to sensors not yet registered (`registered_at` is `None`);
  for others it does nothing. Lookups by id or serial number return the
  stored sensor itself, while `get_sensors` returns copies.
- An event must carry a timestamp and the serial number of a registered
  sensor. `EventService.receive_event` stores it, sets the sensor's current
  state and last activity, and sends a copy to every subscriber of that
  sensor.
- Events of one sensor are kept ordered by timestamp, then payload; two
  events with the same timestamp and payload count as one, and the first
  saved is kept. `get_last_event_by_sensor_id` raises `EventNotFoundError`
  for a sensor without events. History covers an inclusive time range,
  oldest first; a sensor without events gives an empty list, and a start
  after the end raises `InvalidEventTimestampError`.
- A user needs a non-empty name and gets increasing ids from 1. Sensors can
  be attached only to existing users, and only existing sensors.
- Subscribing requires an existing sensor. Each subscription's channel holds
  one pending update; a broadcast waits until the subscriber has read the
  previous one. Unsubscribing closes the subscription's channel; an unknown
  sensor raises `SensorNotFoundError`, an unknown subscription
  `SubscriptionNotFoundError`.

## Example

```python
from datetime import datetime

from sensorhub.domain import Event, Sensor, SensorType, User
from sensorhub.event_service import EventService
from sensorhub.memory_events import InMemoryEventRepository
from sensorhub.memory_owners import InMemorySensorOwnerRepository
from sensorhub.memory_sensors import InMemorySensorRepository
from sensorhub.memory_subscriptions import InMemorySubscriptionRepository
from sensorhub.memory_users import InMemoryUserRepository
from sensorhub.sensor_service import SensorService
from sensorhub.subscription_service import SubscriptionService
from sensorhub.user_service import UserService

sensors = InMemorySensorRepository()
events = InMemoryEventRepository()
subscriptions = InMemorySubscriptionRepository()

sensor = SensorService(sensors).register_sensor(
    Sensor(serial_number="0000000001", type=SensorType.ADC, description="hall")
)

users = UserService(InMemoryUserRepository(), InMemorySensorOwnerRepository(), sensors)
user = users.register_user(User(name="Alice"))
users.attach_sensor_to_user(user.id, sensor.id)

subscription = SubscriptionService(subscriptions, sensors).subscribe(sensor.id)

service = EventService(events, sensors, subscriptions)
service.receive_event(
    Event(timestamp=datetime.now(), sensor_serial_number="0000000001", payload=42)
)

print(subscription.channel.receive(timeout=1.0).payload)  # 42
print(service.get_last_event_by_sensor_id(sensor.id).payload)  # 42
```

## What it does not do

The package is a library only. It has no command-line tool, no network
server or API, and no persistent storage: every repository keeps its data
in process memory, and it is gone when the process ends. Other storage can
be plugged in by implementing the interfaces in `sensorhub.ports`.

## Running the tests

```
pip install "sensorhub[test]"
pytest
```