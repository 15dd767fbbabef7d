"""Exceptions raised by the sensor hub services and repositories."""

from __future__ import annotations


class SensorHubError(Exception):
    """Base class for every error the sensor hub raises."""

    default_message = "sensor hub error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class WrongSensorSerialNumberError(SensorHubError, ValueError):
    """A sensor serial number is not exactly ten digits."""

    default_message = "wrong sensor serial number"


class WrongSensorTypeError(SensorHubError, ValueError):
    """A sensor type is not one of the supported types."""

    default_message = "wrong sensor type"


class InvalidEventTimestampError(SensorHubError, ValueError):
    """An event timestamp is missing or a time range is reversed."""

    default_message = "invalid event timestamp"


class InvalidUserNameError(SensorHubError, ValueError):
    """A user name is empty."""

    default_message = "invalid user name"


class SensorNotFoundError(SensorHubError, LookupError):
    """No sensor matches the requested id or serial number."""

    default_message = "sensor not found"


class UserNotFoundError(SensorHubError, LookupError):
    """No user matches the requested id."""

    default_message = "user not found"


class EventNotFoundError(SensorHubError, LookupError):
    """No event exists for the requested sensor."""

    default_message = "event not found"


class SubscriptionNotFoundError(SensorHubError, LookupError):
    """No subscription matches the requested id."""

    default_message = "subscription not found"


class ChannelClosedError(SensorHubError):
    """A channel was used after it had been closed."""

    default_message = "channel closed"