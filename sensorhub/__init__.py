"""Sensor registry, event history and live event subscriptions, stored in memory."""

__version__ = "0.1.0"