"""User repository kept in memory."""

from __future__ import annotations

import itertools
import threading
from dataclasses import replace

from sensorhub.domain import User
from sensorhub.errors import UserNotFoundError


class InMemoryUserRepository:
    """Thread-safe user storage that hands out increasing ids."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save_user(self, user: User) -> None:
        """Store a copy of the user under a new id, which is set on ``user``."""
        if user is None:
            raise ValueError("got no user to save")
        with self._lock:
            user.id = next(self._ids)
            self._users[user.id] = replace(user)

    def get_user_by_id(self, user_id: int) -> User:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError()
        return replace(user)