"""In-memory user directory."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from .exceptions import DuplicateUserIdError
from .models import User

logger = logging.getLogger(__name__)


def default_seed() -> list[User]:
    """Return fresh copies of the two records every directory starts with."""
    return [
        User(1, "john.doe@example.com", "John Doe"),
        User(2, "jane.smith@example.com", "Jane Smith"),
    ]


class UserDirectory:
    """Registry of users owned by a single process.

    The directory is seeded at construction time and only grows afterwards:
    records are never mutated or removed. New identifiers come from a counter
    that starts above the highest seed id, so they never collide with an
    existing record.
    """

    def __init__(self, seed: Iterable[User] | None = None):
        # Guards _users and _next_id
        self._lock = threading.Lock()
        self._users: list[User] = []
        self._by_id: dict[int, User] = {}

        for user in default_seed() if seed is None else seed:
            if user.id in self._by_id:
                raise DuplicateUserIdError(user.id)
            self._users.append(user)
            self._by_id[user.id] = user

        self._next_id = max(self._by_id, default=0) + 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        if not isinstance(user_id, int):
            return False
        with self._lock:
            return user_id in self._by_id

    def find_by_id(self, user_id: int) -> User | None:
        """Return the stored `User` or None if the id is unknown."""
        with self._lock:
            return self._by_id.get(user_id)

    def find_all(self) -> list[User]:
        """Return every record in insertion order.

        The returned list is a snapshot; mutating it does not touch the
        directory.
        """
        with self._lock:
            return list(self._users)

    def create_user(self, email: str, name: str) -> User:
        """Create, store and return a new user with a fresh identifier."""
        with self._lock:
            user = User(self._next_id, email, name)
            self._next_id += 1
            self._users.append(user)
            self._by_id[user.id] = user
        logger.debug("Created user %d <%s>", user.id, user.email)
        return user

    def get_profile(self, user_id: int) -> dict | None:
        """Return a simple dict representation of the user or None."""
        user = self.find_by_id(user_id)
        if user is None:
            return None
        return user.to_dict()
