"""Exceptions raised by userdir."""

from __future__ import annotations


class UserDirError(Exception):
    """Base class for userdir errors."""


class DuplicateUserIdError(UserDirError):
    """Raised when seed records share an identifier."""

    def __init__(self, user_id: int):
        super().__init__(f"Duplicate user id: {user_id}")
        self.user_id = user_id


class SeedFileError(UserDirError):
    """Raised when a seed file cannot be read or fails validation."""

    def __init__(self, path, errors: list[str]):
        joined = "; ".join(errors)
        super().__init__(f"Invalid seed file {path}: {joined}")
        self.path = path
        self.errors = errors
