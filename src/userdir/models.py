"""Data models for the user directory."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class User:
    """A single directory record.

    Attributes:
        id: Numeric user identifier, unique within its directory.
        email: Contact email address.
        name: Human-readable display name.
    """

    id: int
    email: str
    name: str

    @classmethod
    def from_dict(cls, data: dict) -> User:
        """Create a User from a dictionary."""
        return cls(
            id=int(data["id"]),
            email=data["email"],
            name=data["name"],
        )

    def to_dict(self) -> dict:
        """Convert User to a dictionary."""
        return asdict(self)
