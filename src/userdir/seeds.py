"""Loading and validation of YAML seed files."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .exceptions import SeedFileError
from .models import User

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "email", "name")


def validate_seed_records(records: object) -> list[str]:
    """Validate raw seed entries.

    Rules:
    - Entries must be mappings with id, email and name
    - id must be an integer
    - email and name must be strings
    - ids must be unique
    """
    errors = []

    if not isinstance(records, list):
        errors.append("Seed data must be a list of users")
        return errors

    seen: set[int] = set()
    for index, entry in enumerate(records):
        if not isinstance(entry, dict):
            errors.append(f"Entry {index} is not a mapping")
            continue

        missing = [f for f in REQUIRED_FIELDS if f not in entry]
        if missing:
            errors.append(f"Entry {index} is missing: {', '.join(missing)}")
            continue

        user_id = entry["id"]
        # bool is an int subclass
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            errors.append(f"Entry {index} has a non-integer id: {user_id!r}")
            continue

        for field in ("email", "name"):
            if not isinstance(entry[field], str):
                errors.append(f"Entry {index} has a non-string {field}: {entry[field]!r}")

        if user_id in seen:
            errors.append(f"Duplicate user id: {user_id}")
        seen.add(user_id)

    return errors


def load_seed(path: Path) -> list[User]:
    """Read seed users from a YAML file.

    The file holds either a list of users or a mapping with a ``users`` key.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise SeedFileError(path, [str(e)]) from e

    if isinstance(data, dict) and "users" in data:
        data = data["users"]

    errors = validate_seed_records(data)
    if errors:
        raise SeedFileError(path, errors)

    users = [User.from_dict(entry) for entry in data]
    logger.info("Loaded %d seed users from %s", len(users), path)
    return users
