"""Path and environment configuration for userdir."""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_LEVEL_ENV = "USERDIR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
SEED_FILE_ENV = "USERDIR_SEED_FILE"


def repo_root() -> Path:
    """Return the userdir repository root directory."""
    return Path(__file__).resolve().parents[2]


def env_file() -> Path:
    """Return the optional .env file loaded by the CLI."""
    return repo_root() / ".env"


def log_level() -> str:
    """Return the configured log level name.

    Unknown names fall back to WARNING.
    """
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def seed_file() -> Path | None:
    """Return the seed file configured in the environment, if any."""
    value = os.environ.get(SEED_FILE_ENV)
    return Path(value) if value else None
