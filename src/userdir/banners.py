"""Console banners printed by the ``say`` command."""

from __future__ import annotations

LOW_LEVEL_BANNER = "Low-level-1"
TOP_LEVEL_BANNER = "Top-level-1"


def say_low_level() -> None:
    print(LOW_LEVEL_BANNER)


def say_top_level() -> None:
    print(TOP_LEVEL_BANNER)


def main_low_level() -> None:
    say_low_level()


def main_top_level() -> None:
    """Print the top-level banner, then delegate to the low-level one."""
    say_top_level()
    say_low_level()
