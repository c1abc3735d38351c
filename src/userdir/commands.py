"""CLI commands for browsing the user directory."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from . import config
from .banners import main_low_level, main_top_level
from .exceptions import SeedFileError
from .models import User
from .seeds import load_seed
from .service import UserDirectory

SeedOption = Annotated[
    Path | None,
    typer.Option("--seed", "-s", help="YAML file with seed users (defaults to USERDIR_SEED_FILE)"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Print records as JSON")]


def _open_directory(seed: Path | None) -> UserDirectory:
    """Build a directory from the given seed file, the environment, or the defaults."""
    seed_path = seed or config.seed_file()
    if seed_path is None:
        return UserDirectory()

    try:
        return UserDirectory(load_seed(seed_path))
    except SeedFileError as e:
        for err in e.errors:
            typer.secho(f"Error: {err}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


def _echo_user(user: User, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(user.to_dict()))
    else:
        typer.echo(f"{user.id}\t{user.email}\t{user.name}")


def _echo_users(users: list[User], as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps([u.to_dict() for u in users], indent=2))
        return
    for user in users:
        _echo_user(user, as_json=False)


def list_users(seed: SeedOption = None, as_json: JsonOption = False) -> None:
    """List every user in the directory."""
    directory = _open_directory(seed)
    _echo_users(directory.find_all(), as_json)


def show_user(
    user_id: int = typer.Argument(..., help="Identifier of the user to show"),
    seed: SeedOption = None,
    as_json: JsonOption = False,
) -> None:
    """Show a single user."""
    directory = _open_directory(seed)
    user = directory.find_by_id(user_id)
    if user is None:
        typer.secho(f"Error: No user with id {user_id}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    _echo_user(user, as_json)


def add_user(
    email: str = typer.Argument(..., help="Email address of the new user"),
    name: str = typer.Argument(..., help="Display name of the new user"),
    seed: SeedOption = None,
    as_json: JsonOption = False,
) -> None:
    """Create a user and print the resulting directory.

    The directory lives in memory only, so the new record is gone once the
    command exits.
    """
    directory = _open_directory(seed)
    user = directory.create_user(email, name)
    if not as_json:
        typer.secho(f"Created user {user.id}", fg=typer.colors.GREEN)
    _echo_users(directory.find_all(), as_json)


def say(
    top: Annotated[
        bool,
        typer.Option("--top/--low", help="Print the top-level banner before the low-level one"),
    ] = True,
) -> None:
    """Print the console banners."""
    if top:
        main_top_level()
    else:
        main_low_level()
