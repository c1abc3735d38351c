"""userdir CLI - in-memory user directory."""

import logging
from typing import Sequence

import click
import typer
from dotenv import load_dotenv

from . import __version__, config
from .commands import add_user, list_users, say, show_user

# Load environment variables from .env file if it exists
if config.env_file().exists():
    load_dotenv(config.env_file())

app = typer.Typer(help="userdir - in-memory user directory", no_args_is_help=True)
app.command("list")(list_users)
app.command("show", no_args_is_help=True)(show_user)
app.command("add", no_args_is_help=True)(add_user)
app.command("say")(say)


def version_callback(v: bool) -> None:
    if v:
        typer.echo(f"v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "-v", "--version", is_eager=True, callback=version_callback
    )
) -> None:
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int | None:
    try:
        return app(
            args=list(argv) if argv is not None else None,
            standalone_mode=False,
        )
    except click.ClickException as e:
        e.show()
        return e.exit_code
