"""Typer application for the ``sindri`` command line."""

from __future__ import annotations

from types import SimpleNamespace

import typer

from . import __version__
from . import log as sindri_log
from .commands import init_project as init_cmd

app = typer.Typer(
    name="sindri",
    help="Sindri project tooling.",
    add_completion=False,
    no_args_is_help=True,
)


def _validate_log_level(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in sindri_log.LEVEL_NAMES:
        raise typer.BadParameter(f"expected one of: {', '.join(sindri_log.LEVEL_NAMES)}")
    return normalized


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        callback=_validate_log_level,
        help="Log level (trace, debug, info, success, warning, error, fatal).",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colorized output."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Sindri project tooling."""
    if log_level is not None:
        sindri_log.set_level(log_level)
    if no_color:
        sindri_log.set_no_color(True)


@app.command("init")
def init_command(
    directory: str = typer.Argument(
        ".",
        help="The directory where the new project should be initialized.",
    ),
) -> None:
    """Initialize a new Sindri project."""
    init_cmd(SimpleNamespace(directory=directory))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
