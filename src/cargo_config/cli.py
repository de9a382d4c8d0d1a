# src/cargo_config/cli.py
from __future__ import annotations

import logging
from typing import NoReturn, Optional

import orjson
import typer
from rich.console import Console
from rich.markup import escape

from cargo_config import __version__
from cargo_config.logging_setup import setup_logging
from cargo_config.profile_store import ProfileStore

app = typer.Typer(help="Switch cargo configurations with ease.", no_args_is_help=True)
console = Console(highlight=False, soft_wrap=True, emoji=False)
log = logging.getLogger(__name__)

CHECK = "[green]✓[/green]"
WARN = "[yellow]⚠[/yellow]"


def success(message: str) -> None:
    console.print(f"Success:  {CHECK}  {escape(message)}")


def fail(e: Exception) -> NoReturn:
    log.debug("command failed", exc_info=e)
    typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _store(ctx: typer.Context) -> ProfileStore:
    return ctx.obj


def _warn_migration() -> None:
    console.print(
        f"Warning:  {WARN}  config.toml exists in Cargo directory, "
        "moving to cargo-config/config.toml"
    )


def _version(value: bool) -> None:
    if value:
        typer.echo(f"cargo-config {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version, is_eager=True, help="Show the version and exit"
    ),
):
    try:
        setup_logging(verbose)
        store = ProfileStore()
        store.initialise(on_migrate=_warn_migration)
    except (OSError, RuntimeError) as e:
        fail(e)
    ctx.obj = store


@app.command("create")
def create_cmd(ctx: typer.Context, value: str = typer.Argument(..., help="Profile name")):
    """Create a new cargo config"""
    try:
        _store(ctx).create(value)
    except (OSError, ValueError) as e:
        fail(e)
    success(f"Created {value}.toml")


@app.command("switch")
def switch_cmd(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Profile name"),
    copy: bool = typer.Option(False, "--copy", help="Copy the profile instead of hard-linking it"),
):
    """Switch between cargo configs"""
    try:
        _store(ctx).switch(value, copy=copy)
    except (OSError, ValueError) as e:
        fail(e)
    success(f"Switched to {value}")


@app.command("list")
def list_cmd(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print entries as JSON"),
):
    """List configs"""
    try:
        entries = _store(ctx).list()
    except OSError as e:
        fail(e)

    if as_json:
        typer.echo(orjson.dumps([e.to_dict() for e in entries], option=orjson.OPT_INDENT_2).decode())
        return

    console.print("List of entries:")
    for e in entries:
        mark = " [green](current)[/green]" if e.active else ""
        console.print(f"- {escape(e.name)}{mark}")


@app.command("remove")
def remove_cmd(ctx: typer.Context, value: str = typer.Argument(..., help="Profile name")):
    """Remove a config"""
    try:
        _store(ctx).remove(value)
    except (OSError, ValueError) as e:
        fail(e)
    success(f"Removed {value}")


@app.command("edit")
def edit_cmd(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Profile name"),
    editor: str = typer.Option(..., "--editor", "-e", help="Editor command"),
):
    """Launch an editor to edit a config"""
    try:
        _store(ctx).edit(editor, value)
    except (OSError, ValueError) as e:
        fail(e)
    success(f"Opened {editor} at {value}")


def main():
    app()


if __name__ == "__main__":
    main()
