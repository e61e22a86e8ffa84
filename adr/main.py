from __future__ import annotations

import contextlib
import sys
from pathlib import Path
from typing import Iterator

import typer

from adr import __build_date__, __built_by__, __commit__, __version__
from adr.config import DEFAULT_CONFIG_PATH, Settings, default_settings, load_settings
from adr.errors import AdrError
from adr.lifecycle import init_project, list_records, new_record, rebuild_toc, require_config
from adr.prompts import ask_status, ask_title
from adr.reporter import print_records
from adr.utils.logging import configure_logging

app = typer.Typer(
    help="Create architecture decision records from templates.",
    no_args_is_help=True,
)


@contextlib.contextmanager
def _fatal_errors() -> Iterator[None]:
    """Report any AdrError and exit with status 1."""
    try:
        yield
    except AdrError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _config_path(ctx: typer.Context) -> Path:
    return ctx.obj if isinstance(ctx.obj, Path) else Path(DEFAULT_CONFIG_PATH)


def _settings(ctx: typer.Context) -> Settings:
    settings = load_settings(_config_path(ctx), notify=typer.echo)
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    return settings


@app.callback()
def cli(
    ctx: typer.Context,
    config: Path = typer.Option(
        Path(DEFAULT_CONFIG_PATH),
        "--config",
        "-c",
        help="Custom config file.",
    ),
) -> None:
    ctx.obj = config


@app.command()
def version() -> None:
    """
    Version information for adr.
    """
    typer.echo(
        f"Version: {__version__}\n"
        f"Commit: {__commit__}\n"
        f"Built At: {__build_date__}\n"
        f"Built By: {__built_by__}"
    )


@app.command("init")
def init(ctx: typer.Context) -> None:
    """
    Write the default config, create the record directory and record 1.
    """
    with _fatal_errors():
        env_settings = default_settings()
        configure_logging(level=env_settings.log_level, json_logs=env_settings.log_json)
        path = init_project(_config_path(ctx), notify=typer.echo)
    typer.echo(f"Created {path}")


@app.command("new")
def new(ctx: typer.Context) -> None:
    """
    Create a new ADR.
    """
    config_path = _config_path(ctx)
    with _fatal_errors():
        require_config(config_path)
        settings = _settings(ctx)

    name = ask_title()
    status = ask_status()

    with _fatal_errors():
        path = new_record(settings, name=name, status=status)
    typer.echo(f"Created {path}")


@app.command("toc")
def toc(ctx: typer.Context) -> None:
    """
    Regenerate README.md from all records.
    """
    with _fatal_errors():
        path = rebuild_toc(_settings(ctx))
    typer.echo(f"Wrote {path}")


@app.command("list")
def list_(ctx: typer.Context) -> None:
    """
    Show all records as a table.
    """
    with _fatal_errors():
        records = list_records(_settings(ctx))
    print_records(records)


# Short aliases
app.command("v", hidden=True)(version)
app.command("i", hidden=True)(init)
app.command("n", hidden=True)(new)
app.command("ls", hidden=True)(list_)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
