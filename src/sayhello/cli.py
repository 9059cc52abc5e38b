"""Typer-based CLI for sayhello.

stdout is reserved for the unified diff. All logging goes to files
(~/.sayhello/logs/sayhello.log). Version info prints to stderr.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import typer

from sayhello import __version__
from sayhello.recipe import SayHelloRecipe
from sayhello.runner import run_recipe

app = typer.Typer(
    name="sayhello",
    help="Add a hello() method to a Python class, idempotently",
    add_completion=False,
)

LOG_FILE_NAME = "sayhello.log"
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 3


def resolve_target(target_flag: str | None) -> str | None:
    """Resolve the target class from CLI flag or env var.

    Priority: CLI flag > SAYHELLO_TARGET env var > None.
    """
    if target_flag:
        return target_flag
    return os.getenv("SAYHELLO_TARGET")


def resolve_log_level(log_level_flag: str | None) -> str:
    """Resolve log level from CLI flag, env var, or default.

    Priority: CLI flag > SAYHELLO_LOG_LEVEL env var > "info" default.
    """
    if log_level_flag:
        return log_level_flag
    return os.getenv("SAYHELLO_LOG_LEVEL", "info")


def setup_logging(log_dir: Path, log_level: str) -> None:
    """Route recipe logging to a rotating file under log_dir.

    Repeated calls replace the root handlers rather than stacking them.
    Only CRITICAL records are echoed to stderr, since stdout is the diff.

    Args:
        log_dir: Directory for log files (created if missing)
        log_level: Logging level (info, debug, warning, error, critical)
    """
    log_dir = log_dir.expanduser()
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())
    root_logger.handlers.clear()

    file_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUPS,
    )
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s.%(funcName)s: %(message)s",
        ),
    )

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.CRITICAL)
    stderr_handler.setFormatter(logging.Formatter("sayhello: %(message)s"))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(stderr_handler)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Print version and exit",
    ),
) -> None:
    """Add a hello() method to a Python class, idempotently."""
    if version:
        typer.echo(f"sayhello {__version__}", err=True)
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command()
def run(
    file: Path = typer.Argument(
        ...,
        help="Python file to transform",
    ),
    target: str | None = typer.Option(
        None,
        "--target",
        help="Fully-qualified class name (overrides SAYHELLO_TARGET env var)",
    ),
    module_name: str | None = typer.Option(
        None,
        "--module-name",
        help="Dotted module name of FILE (default: derived from --root)",
    ),
    root: Path | None = typer.Option(
        None,
        "--root",
        help="Source root used to derive the module name",
    ),
    write: bool = typer.Option(
        False,
        "--write",
        help="Write the change back to FILE instead of only printing a diff",
    ),
    log_dir: Path = typer.Option(
        Path("~/.sayhello/logs"),
        "--log-dir",
        help="Directory for log files",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (debug, info, warning, error, critical)",
    ),
) -> None:
    """Run the Say Hello recipe on FILE and print the unified diff."""
    setup_logging(log_dir, resolve_log_level(log_level))

    resolved_target = resolve_target(target)
    if not resolved_target:
        typer.secho(
            "No target class: pass --target or set SAYHELLO_TARGET",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(2)

    result = run_recipe(
        str(file),
        resolved_target,
        module_name=module_name,
        root=str(root) if root is not None else None,
        write=write,
    )
    if not result.success:
        typer.secho(f"Error: {result.parse_error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if result.changed:
        typer.echo(result.diff, nl=False)
        if result.written:
            typer.secho(f"Updated {file}", fg=typer.colors.GREEN, err=True)
    else:
        typer.echo(
            f"No changes: {resolved_target} not found or already has hello()",
            err=True,
        )


@app.command()
def describe() -> None:
    """Show the recipe's name, description and options."""
    typer.echo(SayHelloRecipe.display_name)
    typer.echo(f"  {SayHelloRecipe.description}")
    for option in SayHelloRecipe.options():
        typer.echo(f"  {option.name}: {option.display_name}")
        typer.echo(f"      {option.description}")
        typer.echo(f"      Example: {option.example}")
