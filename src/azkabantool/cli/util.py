import sys
from contextlib import contextmanager
from dataclasses import asdict
from typing import Iterator, List, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from azkabantool.config import AzkabanConfig, load_config
from azkabantool.core.render import check_name
from azkabantool.errors import AzkabanToolError, InvalidName, MissingArgument, UnknownCommand

err_console = Console(stderr=True)

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


def _stderr_sink(message):
    sys.stderr.write(message)


def setup_logging(verbose: bool = False, quiet: bool = False):
    level = "DEBUG" if verbose else "WARNING" if quiet else "INFO"
    logger.remove()
    logger.add(_stderr_sink, level=level, format=LOG_FORMAT, colorize=sys.stderr.isatty())


def init_config(config_path: str) -> AzkabanConfig:
    return load_config(config_path)


def check_object(obj: Optional[str], name: Optional[str], allowed: List[str], verb: str) -> str:
    if not obj:
        raise MissingArgument(f"Missing object for '{verb}', expected one of: {', '.join(allowed)}")
    if obj not in allowed:
        raise UnknownCommand(f"Unknown command: {verb} {obj}, expected one of: {', '.join(f'{verb} {o}' for o in allowed)}")
    if name is None or not name.strip():
        raise MissingArgument(f"Missing {obj} name for '{verb} {obj}'")
    return check_name(name, obj)


@contextmanager
def report_errors(ctx: typer.Context) -> Iterator[None]:
    """Print tool and filesystem error diagnostics, then exit non-zero."""
    try:
        yield
    except (MissingArgument, InvalidName, UnknownCommand) as e:
        err_console.print(f"[red]✗ {escape(e.message)}[/red]")
        err_console.print(ctx.get_usage(), markup=False, highlight=False)
        raise typer.Exit(code=e.exit_code)
    except AzkabanToolError as e:
        err_console.print(f"[red]✗ {type(e).__name__}: {escape(e.message)}[/red]")
        if e.detail:
            err_console.print("Details:", style="bold")
            err_console.print(e.detail, markup=False, highlight=False)
        raise typer.Exit(code=e.exit_code)
    except OSError as e:
        target = e.filename if e.filename is not None else "?"
        reason = e.strerror or str(e)
        err_console.print(f"[red]✗ {type(e).__name__}: {escape(reason)}: {escape(str(target))}[/red]")
        raise typer.Exit(code=1)


def config_table(config: AzkabanConfig, config_path: str) -> Table:
    table = Table(title=f"[bold magenta]AzkabanTool Configuration[/bold magenta] ({config_path})")
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    for key, value in asdict(config).items():
        if key == "password":
            value = "********" if value else ""
        table.add_row(key, "" if value is None else str(value))
    return table
