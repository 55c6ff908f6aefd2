#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Command Line Interface for AzkabanTool (Typer-based)

This module provides the main entry point for the AzkabanTool CLI using Typer.

    azkabantool create collection <name>
    azkabantool create flow <name> [-c <collection>]
    azkabantool upload collection <name>
    azkabantool execute collection <name>
"""

import sys

import click
import typer

from azkabantool.version import __version__
from .collection import check, create, execute, upload
from .init import init_azkabantool, show_config
from .util import setup_logging

# Main Typer application
app = typer.Typer(
    name="azkabantool",
    help="AzkabanTool - Scaffold, package and run Azkaban job collections",
    add_completion=False,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"azkabantool {__version__}")
        raise typer.Exit()


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only show warnings and errors"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"),
):
    setup_logging(verbose=verbose, quiet=quiet)


app.command(name="create")(create)
app.command(name="upload")(upload)
app.command(name="execute")(execute)
app.command(name="init")(init_azkabantool)
app.command(name="config")(show_config)
app.command(name="check")(check)

def main():
    """Main entry point for the CLI."""
    # usage errors (unknown verb, bad option) exit with 1 like every other failure
    try:
        exit_code = app(standalone_mode=False)
    except click.exceptions.UsageError as e:
        e.show()
        sys.exit(1)
    except click.exceptions.Abort:
        typer.echo("Aborted!", err=True)
        sys.exit(1)
    sys.exit(exit_code if isinstance(exit_code, int) else 0)

# Add the main entry point for the script
if __name__ == "__main__":
    main()
