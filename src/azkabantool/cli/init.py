import typer
import rich
from pathlib import Path
from azkabantool.config import AzkabanConfig, DEFAULT_CONFIG_PATH, save_config
from loguru import logger

from .util import config_table, init_config, report_errors

def init_azkabantool(
    ctx: typer.Context,
    path: str = typer.Option(DEFAULT_CONFIG_PATH, "--path", "-p", help="Path to the config file"),
    force: bool = typer.Option(False, "--force", "-f", help="Force overwrite the config file")
):
    """
    Initialize a config file at the given path (default: ./.azkabantool/config.yaml)
    """
    if Path(path).exists() and not force:
        logger.warning(f"Config file already exists at {path}, use --force to overwrite")
        return

    if not Path(path).parent.exists():
        logger.info(f"Creating parent directory for {path}")
        Path(path).parent.mkdir(parents=True, exist_ok=True)

    with report_errors(ctx):
        config = AzkabanConfig()
        save_config(config, path)


def show_config(
    ctx: typer.Context,
    path: str = typer.Option(DEFAULT_CONFIG_PATH, "--path", "-p", help="Path to the config file"),
):
    """
    Display the effective configuration (the password is masked)
    """
    with report_errors(ctx):
        config = init_config(path)
    if not Path(path).exists():
        rich.print(f"[yellow]⚠ No config file at {path}, showing defaults. Use 'azkabantool init' to create one.[/yellow]")
    rich.print(config_table(config, path))
