import typer
import rich
from rich.table import Table
from rich.text import Text

from azkabantool.config import DEFAULT_CONFIG_PATH
from azkabantool.core import Executor, SessionAuthenticator, TemplateRenderer, Uploader
from azkabantool.errors import AzkabanToolError
from .util import check_object, init_config, report_errors

OBJECT_ARGUMENT = typer.Argument(None, metavar="OBJECT", help="collection or flow", show_default=False)
NAME_ARGUMENT = typer.Argument(None, metavar="NAME", help="Name of the collection or flow", show_default=False)


def create(
    ctx: typer.Context,
    obj: str = OBJECT_ARGUMENT,
    name: str = NAME_ARGUMENT,
    collection: str = typer.Option(".", "--collection", "-c", help="Collection directory a new flow is created in"),
    config_path: str = typer.Option(DEFAULT_CONFIG_PATH, "--path", "-p", help="Path to the config file"),
):
    """
    Create a collection in the current directory, or a flow inside a collection
    """
    with report_errors(ctx):
        name = check_object(obj, name, ["collection", "flow"], "create")
        renderer = TemplateRenderer(init_config(config_path))
        if obj == "collection":
            path = renderer.render_collection(name)
            rich.print(f"[green]✓ Created collection {name}[/green] at {path}")
        else:
            path = renderer.render_flow(name, collection)
            rich.print(f"[green]✓ Created flow {name}[/green] at {path}")


def upload(
    ctx: typer.Context,
    obj: str = OBJECT_ARGUMENT,
    name: str = NAME_ARGUMENT,
    config_path: str = typer.Option(DEFAULT_CONFIG_PATH, "--path", "-p", help="Path to the config file"),
):
    """
    Zip a collection and upload it as a project of the same name
    """
    with report_errors(ctx):
        name = check_object(obj, name, ["collection"], "upload")
        Uploader(init_config(config_path)).upload(name)
        rich.print(f"[green]✓ Uploaded collection {name}[/green]")


def execute(
    ctx: typer.Context,
    obj: str = OBJECT_ARGUMENT,
    name: str = NAME_ARGUMENT,
    config_path: str = typer.Option(DEFAULT_CONFIG_PATH, "--path", "-p", help="Path to the config file"),
):
    """
    Upload a collection, then execute its final job flow
    """
    with report_errors(ctx):
        name = check_object(obj, name, ["collection"], "execute")
        result = Executor(init_config(config_path)).execute(name)
        rich.print(f"[green]✓ Executing collection {name}[/green] (exec id {result.get('execid', '?')})")


def check(
    ctx: typer.Context,
    config_path: str = typer.Option(DEFAULT_CONFIG_PATH, "--path", "-p", help="Path to the config file"),
):
    """
    Log in once to check the server address and credentials
    """
    with report_errors(ctx):
        config = init_config(config_path)

    table = Table(title="[bold magenta]Server Check Results[/bold magenta]")
    table.add_column("Server", justify="left", style="cyan", no_wrap=True)
    table.add_column("User", justify="left", style="green")
    table.add_column("Status", justify="center")

    error = None
    try:
        SessionAuthenticator(config).authenticate()
    except AzkabanToolError as e:
        error = e
    status_text = Text("✅ SUCCESS", style="green") if error is None else Text("❌ FAILED", style="red")
    table.add_row(config.server_address, config.username, status_text)
    rich.print(table)

    if error is not None:
        with report_errors(ctx):
            raise error
