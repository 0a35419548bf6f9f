from typing import Annotated, NoReturn

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from sumo.config.store import DEFAULT_CONFIG_PATH, ConfigStore
from sumo.errors import SumoError
from sumo.providers import InstanceClient

from .util import setup_logging

app = typer.Typer(pretty_exceptions_enable=False)

err_console = Console(stderr=True)


def _fail(error: SumoError) -> NoReturn:
    err_console.print(f"Error: {error}", style="red", markup=False, soft_wrap=True)
    raise typer.Exit(code=1)


@app.command()
def launch(ctx: typer.Context):
    """Launch a new instance from the configured AMI"""
    client: InstanceClient = ctx.obj
    try:
        instance_id = client.launch()
    except SumoError as e:
        _fail(e)
    print(instance_id)


@app.command("list")
def list_instances(ctx: typer.Context):
    """List instances with their status and hostname"""
    client: InstanceClient = ctx.obj
    try:
        instances = client.list()
    except SumoError as e:
        _fail(e)

    if not instances:
        print("No instances")
        return

    table = Table("Instance ID", "Status", "Hostname")
    for instance in instances:
        table.add_row(instance.instance_id, instance.status, instance.hostname or "")
    print(table)


@app.command()
def terminate(
    ctx: typer.Context,
    instance_id: Annotated[str, typer.Argument(help="id of the instance to terminate")],
):
    """Terminate an instance"""
    client: InstanceClient = ctx.obj
    try:
        client.terminate(instance_id)
    except SumoError as e:
        _fail(e)
    print(instance_id)


@app.callback()
def entry(
    ctx: typer.Context,
    config_path: str = typer.Option(
        DEFAULT_CONFIG_PATH,
        envvar="SUMO_CONFIG",
        help="Path of the sumo config",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    setup_logging(verbose)

    if ctx.obj is None:
        ctx.obj = InstanceClient(ConfigStore(config_path))


if __name__ == "__main__":
    app()
