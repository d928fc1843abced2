import click
from rich.console import Console
from rich.table import Table

from cli.client import init_client


@click.group("hardware", invoke_without_command=True)
@click.pass_context
def hardware(ctx):
    """Hardware SKUs models and deployments can run on"""
    if not ctx.invoked_subcommand:
        ctx.invoke(list_hardware)


@hardware.command("list")
def list_hardware():
    """List available Hardware"""
    console = Console()
    with console.status("Fetching Hardware", spinner="dots4"):
        client = init_client()
        table = Table("sku", "name", title=":desktop_computer: Hardware")
        for h in client.hardware:
            table.add_row(h.sku, h.name)
    console.print(table)
