import click
from rich.console import Console
from rich.table import Column, Table

from cli.client import init_client
from cli.helpers.web_helper import launch_web_or_invoke
from replicate_client.deployment import current_hardware


@click.group("deployments", invoke_without_command=True)
@click.option("--web", is_flag=True, help="Launch browser")
@click.pass_context
def deployments(ctx, web):
    """Deployments serve a fixed model version on dedicated hardware

    https://replicate.com/deployments
    """
    launch_web_or_invoke(
        sub_url="deployments",
        ctx=ctx,
        launch_browser=web,
        command=list_deployments,
    )


@deployments.command("list")
@click.option(
    "-m", "--machine-readable", is_flag=True, help="Removes pretty printing"
)
def list_deployments(machine_readable):
    """List all of your Deployments"""
    console = Console()
    with console.status("Finding your Deployments!", spinner="dots4"):
        client = init_client()
        if machine_readable:
            table_params = {"box": None, "pad_edge": False}
        else:
            table_params = {
                "title": ":rocket: Deployments",
                "title_justify": "left",
            }
        table = Table(
            Column("name", overflow="fold", min_width=24),
            "release",
            "hardware",
            **table_params,
        )
        for deployment in client.deployments_generator():
            release = deployment.current_release
            table.add_row(
                deployment.full_name,
                str(release.number) if release else "",
                current_hardware(deployment) or "",
            )
    console.print(table)
