import itertools

import click
from rich.console import Console
from rich.pretty import pretty_repr
from rich.table import Column, Table

from cli.client import init_client
from cli.helpers.replicate_url import replicate_url
from cli.helpers.web_helper import launch_web_or_invoke


@click.group("models", invoke_without_command=True)
@click.option("--web", is_flag=True, help="Launch browser")
@click.pass_context
def models(ctx, web):
    """Models are the runnable machine learning programs hosted on Replicate

    https://replicate.com/explore
    """
    launch_web_or_invoke("explore", ctx, web, list_models)


@models.command("list")
@click.option(
    "-n",
    "--limit",
    default=50,
    show_default=True,
    help="Stop after this many models",
)
def list_models(limit):
    """List Models, public ones first"""
    console = Console()
    with console.status("Finding your Models!", spinner="dots4"):
        client = init_client()
        table = Table(
            Column("name", overflow="fold", min_width=24),
            "visibility",
            "runs",
            Column("url", overflow="fold"),
            title=":robot: Models",
            title_justify="left",
        )
        for m in itertools.islice(client.models_generator(), limit):
            table.add_row(
                m.full_name,
                m.visibility,
                str(m.run_count),
                replicate_url(m.full_name),
            )
    console.print(table)


@models.command("show")
@click.argument("full_name")
def show_model(full_name):
    """Show a Model given as OWNER/NAME"""
    console = Console()
    with console.status("Fetching Model"):
        client = init_client()
        model = client.get_model(full_name)
    console.print(f"[bold]{model.full_name}[/bold] ({model.visibility})")
    if model.description:
        console.print(model.description)
    console.print(f"latest version: {model.latest_version_id}")
    if model.default_example:
        console.print(pretty_repr(model.default_example.get("input")))


@models.command("versions")
@click.argument("full_name")
def list_versions(full_name):
    """List the Versions of a Model given as OWNER/NAME"""
    console = Console()
    with console.status("Finding Versions", spinner="dots4"):
        client = init_client()
        model = client.get_model(full_name)
        table = Table(
            Column("id", overflow="fold", min_width=24),
            "created at",
            "cog version",
            title=f":package: Versions of {model.full_name}",
            title_justify="left",
        )
        for version in model.versions_generator():
            table.add_row(
                version.id,
                version.created_at.isoformat(),
                version.cog_version or "",
            )
    console.print(table)
