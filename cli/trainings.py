import click
from rich.live import Live
from rich.spinner import Spinner
from rich.table import Column, Table

from cli.client import init_client
from cli.helpers.web_helper import launch_web_or_invoke


@click.group("trainings", invoke_without_command=True)
@click.option("--web", is_flag=True, help="Launch browser")
@click.pass_context
def trainings(ctx, web):
    """Trainings fine-tune a model version into a new one

    https://replicate.com/trainings
    """
    launch_web_or_invoke("trainings", ctx, web, list_trainings)


@trainings.command("list")
def list_trainings():
    """List all of your Trainings"""
    client = init_client()
    table = Table(
        Column("id", overflow="fold", min_width=24),
        "status",
        "model",
        "created at",
        title=":weight_lifter: Trainings",
        title_justify="left",
    )
    with Live(Spinner("dots4", text="Finding your Trainings!")) as live:
        for training in client.trainings_generator():
            table.add_row(
                training.id,
                training.status,
                training.model or "",
                training.created_at.isoformat()
                if training.created_at
                else "",
            )
            live.update(table)
