import click
from rich.console import Console
from rich.pretty import pretty_repr

from cli.client import init_client


@click.group("predictions")
def predictions():
    """Predictions are single runs of a model version"""


@predictions.command("show")
@click.argument("prediction_id")
def show_prediction(prediction_id):
    """Show status and output of a Prediction"""
    console = Console()
    with console.status("Fetching Prediction"):
        client = init_client()
        prediction = client.get_prediction(prediction_id)
    console.print(f"[bold]{prediction.id}[/bold]: {prediction.status}")
    if prediction.model_name:
        console.print(f"model: {prediction.model_name}")
    if prediction.output is not None:
        console.print(pretty_repr(prediction.output))
    if prediction.error:
        click.echo(click.style(str(prediction.error), fg="red"))


@predictions.command("cancel")
@click.argument("prediction_id")
def cancel_prediction(prediction_id):
    """Cancel a running Prediction"""
    client = init_client()
    client.cancel_prediction(prediction_id)
    click.echo(click.style(f"Canceled {prediction_id}", fg="green"))
