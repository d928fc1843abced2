import click

from cli.deployments import deployments
from cli.docs import docs
from cli.hardware import hardware
from cli.helpers.web_helper import launch_web_or_invoke
from cli.install_completion import install_completion
from cli.models import models
from cli.predictions import predictions
from cli.trainings import trainings


@click.group("cli", invoke_without_command=True)
@click.option("--web", is_flag=True, help="Launch browser")
@click.pass_context
def rc(ctx, web):
    """Welcome to the Replicate CLI!

    Run machine learning models in the cloud: https://replicate.com
    """
    launch_web_or_invoke("", ctx, web, show_help)


@click.command("help", hidden=True)
@click.pass_context
def show_help(ctx):
    click.echo(ctx.find_root().get_help())


rc.add_command(deployments)  # type: ignore
rc.add_command(docs)  # type: ignore
rc.add_command(hardware)  # type: ignore
rc.add_command(install_completion)  # type: ignore
rc.add_command(models)  # type: ignore
rc.add_command(predictions)  # type: ignore
rc.add_command(trainings)  # type: ignore

if __name__ == "__main__":
    rc()
