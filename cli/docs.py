import click


@click.command("docs")
def docs():
    """View the Replicate HTTP API reference in the browser"""
    click.launch("https://replicate.com/docs/reference/http")
