import click

from cli.helpers.replicate_url import replicate_url


def launch_web_or_invoke(
    sub_url: str,
    ctx: click.Context,
    launch_browser: bool,
    command: click.Command,
):
    """Launches the sub_url (composed with replicate_url(sub_url)) in the browser if requested, otherwise invokes
    the passed command
    """
    if not ctx.invoked_subcommand:
        if launch_browser:
            url = replicate_url(sub_url)
            click.launch(url)
        else:
            ctx.invoke(command)
    else:
        if launch_browser:
            click.echo(click.style("--web does not work with sub-commands"))
            ctx.abort()
