"""ngjump CLI - ngjump command."""

import click

from ngjump import __version__
from ngjump.cli.goto import goto_command
from ngjump.cli.guess import guess_command
from ngjump.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="ngjump")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """ngjump - go to definition in AngularJS-style JavaScript workspaces."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(goto_command, name="goto")
cli.add_command(guess_command, name="guess")


if __name__ == "__main__":
    cli()
