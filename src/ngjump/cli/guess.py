"""ngjump guess command - show the filenames searched for an owner name."""

import click

from ngjump.navigation.guessing import guess_file_patterns


@click.command()
@click.argument("owner")
def guess_command(owner: str) -> None:
    """Print the filename patterns tried for OWNER, one per line."""
    for pattern in guess_file_patterns(owner):
        click.echo(pattern)
