"""Allow ``python -m ngjump``."""

from ngjump.cli.main import cli

cli()
