"""ngjump goto command - jump to the definition of a selection."""

import json
from pathlib import Path

import click

from ngjump.cli.utils import find_workspace_root
from ngjump.config.loader import load_config
from ngjump.core.errors import ConfigError, NavigationError, NgJumpError
from ngjump.core.logging import configure_logging
from ngjump.host.workspace import WorkspaceHost
from ngjump.navigation.ops import NavigationOps, RequestContext


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("line", type=click.IntRange(min=1))
@click.argument("selection")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Workspace root (default: enclosing git repository, else cwd)",
)
@click.option("--json", "as_json", is_flag=True, help="Print all matches as JSON instead of jumping")
@click.option("--no-input", is_flag=True, help="Never prompt when several definitions match")
@click.option("--editor", envvar="NGJUMP_EDITOR", default=None, help="Open the target with EDITOR +LINE FILE")
@click.pass_context
def goto_command(
    ctx: click.Context,
    file: Path,
    line: int,
    selection: str,
    root: Path | None,
    as_json: bool,
    no_input: bool,
    editor: str | None,
) -> None:
    """Find where SELECTION is defined and jump there.

    FILE is the document the selection was made in and LINE its 1-based
    line number. SELECTION is the selected text, e.g. doSomething,
    MyService.doSomething or 'MyService'.
    """
    workspace_root = (root or find_workspace_root(file)).resolve()

    try:
        config = load_config(workspace_root)
    except ConfigError as e:
        raise click.ClickException(e.message) from e
    if not (ctx.obj or {}).get("verbose"):
        configure_logging(config=config.logging)

    host = WorkspaceHost(workspace_root, interactive=not no_input and not as_json, editor=editor)
    ops = NavigationOps(host, config.search)
    context = RequestContext.from_file(file, line, selection, workspace_root)

    if as_json:
        try:
            resolution = ops.resolve(context)
        except NavigationError as e:
            click.echo(json.dumps(e.to_dict()))
            ctx.exit(1)
        click.echo(json.dumps(resolution.to_dict(), indent=2))
        return

    try:
        ops.goto_definition(context)
    except NgJumpError as e:
        raise click.ClickException(e.message) from e
