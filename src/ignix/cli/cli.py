import logging

import click

from ignix.cli.commands.add import add_cmd
from ignix.cli.commands.list_cmd import list_cmd
from ignix.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="ignix")
@click.option("--debug", is_flag=True, help="Log diagnostics to stderr and show full tracebacks.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Add UI components, templates and themes from the registry to your project."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)
    ctx.call_on_close(ctx.obj.http.close)


cli.add_command(add_cmd)
cli.add_command(list_cmd)


def main() -> None:
    """CLI entry point used by the `ignix` console script."""
    cli()
