"""buildlabeller CLI"""

import click

from buildlabeller import __version__
from buildlabeller.cli.assembly import assembly
from buildlabeller.cli.generate import generate, revision
from buildlabeller.cli.pattern import pattern

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="buildlabel")
@click.pass_context
def cli(ctx):
    """
    Build label generator for CI pipelines.
    """
    ctx.ensure_object(dict)


cli.add_command(add_debug_option(generate))
cli.add_command(add_debug_option(revision))
cli.add_command(add_debug_option(assembly))
cli.add_command(pattern)

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
