"""``--debug/--no-debug`` flag shared by the group and its subcommands."""

import click

from .utils.logging import configure_logging

DEBUG_KEY = "DEBUG"


def _debug_callback(ctx: click.Context, param: click.Parameter, value: bool) -> bool:
    root = ctx.find_root()
    root.ensure_object(dict)

    # subcommands may switch debug on, only the group may switch it off
    if value or ctx.parent is None or DEBUG_KEY not in root.obj:
        root.obj[DEBUG_KEY] = value

    configure_logging(root.obj[DEBUG_KEY])
    return root.obj[DEBUG_KEY]


def add_debug_option(cmd: click.Command) -> click.Command:
    """Give ``cmd`` a ``--debug/--no-debug`` flag unless it already has one."""
    if not any(param.name == "debug" for param in cmd.params):
        cmd.params.insert(
            0,
            click.Option(
                ["--debug/--no-debug"],
                is_eager=True,
                expose_value=False,
                callback=_debug_callback,
                help="Log the labeller's decisions.",
            ),
        )
    return cmd
