"""CLI command for labels taken from an AssemblyVersion attribute."""

from pathlib import Path
from typing import Optional

import click

from buildlabeller.cli.utils.config import config_option, load_config_or_exit
from buildlabeller.cli.utils.logging import logger
from buildlabeller.versioning import AssemblyInfoLabeller


@click.command(name="assembly")
@click.argument("paths", required=False)
@config_option
@click.pass_context
def assembly(ctx, paths: Optional[str], config_path: Optional[Path]):
    """Print the version of the first file in PATHS with an AssemblyVersion.

    PATHS is a comma-separated list of files, checked in order. Without it the
    configured assemblyInfoPath is used. Prints 0.0.0.0 when nothing matches.
    """
    if paths is None:
        paths = load_config_or_exit(ctx, config_path).assembly_info_path
        if not paths:
            logger.error("Error: No PATHS given and no assemblyInfoPath configured.")
            ctx.exit(1)

    click.echo(AssemblyInfoLabeller(paths).generate())
