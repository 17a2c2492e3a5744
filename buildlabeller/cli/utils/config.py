"""Config loading shared by CLI commands."""

from pathlib import Path
from typing import Optional

import click

from buildlabeller.config import HostConfig, load_config
from buildlabeller.versioning.exceptions import ConfigurationError

from .logging import logger

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    envvar="BUILDLABEL_CONFIG",
    help="Path to the labeller YAML configuration.",
)


def load_config_or_exit(ctx: click.Context, config_path: Optional[Path]) -> HostConfig:
    try:
        return load_config(config_path)
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        ctx.exit(1)
