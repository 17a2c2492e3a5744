"""CLI commands for generating labels from a revision."""

from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from buildlabeller.cli.utils.config import config_option, load_config_or_exit
from buildlabeller.cli.utils.logging import logger
from buildlabeller.config import LabellerConfig
from buildlabeller.revision import create_revision_provider
from buildlabeller.versioning import IntegrationStatus, RevisionLabeller
from buildlabeller.versioning.exceptions import ConfigurationError


@click.command(name="generate")
@config_option
@click.option(
    "--previous-label",
    "-l",
    default="",
    help="Label of the previous build (empty for the first build).",
)
@click.option(
    "--previous-status",
    "-s",
    type=click.Choice([s.value for s in IntegrationStatus], case_sensitive=False),
    default=IntegrationStatus.unknown.value,
    show_default=True,
    help="Outcome of the previous build.",
)
@click.option(
    "--revision",
    "-r",
    type=click.IntRange(min=0),
    default=None,
    help="Use this revision instead of asking the configured VCS.",
)
@click.option("--pattern", "-p", default=None, help="Override the label pattern.")
@click.option(
    "--major", type=click.IntRange(min=0), default=None, help="Override major."
)
@click.option(
    "--minor", type=click.IntRange(min=0), default=None, help="Override minor."
)
@click.option(
    "--build",
    type=click.IntRange(min=-1),
    default=None,
    help="Pin the build number (-1 to auto-compute).",
)
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Generate several labels in a row, each fed back as the previous one.",
)
@click.pass_context
def generate(
    ctx,
    config_path: Optional[Path],
    previous_label: str,
    previous_status: str,
    revision: Optional[int],
    pattern: Optional[str],
    major: Optional[int],
    minor: Optional[int],
    build: Optional[int],
    count: int,
):
    """Generate the label for the current build.

    The label is printed on stdout, one line per generated label.
    """
    host = load_config_or_exit(ctx, config_path)

    overrides = {
        key: value
        for key, value in {
            "pattern": pattern,
            "major": major,
            "minor": minor,
            "build": build,
        }.items()
        if value is not None
    }

    try:
        labeller_config = LabellerConfig(**{**host.labeller.model_dump(), **overrides})
        provider = create_revision_provider(host, revision=revision)
    except ValidationError as e:
        logger.error(f"Error: Invalid labeller options: {e}")
        ctx.exit(1)
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        ctx.exit(1)

    labeller = RevisionLabeller(labeller_config, provider)
    status = IntegrationStatus(previous_status.lower())

    label = previous_label
    for _ in range(count):
        label = labeller.generate(label, status)
        click.echo(label)


@click.command(name="revision")
@config_option
@click.pass_context
def revision(ctx, config_path: Optional[Path]):
    """Print the current revision reported by the configured VCS."""
    host = load_config_or_exit(ctx, config_path)

    try:
        provider = create_revision_provider(host)
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        ctx.exit(1)

    click.echo(provider.get_revision())
