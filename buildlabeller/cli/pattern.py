"""CLI command to check a label pattern."""

from typing import Optional

import click

from buildlabeller.cli.utils.logging import logger
from buildlabeller.versioning import compile_pattern
from buildlabeller.versioning.exceptions import PatternError


@click.command(name="pattern")
@click.argument("pattern")
@click.option("--label", "-l", default=None, help="Label to parse with the pattern.")
@click.pass_context
def pattern(ctx, pattern: str, label: Optional[str]):
    """Show how PATTERN renders and parses labels.

    With --label, also parse that label; exits with 1 if it does not match.
    """
    try:
        compiled = compile_pattern(pattern)
    except PatternError as e:
        logger.error(f"Error: {e}")
        ctx.exit(1)

    click.echo(f"template:   {compiled.template}")
    click.echo(f"expression: {compiled.expression.pattern}")
    click.echo(f"tokens:     {', '.join(compiled.token_names) or '-'}")

    if label is None:
        return

    version = compiled.try_parse(label)
    if version is None:
        click.echo(f"'{label}' does not match")
        ctx.exit(1)

    click.echo(f"major:      {version.major if version.is_major_valid else '-'}")
    click.echo(f"minor:      {version.minor if version.is_minor_valid else '-'}")
    click.echo(f"build:      {version.build if version.is_build_valid else '-'}")
    click.echo(f"revision:   {version.revision if version.is_revision_valid else '-'}")
    click.echo(f"rebuild:    {'-' if version.rebuild is None else version.rebuild}")
