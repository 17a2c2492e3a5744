import logging

import click
import pytest
from click.testing import CliRunner

from buildlabeller.cli.debug import add_debug_option


@pytest.fixture
def probe():
    @click.group()
    @click.pass_context
    def group(ctx):
        ctx.ensure_object(dict)

    @click.command()
    @click.pass_context
    def show(ctx):
        click.echo(ctx.find_root().obj["DEBUG"])
        click.echo(logging.getLogger("buildlabeller").level)

    group.add_command(add_debug_option(show))
    add_debug_option(group)
    return group


@pytest.mark.short
class TestDebugOption:
    def test_added_once(self, probe):
        add_debug_option(probe)
        assert [p.name for p in probe.params].count("debug") == 1

    def test_off_by_default(self, probe):
        result = CliRunner().invoke(probe, ["show"])
        assert result.exit_code == 0
        assert result.output.splitlines()[-2:] == ["False", str(logging.INFO)]

    def test_subcommand_switches_on(self, probe):
        result = CliRunner().invoke(probe, ["show", "--debug"])
        assert result.output.splitlines()[-2:] == ["True", str(logging.DEBUG)]

    def test_subcommand_cannot_switch_off(self, probe):
        result = CliRunner().invoke(probe, ["--debug", "show", "--no-debug"])
        assert result.output.splitlines()[-2:] == ["True", str(logging.DEBUG)]
