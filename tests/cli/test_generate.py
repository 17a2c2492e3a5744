"""Tests for the generate and revision commands."""

from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from buildlabeller.cli.main import cli

SVN_CONFIG = """
labeller:
  major: 2
  minor: 3
vcs: svn
svn:
  url: https://svn.example.org/repos/project/trunk
"""

SVN_URL = "https://svn.example.org/repos/project/trunk"

LOG_XML = '<?xml version="1.0"?>\n<log><logentry revision="77"/></log>\n'


def last_line(output: str) -> str:
    return output.strip().splitlines()[-1]


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "buildlabel.yaml"
    path.write_text(SVN_CONFIG)
    return path


@pytest.fixture
def no_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("buildlabeller.config.config_dir", tmp_path / "none")


@pytest.mark.short
class TestGenerate:
    def test_explicit_revision(self, no_config):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "generate",
                "--previous-label",
                "1.0.0.100",
                "--previous-status",
                "success",
                "--revision",
                "105",
            ],
        )
        assert result.exit_code == 0
        assert last_line(result.output) == "1.0.1.105"

    def test_first_build(self, no_config):
        result = CliRunner().invoke(cli, ["generate", "-r", "42"])
        assert result.exit_code == 0
        assert last_line(result.output) == "1.0.0.42"

    def test_status_is_case_insensitive(self, no_config):
        result = CliRunner().invoke(
            cli, ["generate", "-l", "1.0.0.100", "-s", "SUCCESS", "-r", "101"]
        )
        assert result.exit_code == 0
        assert last_line(result.output) == "1.0.1.101"

    def test_count_feeds_labels_back(self, no_config):
        result = CliRunner().invoke(
            cli,
            [
                "generate",
                "-r",
                "100",
                "-p",
                "{major}.{minor}.{build}.{revision}.{rebuild}",
                "-n",
                "3",
            ],
        )
        assert result.exit_code == 0
        labels = [line for line in result.output.splitlines() if line[:1].isdigit()]
        assert labels == [
            "1.0.0.100.1",
            "1.0.0.100.2",
            "1.0.0.100.3",
        ]

    def test_option_overrides(self, no_config):
        result = CliRunner().invoke(
            cli,
            ["generate", "-r", "9", "--major", "4", "--minor", "2", "--build", "11"],
        )
        assert result.exit_code == 0
        assert last_line(result.output) == "4.2.11.9"

    def test_bad_pattern(self, no_config):
        result = CliRunner().invoke(cli, ["generate", "-r", "1", "-p", "{major}.{x}"])
        assert result.exit_code == 1

    def test_svn_section_required_without_revision(self, no_config):
        result = CliRunner().invoke(cli, ["generate"])
        assert result.exit_code == 1

    @patch("subprocess.run")
    def test_revision_from_svn(self, mock_run, config_file):
        mock_run.return_value = Mock(returncode=0, stdout=LOG_XML, stderr="")

        result = CliRunner().invoke(
            cli,
            ["generate", "-c", str(config_file), "-l", "2.3.5.70", "-s", "success"],
        )

        assert result.exit_code == 0
        assert last_line(result.output) == "2.3.6.77"
        assert mock_run.call_args[0][0][-1] == SVN_URL

    def test_config_from_environment(self, tmp_path, no_config):
        path = tmp_path / "env.yaml"
        path.write_text("labeller:\n  pattern: 'v{major}.{minor}-r{revision}'\n")
        result = CliRunner().invoke(
            cli, ["generate", "-r", "3"], env={"BUILDLABEL_CONFIG": str(path)}
        )
        assert result.exit_code == 0
        assert last_line(result.output) == "v1.0-r3"

    def test_invalid_config(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("labeller:\n  major: -3\n")
        result = CliRunner().invoke(cli, ["generate", "-c", str(path), "-r", "1"])
        assert result.exit_code == 1

    def test_debug_flag(self, no_config):
        result = CliRunner().invoke(cli, ["generate", "--debug", "-r", "5"])
        assert result.exit_code == 0
        assert last_line(result.output) == "1.0.0.5"


@pytest.mark.short
class TestRevision:
    @patch("subprocess.run")
    def test_prints_revision(self, mock_run, config_file):
        mock_run.return_value = Mock(returncode=0, stdout=LOG_XML, stderr="")
        result = CliRunner().invoke(cli, ["revision", "-c", str(config_file)])
        assert result.exit_code == 0
        assert last_line(result.output) == "77"

    def test_without_svn_settings(self, no_config):
        result = CliRunner().invoke(cli, ["revision"])
        assert result.exit_code == 1


@pytest.mark.short
def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "buildlabel" in result.output
