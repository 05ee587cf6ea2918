"""CLI smoke tests."""

from click.testing import CliRunner
from recce_cloud_action.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "run" in result.output


def test_run_help_documents_action_input_variables() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--help"])

    assert result.exit_code == 0
    assert "--dbt-target-path" in result.output
    assert "INPUT_DBT_TARGET_PATH" in result.output
