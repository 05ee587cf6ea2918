"""Command line interface entry point."""

from __future__ import annotations

import os
import sys

import click

from recce_cloud_action.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from recce_cloud_action.reporting import configure_logging
from recce_cloud_action.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_session_upload_run,
)


class CliError(Exception):
    """Custom CLI error."""


def _input_option(name: str, help_text: str):
    """Option that also reads the matching GitHub Actions ``INPUT_*`` variable."""
    return click.option(
        f"--{name.replace('_', '-')}",
        name,
        required=False,
        envvar=f"INPUT_{name.upper()}",
        show_envvar=True,
        help=help_text,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="recce-cloud-action")
def cli() -> None:
    """Upload dbt artifacts to Recce Cloud from a CI pipeline."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML inputs file to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML inputs file with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@_input_option("dbt_target_path", "Directory containing manifest.json and catalog.json")
@_input_option("base_branch", "Base branch of the repository (default: main)")
@_input_option("api_host", "Recce Cloud API host")
@_input_option("web_host", "Recce Cloud web host used for launch links")
@_input_option("github_token", "Token used when GITHUB_TOKEN is not set")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML inputs file providing fallback values",
)
def run_upload(  # pylint: disable=too-many-arguments
    dbt_target_path: str | None,
    base_branch: str | None,
    api_host: str | None,
    web_host: str | None,
    github_token: str | None,
    config_path: str | None,
) -> None:
    """Touch the Recce session and upload the dbt artifacts."""
    environ = dict(os.environ)
    configure_logging(environ)
    try:
        outcome = execute_session_upload_run(
            RunRequest(
                inputs={
                    "dbt_target_path": dbt_target_path,
                    "base_branch": base_branch,
                    "api_host": api_host,
                    "web_host": web_host,
                    "github_token": github_token,
                },
                environ=environ,
                config_path=config_path,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    if outcome.session_id:
        click.echo(outcome.session_id)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
