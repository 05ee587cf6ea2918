"""Inputs file scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "recce-cloud-action.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Inputs file for recce-cloud-action.
# Values given on the command line or as INPUT_* variables take precedence.
# Delete any <OPTIONAL> entry you do not need; its default applies.

# Directory holding the dbt manifest.json and catalog.json.
dbt_target_path: "target"

# base_branch: "main"
# api_host: "https://cloud.datarecce.io"
# web_host: "https://cloud.datarecce.io"

# Prefer the GITHUB_TOKEN environment variable over storing a token here.
# github_token: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML inputs file template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder inputs file to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Inputs file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
