"""Action input resolution service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import DEFAULT_API_HOST, DEFAULT_BASE_BRANCH, DEFAULT_WEB_HOST, RunConfig

INPUT_NAMES = ("dbt_target_path", "api_host", "web_host", "base_branch", "github_token")
TOKEN_ENV_VAR = "GITHUB_TOKEN"


class ConfigurationError(Exception):
    """Raised when the action inputs are invalid."""


class MissingCredentialError(ConfigurationError):
    """Raised when no authentication token can be resolved."""


def load_run_config(
    inputs: Mapping[str, str | None],
    environ: Mapping[str, str],
    config_path: Path | str | None = None,
) -> RunConfig:
    """Resolve the run configuration from action inputs, an inputs file and defaults.

    Args:
      inputs: Explicit action inputs keyed by input name. Blank values count as absent.
      environ: Process environment, consulted for the authentication token.
      config_path: Optional YAML inputs file providing fallback values.

    Returns:
      The immutable run configuration.

    Raises:
      MissingCredentialError: If no token is available from any source.
      ConfigurationError: If a required input is missing or the inputs file is invalid.
    """
    file_inputs = load_inputs_file(config_path) if config_path else {}

    def resolve(name: str) -> str | None:
        explicit = _optional_string(inputs.get(name), name)
        if explicit is not None:
            return explicit
        return _optional_string(file_inputs.get(name), name)

    target_path = resolve("dbt_target_path")
    if target_path is None:
        raise ConfigurationError("Input required and not supplied: dbt_target_path")

    token = _optional_string(environ.get(TOKEN_ENV_VAR), TOKEN_ENV_VAR) or resolve("github_token")
    if token is None:
        raise MissingCredentialError(
            "GITHUB_TOKEN is required. Please set it in your workflow or pass it as an input."
        )

    return RunConfig(
        target_path=Path(target_path),
        api_host=_normalize_host(resolve("api_host") or DEFAULT_API_HOST),
        web_host=_normalize_host(resolve("web_host") or DEFAULT_WEB_HOST),
        base_branch=resolve("base_branch") or DEFAULT_BASE_BRANCH,
        auth_token=token,
    )


def load_inputs_file(config_path: Path | str) -> dict[str, Any]:
    """Load the optional YAML inputs file and return its known entries."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Inputs file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse inputs file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Inputs file root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in INPUT_NAMES)
    if unknown:
        raise ConfigurationError(f"Unknown inputs in {path.name}: {', '.join(unknown)}")
    return dict(parsed)


def _normalize_host(value: str) -> str:
    return value.rstrip("/")


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
