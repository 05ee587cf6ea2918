"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    INPUT_NAMES,
    ConfigurationError,
    MissingCredentialError,
    load_inputs_file,
    load_run_config,
)
from .runtime_settings import DEFAULT_API_HOST, DEFAULT_BASE_BRANCH, DEFAULT_WEB_HOST, RunConfig

__all__ = [
    "RunConfig",
    "DEFAULT_API_HOST",
    "DEFAULT_WEB_HOST",
    "DEFAULT_BASE_BRANCH",
    "INPUT_NAMES",
    "ConfigurationError",
    "MissingCredentialError",
    "load_inputs_file",
    "load_run_config",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
