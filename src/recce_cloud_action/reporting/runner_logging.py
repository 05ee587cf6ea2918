"""Logging setup that speaks GitHub Actions workflow commands."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping

_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


class WorkflowCommandFormatter(logging.Formatter):
    """Render debug/warning/error records as ``::command::message`` lines."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = _COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_command_data(message)}"


def escape_command_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def configure_logging(environ: Mapping[str, str]) -> None:
    """Install a single stdout handler on the package logger."""
    package_logger = logging.getLogger("recce_cloud_action")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(WorkflowCommandFormatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if environ.get("RUNNER_DEBUG") == "1" else logging.INFO)
