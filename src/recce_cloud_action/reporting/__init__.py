"""Reporting exports."""

from .run_reporter import (
    ERROR_HEADING,
    INFO_HEADING,
    SESSION_ID_OUTPUT,
    launch_url,
    report_failure,
    report_success,
)
from .runner_logging import WorkflowCommandFormatter, configure_logging, escape_command_data
from .runner_outputs import RunnerOutputs
from .summary_builder import SummaryBuilder

__all__ = [
    "ERROR_HEADING",
    "INFO_HEADING",
    "SESSION_ID_OUTPUT",
    "RunnerOutputs",
    "SummaryBuilder",
    "WorkflowCommandFormatter",
    "configure_logging",
    "escape_command_data",
    "launch_url",
    "report_failure",
    "report_success",
]
