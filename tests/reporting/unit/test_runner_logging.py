"""Workflow command logging tests."""

from __future__ import annotations

import logging

import pytest
from recce_cloud_action.reporting import (
    WorkflowCommandFormatter,
    configure_logging,
    escape_command_data,
)


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("recce_cloud_action.test", level, __file__, 1, message, (), None)


def test_error_records_become_error_commands() -> None:
    formatter = WorkflowCommandFormatter("%(message)s")

    assert formatter.format(_record(logging.ERROR, "upload failed")) == "::error::upload failed"
    assert formatter.format(_record(logging.WARNING, "careful")) == "::warning::careful"
    assert formatter.format(_record(logging.DEBUG, "detail")) == "::debug::detail"


def test_info_records_are_plain_lines() -> None:
    formatter = WorkflowCommandFormatter("%(message)s")

    assert formatter.format(_record(logging.INFO, "[Done] verified.")) == "[Done] verified."


def test_command_data_is_escaped() -> None:
    assert escape_command_data("50%\nnext\r") == "50%25%0Anext%0D"


def test_runner_debug_enables_debug_level(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging({"RUNNER_DEBUG": "1"})
    logging.getLogger("recce_cloud_action.sample").debug("visible")

    configure_logging({})
    logging.getLogger("recce_cloud_action.sample").debug("hidden")

    out = capsys.readouterr().out
    assert "::debug::visible" in out
    assert "hidden" not in out
