"""Runner summary/output sink tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from recce_cloud_action.reporting import RunnerOutputs, SummaryBuilder


def test_from_environ_reads_runner_file_commands(tmp_path: Path) -> None:
    outputs = RunnerOutputs.from_environ(
        {
            "GITHUB_STEP_SUMMARY": str(tmp_path / "summary.md"),
            "GITHUB_OUTPUT": str(tmp_path / "output.txt"),
        }
    )

    assert outputs.summary_path == tmp_path / "summary.md"
    assert outputs.output_path == tmp_path / "output.txt"


def test_summary_and_outputs_are_appended(tmp_path: Path) -> None:
    outputs = RunnerOutputs(tmp_path / "summary.md", tmp_path / "output.txt")

    outputs.append_summary("first\n")
    outputs.append_summary("second\n")
    outputs.set_output("a", "1")
    outputs.set_output("b", "2")

    assert (tmp_path / "summary.md").read_text(encoding="utf-8") == "first\nsecond\n"
    assert (tmp_path / "output.txt").read_text(encoding="utf-8") == "a=1\nb=2\n"


def test_multiline_output_uses_heredoc_delimiter(tmp_path: Path) -> None:
    outputs = RunnerOutputs(None, tmp_path / "output.txt")

    outputs.set_output("notes", "line one\nline two")

    lines = (tmp_path / "output.txt").read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("notes<<ghadelimiter_")
    assert lines[1:3] == ["line one", "line two"]
    assert lines[3] == lines[0].split("<<", 1)[1]


def test_without_runner_files_content_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    outputs = RunnerOutputs.from_environ({})

    with caplog.at_level(logging.INFO, logger="recce_cloud_action"):
        outputs.append_summary("### Heading\n")
        outputs.set_output("session_id", "abc123")

    assert "### Heading" in caplog.text
    assert "session_id=abc123" in caplog.text


def test_unwritable_runner_files_log_warning_instead_of_raising(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    missing_dir = tmp_path / "missing-dir"
    outputs = RunnerOutputs(missing_dir / "summary.md", missing_dir / "output.txt")

    with caplog.at_level(logging.WARNING, logger="recce_cloud_action"):
        outputs.append_summary("### Heading\n")
        outputs.set_output("session_id", "abc123")

    assert "Could not write job summary" in caplog.text
    assert "Could not write output session_id" in caplog.text
    assert not missing_dir.exists()


def test_summary_builder_renders_markdown_blocks() -> None:
    rendered = (
        SummaryBuilder()
        .add_heading("Title")
        .add_raw("Body text.")
        .add_link("Open", "https://example.com")
        .add_heading("Details", level=4)
        .add_code_block('{"a": 1}', "json")
        .render()
    )

    assert rendered == (
        "### Title\n\nBody text.\n\n[Open](https://example.com)\n\n#### Details\n\n"
        '```json\n{"a": 1}\n```\n'
    )
