"""GitHub Actions summary and output sinks."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class RunnerOutputs:
    """Writes the job summary and step outputs through the runner's file commands.

    Outside of Actions (no ``GITHUB_STEP_SUMMARY``/``GITHUB_OUTPUT``) the content is
    logged instead so local runs still show it.
    """

    def __init__(self, summary_path: Path | None = None, output_path: Path | None = None) -> None:
        self.summary_path = summary_path
        self.output_path = output_path

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> RunnerOutputs:
        summary = environ.get("GITHUB_STEP_SUMMARY")
        output = environ.get("GITHUB_OUTPUT")
        return cls(
            summary_path=Path(summary) if summary else None,
            output_path=Path(output) if output else None,
        )

    def append_summary(self, markdown: str) -> None:
        if self.summary_path is None:
            logger.info("Summary:\n%s", markdown.rstrip())
            return
        try:
            with self.summary_path.open("a", encoding="utf-8") as handle:
                handle.write(markdown)
        except OSError as exc:
            logger.warning("Could not write job summary to %s: %s", self.summary_path, exc)

    def set_output(self, name: str, value: str) -> None:
        if self.output_path is None:
            logger.info("Output %s=%s", name, value)
            return
        try:
            with self.output_path.open("a", encoding="utf-8") as handle:
                handle.write(_format_output(name, value))
        except OSError as exc:
            logger.warning("Could not write output %s to %s: %s", name, self.output_path, exc)


def _format_output(name: str, value: str) -> str:
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
