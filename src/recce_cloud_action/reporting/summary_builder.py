"""Markdown step summary composition."""

from __future__ import annotations


class SummaryBuilder:
    """Accumulates Markdown blocks for the job summary."""

    def __init__(self) -> None:
        self._blocks: list[str] = []

    def add_heading(self, text: str, level: int = 3) -> SummaryBuilder:
        self._blocks.append(f"{'#' * level} {text}")
        return self

    def add_raw(self, text: str) -> SummaryBuilder:
        self._blocks.append(text)
        return self

    def add_link(self, text: str, href: str) -> SummaryBuilder:
        self._blocks.append(f"[{text}]({href})")
        return self

    def add_code_block(self, code: str, language: str = "") -> SummaryBuilder:
        self._blocks.append(f"```{language}\n{code}\n```")
        return self

    def render(self) -> str:
        return "\n\n".join(self._blocks) + "\n"
