"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_HOST = "https://cloud.datarecce.io"
DEFAULT_WEB_HOST = "https://cloud.datarecce.io"
DEFAULT_BASE_BRANCH = "main"


@dataclass(frozen=True)
class RunConfig:
    """Resolved action inputs for one run."""

    target_path: Path
    api_host: str
    web_host: str
    base_branch: str
    auth_token: str

    @property
    def manifest_path(self) -> Path:
        return self.target_path / "manifest.json"

    @property
    def catalog_path(self) -> Path:
        return self.target_path / "catalog.json"
