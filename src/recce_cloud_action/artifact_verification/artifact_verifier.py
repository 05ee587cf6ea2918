"""dbt artifact presence checks."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

MANIFEST_FILENAME = "manifest.json"
CATALOG_FILENAME = "catalog.json"

logger = logging.getLogger(__name__)


class MissingArtifactError(Exception):
    """Raised when a required dbt artifact is absent from the target directory."""

    def __init__(self, artifact_name: str, directory: Path) -> None:
        super().__init__(f"[Error] DBT {artifact_name} file not found in {directory} directory.")
        self.artifact_name = artifact_name
        self.directory = directory


@dataclass(frozen=True)
class ArtifactPaths:
    """Locations of the two artifacts uploaded to Recce Cloud."""

    manifest_path: Path
    catalog_path: Path


def verify_artifacts(target_path: Path | str) -> ArtifactPaths:
    """Confirm manifest.json and catalog.json exist and are readable in the target path."""
    directory = Path(target_path)
    logger.info("[Verify] DBT manifest files in '%s' directory...", directory)

    paths = ArtifactPaths(
        manifest_path=directory / MANIFEST_FILENAME,
        catalog_path=directory / CATALOG_FILENAME,
    )
    for candidate in (paths.manifest_path, paths.catalog_path):
        if not _is_readable_file(candidate):
            raise MissingArtifactError(candidate.name, directory)

    logger.info("[Done] DBT manifest files verified.")
    return paths


def _is_readable_file(path: Path) -> bool:
    return path.is_file() and os.access(path, os.R_OK)
