"""Artifact verification exports."""

from .artifact_verifier import (
    CATALOG_FILENAME,
    MANIFEST_FILENAME,
    ArtifactPaths,
    MissingArtifactError,
    verify_artifacts,
)
from .manifest_reader import (
    ManifestParseError,
    MissingFieldError,
    extract_adapter_type,
    read_adapter_type,
)

__all__ = [
    "ArtifactPaths",
    "MANIFEST_FILENAME",
    "CATALOG_FILENAME",
    "MissingArtifactError",
    "ManifestParseError",
    "MissingFieldError",
    "extract_adapter_type",
    "read_adapter_type",
    "verify_artifacts",
]
