"""Manifest metadata extraction."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any


class ManifestParseError(Exception):
    """Raised when manifest.json is not valid JSON."""


class MissingFieldError(Exception):
    """Raised when a required manifest field is absent."""

    def __init__(self, field_path: str) -> None:
        super().__init__(f"{field_path} not found in manifest metadata")
        self.field_path = field_path


def read_adapter_type(manifest_path: Path | str) -> str:
    """Return ``metadata.adapter_type`` from the manifest, e.g. 'postgres' or 'snowflake'."""
    path = Path(manifest_path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ManifestParseError(f"Failed to parse {path.name}: {exc}") from exc
    return extract_adapter_type(document)


def extract_adapter_type(document: Any) -> str:
    metadata = document.get("metadata") if isinstance(document, Mapping) else None
    if not isinstance(metadata, Mapping):
        raise MissingFieldError("metadata")

    adapter_type = metadata.get("adapter_type")
    if not isinstance(adapter_type, str) or not adapter_type.strip():
        raise MissingFieldError("metadata.adapter_type")
    return adapter_type.strip()
