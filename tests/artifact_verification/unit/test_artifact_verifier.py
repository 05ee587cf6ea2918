"""Artifact verifier tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from recce_cloud_action.artifact_verification import MissingArtifactError, verify_artifacts


def _write_artifacts(target: Path, *names: str) -> None:
    target.mkdir(parents=True, exist_ok=True)
    for name in names:
        (target / name).write_text("{}", encoding="utf-8")


def test_returns_paths_when_both_artifacts_exist(tmp_path: Path) -> None:
    _write_artifacts(tmp_path, "manifest.json", "catalog.json")

    paths = verify_artifacts(tmp_path)

    assert paths.manifest_path == tmp_path / "manifest.json"
    assert paths.catalog_path == tmp_path / "catalog.json"


def test_missing_manifest_names_the_manifest_and_directory(tmp_path: Path) -> None:
    _write_artifacts(tmp_path, "catalog.json")

    with pytest.raises(MissingArtifactError) as excinfo:
        verify_artifacts(tmp_path)

    assert excinfo.value.artifact_name == "manifest.json"
    assert excinfo.value.directory == tmp_path
    assert str(excinfo.value) == (
        f"[Error] DBT manifest.json file not found in {tmp_path} directory."
    )


def test_missing_catalog_names_the_catalog(tmp_path: Path) -> None:
    _write_artifacts(tmp_path, "manifest.json")

    with pytest.raises(MissingArtifactError) as excinfo:
        verify_artifacts(tmp_path)

    assert excinfo.value.artifact_name == "catalog.json"


def test_missing_directory_reports_the_manifest_first(tmp_path: Path) -> None:
    with pytest.raises(MissingArtifactError) as excinfo:
        verify_artifacts(tmp_path / "target")

    assert excinfo.value.artifact_name == "manifest.json"


def test_directory_named_like_an_artifact_does_not_count(tmp_path: Path) -> None:
    _write_artifacts(tmp_path, "manifest.json")
    (tmp_path / "catalog.json").mkdir()

    with pytest.raises(MissingArtifactError, match="catalog.json"):
        verify_artifacts(tmp_path)
