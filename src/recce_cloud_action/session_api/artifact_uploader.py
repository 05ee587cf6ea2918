"""Parallel upload of the dbt artifacts."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait

from recce_cloud_action.artifact_verification.artifact_verifier import ArtifactPaths

from .recce_cloud_client import SessionClient, UploadFailedError
from .session_models import SessionResponse

logger = logging.getLogger(__name__)


def upload_artifacts(
    client: SessionClient, paths: ArtifactPaths, session: SessionResponse
) -> None:
    """Upload manifest and catalog concurrently; raise the first failure once both finish."""
    targets = (
        (paths.manifest_path, session.manifest_upload_url),
        (paths.catalog_path, session.catalog_upload_url),
    )
    logger.info("[Uploading] manifest.json and catalog.json to Recce Cloud...")
    with ThreadPoolExecutor(max_workers=len(targets)) as executor:
        futures = [
            executor.submit(client.upload_artifact, file_path, upload_url)
            for file_path, upload_url in targets
        ]
        wait(futures)

    failures: list[UploadFailedError] = []
    for future in futures:
        error = future.exception()
        if error is None:
            continue
        if not isinstance(error, UploadFailedError):
            raise error
        logger.error("%s", error)
        failures.append(error)
    if failures:
        raise failures[0]
    logger.info("[Done] Artifacts uploaded to Recce Cloud.")
