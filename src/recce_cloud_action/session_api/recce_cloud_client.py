"""Recce Cloud HTTP client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from recce_cloud_action.ci_context.trigger_models import RepositoryIdentity

from .session_models import SessionRequest, SessionResponse

USER_AGENT = "recce-cloud-cicd-action"
MAX_RETRIES = 3
RETRY_STATUS_CODES = (502, 503, 504)
API_TIMEOUT_SECONDS = 30
UPLOAD_TIMEOUT_SECONDS = 300

logger = logging.getLogger(__name__)


class SessionCreationError(Exception):
    """Raised when touch-recce-session does not return a usable result."""

    def __init__(
        self, message: str, *, endpoint: str, status_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class UploadFailedError(Exception):
    """Raised when a pre-signed upload is not acknowledged."""

    def __init__(self, file_path: Path, status_code: int | None, detail: str | None = None) -> None:
        status = status_code if status_code is not None else "no response"
        message = f"Failed to upload file: {file_path}. Status: {status}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.file_path = file_path
        self.status_code = status_code


class NotificationError(Exception):
    """Raised when the upload-completed call fails."""


class SessionClient(Protocol):
    """Operations the session upload workflow needs from Recce Cloud."""

    def touch_session(
        self, repository: RepositoryIdentity, request: SessionRequest
    ) -> SessionResponse: ...

    def upload_artifact(self, file_path: Path, upload_url: str) -> None: ...

    def notify_upload_completed(self, repository: RepositoryIdentity, session_id: str) -> None: ...

    def close(self) -> None: ...


def api_endpoint(api_host: str, repository: RepositoryIdentity, action: str) -> str:
    return f"{api_host.rstrip('/')}/api/v2/github/{repository.full_name}/{action}"


def build_retrying_session() -> requests.Session:
    """Create a requests session that retries transient gateway errors."""
    retry = Retry(
        total=MAX_RETRIES,
        backoff_factor=0.5,
        status_forcelist=RETRY_STATUS_CODES,
        allowed_methods=frozenset({"GET", "POST", "PUT"}),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session = requests.Session()
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers["User-Agent"] = USER_AGENT
    return session


class RecceCloudClient:
    """Thin wrapper around the Recce Cloud GitHub integration endpoints."""

    def __init__(
        self,
        api_host: str,
        token: str,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self._api_host = api_host.rstrip("/")
        self._auth_headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }
        self._session = session or build_retrying_session()

    def endpoint(self, repository: RepositoryIdentity, action: str) -> str:
        return api_endpoint(self._api_host, repository, action)

    def touch_session(
        self, repository: RepositoryIdentity, request: SessionRequest
    ) -> SessionResponse:
        """Create or refresh the Recce session for the branch and return its upload URLs."""
        url = self.endpoint(repository, "touch-recce-session")
        try:
            response = self._session.post(
                url,
                json=request.to_payload(),
                headers=self._auth_headers,
                timeout=API_TIMEOUT_SECONDS,
            )
        except requests.RequestException as exc:
            raise SessionCreationError(
                f"Failed to create or retrieve Recce session: {exc}", endpoint=url
            ) from exc

        if response.status_code != 200:
            raise SessionCreationError(
                "Failed to create or retrieve Recce session. "
                f"HTTP Status: {response.status_code}",
                endpoint=url,
                status_code=response.status_code,
            )
        payload = _json_body(response)
        if payload is None:
            raise SessionCreationError(
                "Failed to create or retrieve Recce session. Response body is empty.",
                endpoint=url,
                status_code=response.status_code,
            )
        if not isinstance(payload, Mapping):
            raise SessionCreationError(
                "Failed to create or retrieve Recce session. Response body is not a JSON object.",
                endpoint=url,
                status_code=response.status_code,
            )
        # An object missing any field is an incomplete response, including {}.
        return SessionResponse.from_payload(payload)

    def upload_artifact(self, file_path: Path, upload_url: str) -> None:
        """PUT one artifact to its pre-signed storage URL."""
        try:
            content = file_path.read_bytes()
        except OSError as exc:
            raise UploadFailedError(file_path, None, str(exc)) from exc
        try:
            response = self._session.put(
                upload_url,
                data=content,
                headers={"Content-Type": "application/json"},
                timeout=UPLOAD_TIMEOUT_SECONDS,
            )
        except requests.RequestException as exc:
            raise UploadFailedError(file_path, None, str(exc)) from exc
        if response.status_code != 200:
            raise UploadFailedError(file_path, response.status_code)
        logger.debug("Uploaded %s (%d bytes)", file_path.name, len(content))

    def notify_upload_completed(self, repository: RepositoryIdentity, session_id: str) -> None:
        url = self.endpoint(repository, "upload-completed")
        try:
            response = self._session.post(
                url,
                json={"session_id": session_id},
                headers=self._auth_headers,
                timeout=API_TIMEOUT_SECONDS,
            )
        except requests.RequestException as exc:
            raise NotificationError(f"Failed to notify upload completion: {exc}") from exc
        if not 200 <= response.status_code < 300:
            raise NotificationError(
                f"Failed to notify upload completion. HTTP Status: {response.status_code}"
            )

    def close(self) -> None:
        self._session.close()


def _json_body(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None
