"""Recce Cloud session API exports."""

from .artifact_uploader import upload_artifacts
from .recce_cloud_client import (
    NotificationError,
    RecceCloudClient,
    SessionClient,
    SessionCreationError,
    UploadFailedError,
    api_endpoint,
    build_retrying_session,
)
from .session_models import (
    BaseSessionRequest,
    ErrorContext,
    IncompleteSessionResponseError,
    PullRequestSessionRequest,
    SessionRequestError,
    SessionRequest,
    SessionResponse,
    build_session_request,
)

__all__ = [
    "BaseSessionRequest",
    "PullRequestSessionRequest",
    "SessionRequest",
    "SessionResponse",
    "ErrorContext",
    "build_session_request",
    "RecceCloudClient",
    "SessionClient",
    "api_endpoint",
    "build_retrying_session",
    "upload_artifacts",
    "SessionCreationError",
    "SessionRequestError",
    "IncompleteSessionResponseError",
    "UploadFailedError",
    "NotificationError",
]
