"""Recce Cloud session entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from recce_cloud_action.ci_context.trigger_models import (
    PullRequestTrigger,
    PushTrigger,
    TriggerContext,
)

SESSION_RESPONSE_FIELDS = ("session_id", "manifest_upload_url", "catalog_upload_url")


class IncompleteSessionResponseError(Exception):
    """Raised when Recce Cloud omits the session id or an upload URL."""

    def __init__(self, missing_fields: tuple[str, ...]) -> None:
        super().__init__(
            "Failed to get upload URLs or session ID from Recce Cloud. "
            f"Missing: {', '.join(missing_fields)}"
        )
        self.missing_fields = missing_fields


class SessionRequestError(Exception):
    """Raised when a session request cannot be built from the run context."""


@dataclass(frozen=True)
class PullRequestSessionRequest:
    """touch-recce-session body for a pull request session."""

    branch: str
    adapter_type: str
    pr_number: int

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class BaseSessionRequest:
    """touch-recce-session body for the base branch session."""

    branch: str
    adapter_type: str

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)


SessionRequest = PullRequestSessionRequest | BaseSessionRequest


@dataclass(frozen=True)
class SessionResponse:
    """Validated touch-recce-session result."""

    session_id: str
    manifest_upload_url: str
    catalog_upload_url: str

    @staticmethod
    def from_payload(payload: Mapping[str, Any]) -> SessionResponse:
        values = {name: payload.get(name) for name in SESSION_RESPONSE_FIELDS}
        missing = tuple(
            name
            for name, value in values.items()
            if not isinstance(value, str) or not value.strip()
        )
        if missing:
            raise IncompleteSessionResponseError(missing)
        return SessionResponse(**values)


@dataclass(frozen=True)
class ErrorContext:
    """Diagnostic details rendered alongside a failure report."""

    repository: str
    branch: str
    event_type: str
    api_endpoint: str | None = None

    def to_dict(self) -> dict[str, str]:
        rendered = {
            "repository": self.repository,
            "branch": self.branch,
            "eventType": self.event_type,
        }
        if self.api_endpoint:
            rendered["apiEndpoint"] = self.api_endpoint
        return rendered


def build_session_request(trigger: TriggerContext, adapter_type: str) -> SessionRequest:
    """Build the touch-recce-session body matching the trigger variant."""
    if not trigger.branch:
        raise SessionRequestError("Session request requires a branch.")
    if not adapter_type:
        raise SessionRequestError("Session request requires an adapter type.")
    if isinstance(trigger, PullRequestTrigger):
        return PullRequestSessionRequest(
            branch=trigger.branch, adapter_type=adapter_type, pr_number=trigger.pr_number
        )
    if isinstance(trigger, PushTrigger):
        return BaseSessionRequest(branch=trigger.branch, adapter_type=adapter_type)
    raise TypeError(f"Unsupported trigger: {trigger!r}")
