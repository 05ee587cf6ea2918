"""GitHub Actions context capture service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .trigger_models import (
    CIContext,
    PullRequestTrigger,
    PushTrigger,
    RepositoryIdentity,
    TriggerContext,
)

PULL_REQUEST_EVENT = "pull_request"
BRANCH_REF_PREFIX = "refs/heads/"


class ContextResolutionError(Exception):
    """Raised when the invoking CI event cannot be interpreted."""


def load_github_context(environ: Mapping[str, str]) -> CIContext:
    """Capture repository identity and trigger details from the Actions environment."""
    repository = parse_repository(environ.get("GITHUB_REPOSITORY", ""))
    event_name = environ.get("GITHUB_EVENT_NAME", "").strip()
    if not event_name:
        raise ContextResolutionError("GITHUB_EVENT_NAME is not set.")

    payload = load_event_payload(environ.get("GITHUB_EVENT_PATH"))
    trigger = resolve_trigger(event_name, payload, environ.get("GITHUB_REF", ""))
    return CIContext(repository=repository, event_name=event_name, trigger=trigger)


def parse_repository(value: str) -> RepositoryIdentity:
    owner, separator, name = value.strip().partition("/")
    if not separator or not owner or not name or "/" in name:
        raise ContextResolutionError(
            f"GITHUB_REPOSITORY must look like 'owner/name', got '{value}'."
        )
    return RepositoryIdentity(owner=owner, name=name)


def load_event_payload(event_path: str | None) -> dict[str, Any]:
    """Read the webhook payload file; an unset path yields an empty payload."""
    if not event_path:
        return {}
    path = Path(event_path)
    try:
        parsed = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ContextResolutionError(f"Event payload file not found: {path}") from exc
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ContextResolutionError(f"Failed to read event payload {path}: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ContextResolutionError("Event payload root must be an object.")
    return parsed


def resolve_trigger(event_name: str, payload: Mapping[str, Any], ref: str) -> TriggerContext:
    """Map the invoking event to a pull request or push trigger."""
    if event_name == PULL_REQUEST_EVENT:
        return _pull_request_trigger(payload)
    branch = branch_from_ref(ref)
    if not branch:
        raise ContextResolutionError(f"Cannot determine branch from GITHUB_REF '{ref}'.")
    return PushTrigger(branch=branch)


def branch_from_ref(ref: str) -> str:
    return ref.strip().removeprefix(BRANCH_REF_PREFIX)


def _pull_request_trigger(payload: Mapping[str, Any]) -> PullRequestTrigger:
    pull_request = payload.get("pull_request")
    if not isinstance(pull_request, Mapping):
        raise ContextResolutionError("pull_request event payload is missing 'pull_request'.")

    number = pull_request.get("number")
    if isinstance(number, bool) or not isinstance(number, int):
        raise ContextResolutionError("pull_request.number must be an integer.")

    head = pull_request.get("head")
    ref = head.get("ref") if isinstance(head, Mapping) else None
    if not isinstance(ref, str) or not ref.strip():
        raise ContextResolutionError("pull_request.head.ref must be a non-empty string.")
    return PullRequestTrigger(branch=ref.strip(), pr_number=number)
