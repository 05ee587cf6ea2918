"""CI context domain exports."""

from .github_context import (
    ContextResolutionError,
    branch_from_ref,
    load_event_payload,
    load_github_context,
    parse_repository,
    resolve_trigger,
)
from .trigger_models import (
    CIContext,
    PullRequestTrigger,
    PushTrigger,
    RepositoryIdentity,
    SessionKind,
    TriggerContext,
)

__all__ = [
    "CIContext",
    "PullRequestTrigger",
    "PushTrigger",
    "RepositoryIdentity",
    "SessionKind",
    "TriggerContext",
    "ContextResolutionError",
    "branch_from_ref",
    "load_event_payload",
    "load_github_context",
    "parse_repository",
    "resolve_trigger",
]
