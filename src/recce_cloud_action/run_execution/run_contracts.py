"""Run execution entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from recce_cloud_action.ci_context.trigger_models import SessionKind


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one run."""

    inputs: Mapping[str, str | None]
    environ: Mapping[str, str] = field(default_factory=dict)
    config_path: str | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    repository: str
    branch: str
    session_kind: SessionKind
    session_id: str | None
