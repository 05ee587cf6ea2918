"""CI trigger context entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SessionKind(str, Enum):
    """Kind of Recce session a trigger maps to."""

    PULL_REQUEST = "pr"
    BASE = "base"


@dataclass(frozen=True)
class RepositoryIdentity:
    """Owner/name pair of the repository running the workflow."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class PullRequestTrigger:
    """Run triggered by a pull request event."""

    branch: str
    pr_number: int

    @property
    def session_kind(self) -> SessionKind:
        return SessionKind.PULL_REQUEST


@dataclass(frozen=True)
class PushTrigger:
    """Run triggered by a push (or any non pull request event) to a branch."""

    branch: str

    @property
    def session_kind(self) -> SessionKind:
        return SessionKind.BASE


TriggerContext = PullRequestTrigger | PushTrigger


@dataclass(frozen=True)
class CIContext:
    """Platform context captured once at the start of a run."""

    repository: RepositoryIdentity
    event_name: str
    trigger: TriggerContext
