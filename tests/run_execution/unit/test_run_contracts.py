"""Tests for run execution domain entities."""

from __future__ import annotations

import dataclasses

import pytest
from recce_cloud_action.ci_context import SessionKind
from recce_cloud_action.run_execution.run_contracts import RunOutcome, RunRequest


def test_run_request_defaults_to_empty_environment_and_no_inputs_file() -> None:
    request = RunRequest(inputs={"dbt_target_path": "target"})

    assert request.environ == {}
    assert request.config_path is None


def test_run_outcome_carries_session_id_for_pull_request_sessions() -> None:
    outcome = RunOutcome(
        repository="owner/repo",
        branch="feature-x",
        session_kind=SessionKind.PULL_REQUEST,
        session_id="abc123",
    )

    assert outcome.session_kind.value == "pr"
    assert outcome.session_id == "abc123"


def test_run_outcome_is_immutable() -> None:
    outcome = RunOutcome(
        repository="owner/repo", branch="main", session_kind=SessionKind.BASE, session_id=None
    )

    with pytest.raises(dataclasses.FrozenInstanceError):
        outcome.session_id = "abc"  # type: ignore[misc]
