"""Session upload use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from recce_cloud_action.artifact_verification import (
    ManifestParseError,
    MissingArtifactError,
    MissingFieldError,
    read_adapter_type,
    verify_artifacts,
)
from recce_cloud_action.ci_context import (
    CIContext,
    ContextResolutionError,
    PullRequestTrigger,
    load_github_context,
)
from recce_cloud_action.configuration import ConfigurationError, RunConfig, load_run_config
from recce_cloud_action.reporting import RunnerOutputs, report_failure, report_success
from recce_cloud_action.session_api import (
    ErrorContext,
    IncompleteSessionResponseError,
    NotificationError,
    RecceCloudClient,
    SessionClient,
    SessionCreationError,
    SessionRequestError,
    UploadFailedError,
    api_endpoint,
    build_session_request,
    upload_artifacts,
)

from .run_contracts import RunOutcome, RunRequest

ClientFactory = Callable[[RunConfig], SessionClient]

_TERMINAL_ERRORS = (
    ConfigurationError,
    ContextResolutionError,
    MissingArtifactError,
    ManifestParseError,
    MissingFieldError,
    SessionCreationError,
    IncompleteSessionResponseError,
    UploadFailedError,
    NotificationError,
    SessionRequestError,
)

logger = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


@dataclass
class _RunState:
    """Context accumulated while the run advances, used by the failure report."""

    error_context: ErrorContext | None = None


def execute_session_upload_run(
    request: RunRequest,
    *,
    client_factory: ClientFactory | None = None,
) -> RunOutcome:
    """Verify artifacts, touch the Recce session, upload, notify and report.

    Any failure is reported once through the job summary and re-raised as
    RunExecutionError carrying the original message; no later step runs.
    """
    resolved_client_factory = client_factory or _default_client
    outputs = RunnerOutputs.from_environ(request.environ)
    state = _RunState()
    try:
        return _execute(request, outputs, state, resolved_client_factory)
    except _TERMINAL_ERRORS as exc:
        report_failure(exc, state.error_context, outputs)
        raise RunExecutionError(str(exc)) from exc


def _default_client(config: RunConfig) -> SessionClient:
    return RecceCloudClient(config.api_host, config.auth_token)


def _execute(
    request: RunRequest,
    outputs: RunnerOutputs,
    state: _RunState,
    client_factory: ClientFactory,
) -> RunOutcome:
    config = load_run_config(request.inputs, request.environ, request.config_path)
    ci_context = load_github_context(request.environ)
    trigger = ci_context.trigger
    logger.debug("Base branch: %s", config.base_branch)
    state.error_context = ErrorContext(
        repository=ci_context.repository.full_name,
        branch=trigger.branch,
        event_type=ci_context.event_name,
    )

    paths = verify_artifacts(config.target_path)
    adapter_type = read_adapter_type(paths.manifest_path)

    if isinstance(trigger, PullRequestTrigger):
        logger.info("[Upload] Artifacts for Pull Request session...")
    else:
        logger.info("[Upload] Artifacts for base session...")
    session_request = build_session_request(trigger, adapter_type)
    state.error_context = replace(
        state.error_context,
        api_endpoint=api_endpoint(
            config.api_host, ci_context.repository, "touch-recce-session"
        ),
    )

    client = client_factory(config)
    try:
        session = client.touch_session(ci_context.repository, session_request)
        logger.debug("Manifest Upload URL: %s", session.manifest_upload_url)
        logger.debug("Catalog Upload URL: %s", session.catalog_upload_url)
        upload_artifacts(client, paths, session)
        client.notify_upload_completed(ci_context.repository, session.session_id)
    finally:
        client.close()

    output_session_id = report_success(trigger, config.web_host, session.session_id, outputs)
    logger.info("Action completed successfully!")
    return _outcome(ci_context, output_session_id)


def _outcome(ci_context: CIContext, session_id: str | None) -> RunOutcome:
    return RunOutcome(
        repository=ci_context.repository.full_name,
        branch=ci_context.trigger.branch,
        session_kind=ci_context.trigger.session_kind,
        session_id=session_id,
    )
