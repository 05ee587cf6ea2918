"""Success and failure reporting for one run."""

from __future__ import annotations

import json
import logging

from recce_cloud_action.artifact_verification.artifact_verifier import MissingArtifactError
from recce_cloud_action.ci_context.trigger_models import PullRequestTrigger, TriggerContext
from recce_cloud_action.session_api.session_models import ErrorContext

from .runner_outputs import RunnerOutputs
from .summary_builder import SummaryBuilder

ERROR_HEADING = "Recce Cloud CI/CD Action Error"
INFO_HEADING = "Recce Cloud CI/CD Action Info"
SESSION_ID_OUTPUT = "session_id"

logger = logging.getLogger(__name__)


def launch_url(web_host: str, session_id: str) -> str:
    return f"{web_host.rstrip('/')}/launch/{session_id}"


def report_failure(
    error: BaseException, context: ErrorContext | None, outputs: RunnerOutputs
) -> None:
    """Log a terminal error and render it into the job summary."""
    message = str(error) or error.__class__.__name__
    logger.error("%s", message)
    logger.debug("%s details", error.__class__.__name__, exc_info=error)

    summary = SummaryBuilder().add_heading(ERROR_HEADING)
    if isinstance(error, MissingArtifactError):
        summary.add_raw(_missing_artifact_guidance(error.artifact_name))
    else:
        summary.add_raw(message)

    if context is not None and not isinstance(error, MissingArtifactError):
        rendered_context = json.dumps(context.to_dict(), indent=2)
        logger.error("Context: %s", rendered_context)
        summary.add_heading("Context", level=4).add_code_block(rendered_context, "json")
    outputs.append_summary(summary.render())


def report_success(
    trigger: TriggerContext, web_host: str, session_id: str, outputs: RunnerOutputs
) -> str | None:
    """Write the completion summary; pull request runs also expose the session id.

    Returns the output value that was set, or None for base branch runs.
    """
    summary = SummaryBuilder().add_heading(INFO_HEADING)
    if isinstance(trigger, PullRequestTrigger):
        summary.add_raw("Please use the link below to launch your Recce Cloud session.")
        summary.add_link("Launch Recce Cloud Session", launch_url(web_host, session_id))
        outputs.append_summary(summary.render())
        outputs.set_output(SESSION_ID_OUTPUT, session_id)
        return session_id

    summary.add_raw("The base session has been updated.")
    outputs.append_summary(summary.render())
    return None


def _missing_artifact_guidance(artifact_name: str) -> str:
    return (
        f"The DBT `{artifact_name}` file is missing. Please ensure that your DBT project "
        f"has been built and the {artifact_name} file is present in the specified "
        "target directory."
    )
