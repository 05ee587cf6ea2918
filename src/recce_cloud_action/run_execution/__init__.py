"""Run execution domain exports."""

from .run_contracts import RunOutcome, RunRequest
from .session_upload_use_case import RunExecutionError, execute_session_upload_run

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_session_upload_run",
]
