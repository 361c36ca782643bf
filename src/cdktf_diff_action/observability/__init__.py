"""Observability: structured logging."""

from cdktf_diff_action.observability.logging import (
    bind_job_context,
    clear_job_context,
    configure_logging,
)

__all__ = [
    "bind_job_context",
    "clear_job_context",
    "configure_logging",
]
