"""Custom exception hierarchy for cdktf-diff."""

from __future__ import annotations


class CdktfDiffError(Exception):
    """Base exception for all cdktf-diff errors."""


class JobNotFoundError(CdktfDiffError):
    """Raised when no job in the workflow run carries the requested name."""

    def __init__(self, job_name: str) -> None:
        self.job_name = job_name
        super().__init__(f"Could not find job with name {job_name}")


class GitHubContextError(CdktfDiffError):
    """Raised when the GitHub Actions environment is missing or malformed."""
