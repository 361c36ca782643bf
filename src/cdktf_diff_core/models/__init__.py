"""Domain models for cdktf-diff."""

from cdktf_diff_core.models.job import JobMatch, JobRecord, PageRequest, PageResponse
from cdktf_diff_core.models.result import (
    ClassificationResult,
    CommandResult,
    DiffOutputs,
    ResultCode,
)

__all__ = [
    "ClassificationResult",
    "CommandResult",
    "DiffOutputs",
    "JobMatch",
    "JobRecord",
    "PageRequest",
    "PageResponse",
    "ResultCode",
]
