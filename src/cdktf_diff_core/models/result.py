"""Diff classification and result record models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ResultCode(StrEnum):
    """Outcome of a diff, mirroring terraform's detailed exit codes."""

    NO_CHANGE = "0"
    ERROR = "1"
    CHANGED = "2"


class ClassificationResult(BaseModel):
    """Outcome and one-line summary extracted from diff output."""

    model_config = ConfigDict(frozen=True)

    code: ResultCode = Field(description="Classified outcome")
    summary: str = Field(min_length=1, description="Single-line human-readable summary")


class CommandResult(BaseModel):
    """Exit code and combined stdout/stderr of a shell command."""

    exit_code: int = Field(description="Process exit status")
    output: str = Field(default="", description="Combined stdout and stderr text")


class DiffOutputs(BaseModel):
    """Flat result record published as step outputs and written to disk."""

    result_code: ResultCode = Field(description="0 = no changes, 1 = error, 2 = changes")
    summary: str = Field(description="Single string summarizing the diff")
    job_id: str = Field(description="ID of the workflow job that ran the diff")
    html_url: str = Field(description="Direct link to the job execution")
    stack: str = Field(description="Name of the CDKTF stack that was diffed")
