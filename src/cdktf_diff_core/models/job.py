"""Workflow job models for the paginated jobs API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class JobRecord(BaseModel):
    """One entry of the 'list jobs for a workflow run' response."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(description="Numeric job identifier")
    name: str = Field(description="Human-readable job name")
    html_url: str | None = Field(default=None, description="Link to the job page")


class JobMatch(BaseModel):
    """Identifier fields of the resolved job."""

    job_id: int = Field(description="Numeric job identifier")
    html_url: str = Field(default="", description="Link to the job page")

    @classmethod
    def from_record(cls, record: JobRecord) -> JobMatch:
        """Build a match from the record it was found in."""
        return cls(job_id=record.id, html_url=record.html_url or "")


class PageRequest(BaseModel):
    """Request for one page of jobs."""

    page_number: int = Field(ge=1, description="1-based page number")


class PageResponse(BaseModel):
    """One page of jobs in the order delivered by the API."""

    items: list[JobRecord] = Field(default_factory=list, description="Jobs on this page")
