"""Abstract paginated job source interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from cdktf_diff_core.models.job import PageRequest, PageResponse


@runtime_checkable
class PageFetcher(Protocol):
    """Capability to fetch one page of workflow jobs."""

    async def __call__(self, request: PageRequest) -> PageResponse:
        """Return the jobs on the requested page."""
        ...
