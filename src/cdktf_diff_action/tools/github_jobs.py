"""GitHub REST client for the 'list jobs for a workflow run' endpoint."""

from __future__ import annotations

import httpx
import structlog

from cdktf_diff_core.constants import GITHUB_API_VERSION, JOBS_PAGE_SIZE
from cdktf_diff_core.models.job import JobRecord, PageRequest, PageResponse

logger = structlog.get_logger()

JOBS_PATH = "/repos/{owner}/{repo}/actions/runs/{run_id}/jobs"


class GitHubJobsClient:
    """Fetch pages of jobs for one workflow run.

    Instances are callable so they can be passed straight to resolve_job.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        owner: str,
        repo: str,
        run_id: int,
    ) -> None:
        """Initialize with an open httpx client and the run coordinates."""
        self._client = client
        self._path = JOBS_PATH.format(owner=owner, repo=repo, run_id=run_id)

    async def __call__(self, request: PageRequest) -> PageResponse:
        """Alias for fetch_page."""
        return await self.fetch_page(request)

    async def fetch_page(self, request: PageRequest) -> PageResponse:
        """Fetch one page. HTTP errors are raised, not swallowed."""
        response = await self._client.get(
            self._path,
            params={"per_page": JOBS_PAGE_SIZE, "page": request.page_number},
        )
        response.raise_for_status()
        data = response.json()
        items = [JobRecord.model_validate(job) for job in data.get("jobs", [])]
        logger.debug(
            "jobs_page_fetched",
            page=request.page_number,
            count=len(items),
            total_count=data.get("total_count"),
        )
        return PageResponse(items=items)


def build_http_client(
    api_url: str,
    token: str,
    timeout: float = 30.0,
) -> httpx.AsyncClient:
    """Build an authenticated httpx client for the GitHub REST API."""
    return httpx.AsyncClient(
        base_url=api_url,
        timeout=timeout,
        headers={
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        },
    )
