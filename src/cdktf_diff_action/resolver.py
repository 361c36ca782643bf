"""Resolve the running workflow job by name across paginated results."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from cdktf_diff_core.constants import JOBS_PAGE_SIZE
from cdktf_diff_core.exceptions import JobNotFoundError
from cdktf_diff_core.interfaces import PageFetcher
from cdktf_diff_core.models.job import JobMatch, JobRecord, PageRequest

logger = structlog.get_logger()


def find_job(records: Iterable[JobRecord], target_name: str) -> JobRecord | None:
    """Return the first record whose name equals target_name exactly."""
    for record in records:
        if record.name == target_name:
            return record
    return None


async def resolve_job(fetch_page: PageFetcher, target_name: str) -> JobMatch:
    """Walk pages from 1 until target_name is found or a short page ends the list.

    Raises JobNotFoundError when the last page holds no match. Errors raised
    by fetch_page propagate unchanged.
    """
    page_number = 1
    # No page ceiling: a source that always returns full pages never terminates.
    while True:
        response = await fetch_page(PageRequest(page_number=page_number))
        record = find_job(response.items, target_name)
        if record is not None:
            logger.info(
                "job_resolved",
                job_name=target_name,
                job_id=record.id,
                page=page_number,
            )
            return JobMatch.from_record(record)

        if len(response.items) < JOBS_PAGE_SIZE:
            break
        page_number += 1

    logger.warning("job_not_found", job_name=target_name, pages_scanned=page_number)
    raise JobNotFoundError(target_name)
