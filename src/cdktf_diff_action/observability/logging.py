"""Structured logging for the diff action.

Log events go to stderr. Stdout is left to the diff output that the shell
runner echoes, so the job log shows the plan itself between the events.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from typing import TYPE_CHECKING

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

if TYPE_CHECKING:
    from cdktf_diff_core.config.settings import Settings

# Set by GitHub Actions and most other CI runners
CI_ENV_VARS = ("CI", "GITHUB_ACTIONS")


def configure_logging(
    settings: Settings,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Configure structlog with JSON or console rendering on stderr.

    Console colors are disabled on CI runners and when NO_COLOR is set,
    since escape codes only clutter the web log view.
    """
    env = os.environ if environ is None else environ
    shared_processors: list[structlog.types.Processor] = [
        merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=use_colors(env))

    level = _resolve_level(settings.log_level)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Per-request jobs API lines add nothing over jobs_page_fetched
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def use_colors(environ: Mapping[str, str]) -> bool:
    """Whether console output may carry ANSI colors."""
    if "NO_COLOR" in environ:
        return False
    return not any(environ.get(name, "").lower() in ("1", "true") for name in CI_ENV_VARS)


def bind_job_context(stack: str, job_name: str) -> None:
    """Tag all subsequent log entries with the stack and job being diffed."""
    bind_contextvars(stack=stack, job_name=job_name)


def clear_job_context() -> None:
    """Clear all bound context variables."""
    clear_contextvars()


def _resolve_level(level_name: str) -> int:
    """Convert a level name such as 'debug' to a logging level, defaulting to INFO."""
    return logging.getLevelNamesMapping().get(level_name.upper(), logging.INFO)
