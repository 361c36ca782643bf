"""Publish step outputs and failures through GitHub Actions workflow commands."""

from __future__ import annotations

import sys
import uuid
from pathlib import Path
from typing import TextIO

import structlog

logger = structlog.get_logger()


class GitHubOutputs:
    """Writes step outputs to the $GITHUB_OUTPUT file.

    When no output file is configured (e.g. a local run) outputs are only logged.
    """

    def __init__(self, output_file: Path | None, stream: TextIO | None = None) -> None:
        """Initialize with the outputs file and the stream for workflow commands."""
        self._output_file = output_file
        self._stream = stream

    def set_output(self, name: str, value: str) -> None:
        """Append name=value using the heredoc form so values may span lines."""
        if self._output_file is None:
            logger.info("step_output", name=name, value=value)
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with self._output_file.open("a", encoding="utf-8") as fh:
            fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

    def set_failed(self, message: str) -> None:
        """Emit an ::error:: annotation for the step."""
        stream = self._stream or sys.stdout
        stream.write(f"::error::{escape_data(message)}\n")
        stream.flush()


def escape_data(value: str) -> str:
    """Escape a workflow command payload."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
