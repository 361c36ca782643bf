"""Abstract command execution interface."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from cdktf_diff_core.models.result import CommandResult


@runtime_checkable
class CommandRunner(Protocol):
    """Runs a shell command line and captures its combined output."""

    async def execute(self, command: str, cwd: Path) -> CommandResult:
        """Run command in cwd. Must not raise on a non-zero exit status."""
        ...
