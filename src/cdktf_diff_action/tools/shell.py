"""Shell command execution with combined output capture."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import TextIO

import structlog

from cdktf_diff_core.models.result import CommandResult

logger = structlog.get_logger()

# Longest single output line the reader accepts
LINE_LIMIT_BYTES = 1024 * 1024


class ShellCommandRunner:
    """Run a command line through the shell, never raising on non-zero exit.

    Output is echoed line by line to the job log as it arrives, the way
    ``tee`` would, and also returned in full.
    """

    def __init__(
        self,
        timeout_seconds: float | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize with an optional wall-clock limit and the echo stream."""
        self._timeout = timeout_seconds
        self._stream = stream

    async def execute(self, command: str, cwd: Path) -> CommandResult:
        """Run command in cwd and return its exit code and stdout+stderr text.

        Spawn failures and timeouts propagate. On timeout the process is killed.
        """
        logger.info("command_start", command=command, cwd=str(cwd))
        process = await asyncio.create_subprocess_shell(
            command,
            cwd=str(cwd),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
            limit=LINE_LIMIT_BYTES,
        )
        chunks: list[str] = []
        try:
            await asyncio.wait_for(self._tee(process, chunks), timeout=self._timeout)
        except BaseException:
            if process.returncode is None:
                process.kill()
                await process.wait()
            raise

        output = "".join(chunks)
        exit_code = process.returncode if process.returncode is not None else -1
        logger.info("command_finished", exit_code=exit_code, output_length=len(output))
        return CommandResult(exit_code=exit_code, output=output)

    async def _tee(self, process: asyncio.subprocess.Process, chunks: list[str]) -> None:
        """Copy each output line to the echo stream and into chunks."""
        stream = self._stream or sys.stdout
        assert process.stdout is not None
        while True:
            line = await process.stdout.readline()
            if not line:
                break
            text = line.decode("utf-8", errors="replace")
            chunks.append(text)
            stream.write(text)
            stream.flush()
        await process.wait()
