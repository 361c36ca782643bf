"""Tests for shell command execution."""

from __future__ import annotations

import asyncio
import io
from pathlib import Path

import pytest

from cdktf_diff_action.tools.shell import ShellCommandRunner


@pytest.mark.unit
class TestShellCommandRunner:
    """Test output capture and exit handling with real subprocesses."""

    @pytest.mark.asyncio
    async def test_captures_stdout_and_stderr(self, tmp_path: Path) -> None:
        """stderr is merged into the captured output."""
        runner = ShellCommandRunner()
        result = await runner.execute("echo out; echo err 1>&2", tmp_path)
        assert result.exit_code == 0
        assert "out" in result.output
        assert "err" in result.output

    @pytest.mark.asyncio
    async def test_nonzero_exit_does_not_raise(self, tmp_path: Path) -> None:
        """A failing command returns its exit code and output."""
        runner = ShellCommandRunner()
        result = await runner.execute("echo 'Error: nope'; exit 3", tmp_path)
        assert result.exit_code == 3
        assert result.output.strip() == "Error: nope"

    @pytest.mark.asyncio
    async def test_runs_in_working_directory(self, tmp_path: Path) -> None:
        """Relative paths resolve against cwd."""
        (tmp_path / "stub.txt").write_text("Plan: 1 to add, 0 to change, 0 to destroy.\n")
        runner = ShellCommandRunner()
        result = await runner.execute("cat stub.txt", tmp_path)
        assert result.output == "Plan: 1 to add, 0 to change, 0 to destroy.\n"

    @pytest.mark.asyncio
    async def test_preserves_ansi_sequences(self, tmp_path: Path) -> None:
        """Raw output is returned uncleaned."""
        runner = ShellCommandRunner()
        result = await runner.execute(r"printf '\033[32mok\033[0m'", tmp_path)
        assert result.output == "\x1b[32mok\x1b[0m"

    @pytest.mark.asyncio
    async def test_timeout_propagates(self, tmp_path: Path) -> None:
        """A command past its timeout is killed and the timeout surfaces."""
        runner = ShellCommandRunner(timeout_seconds=0.2)
        with pytest.raises(asyncio.TimeoutError):
            await runner.execute("exec sleep 5", tmp_path)

    @pytest.mark.asyncio
    async def test_missing_cwd_raises(self, tmp_path: Path) -> None:
        """Spawn failures are not converted into a result."""
        runner = ShellCommandRunner()
        with pytest.raises(OSError):
            await runner.execute("true", tmp_path / "missing")

    @pytest.mark.asyncio
    async def test_echoes_output_to_job_log(
        self, tmp_path: Path, capfd: pytest.CaptureFixture[str]
    ) -> None:
        """Command output reaches stdout as well as the returned result."""
        (tmp_path / "stub.txt").write_text(
            '  + resource "aws_s3_bucket" "logs" {\n'
            "Plan: 1 to add, 0 to change, 0 to destroy.\n"
        )
        runner = ShellCommandRunner()
        result = await runner.execute("cat stub.txt; echo 'Error: late' 1>&2", tmp_path)

        captured = capfd.readouterr()
        assert 'aws_s3_bucket" "logs"' in captured.out
        assert "Plan: 1 to add, 0 to change, 0 to destroy." in captured.out
        assert "Error: late" in captured.out
        assert "aws_s3_bucket" in result.output

    @pytest.mark.asyncio
    async def test_echo_stream_receives_lines_in_order(self, tmp_path: Path) -> None:
        """An injected stream sees every line, unterminated tail included."""
        stream = io.StringIO()
        runner = ShellCommandRunner(stream=stream)
        result = await runner.execute("printf 'one\\ntwo\\nthree'", tmp_path)

        assert stream.getvalue() == "one\ntwo\nthree"
        assert result.output == stream.getvalue()
