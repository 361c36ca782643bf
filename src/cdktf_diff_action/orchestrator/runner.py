"""Orchestrate job resolution, the diff run, classification and result publishing."""

from __future__ import annotations

import shlex
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from cdktf_diff_action.classifier import classify
from cdktf_diff_action.observability import bind_job_context, clear_job_context
from cdktf_diff_action.resolver import resolve_job
from cdktf_diff_action.tools.github_jobs import GitHubJobsClient, build_http_client
from cdktf_diff_action.tools.github_outputs import GitHubOutputs
from cdktf_diff_action.tools.shell import ShellCommandRunner
from cdktf_diff_core.constants import DIFF_COMMAND, RAW_OUTPUT_FILENAME, SKIP_SYNTH_FLAG
from cdktf_diff_core.models.result import DiffOutputs, ResultCode

if TYPE_CHECKING:
    from cdktf_diff_core.config.settings import GitHubContext, Settings
    from cdktf_diff_core.interfaces import CommandRunner, PageFetcher

logger = structlog.get_logger()


def build_diff_command(settings: Settings) -> str:
    """Build the shell command line for the diff, or for replaying a stub file."""
    if settings.stub_output_file is not None:
        command = f"cat {shlex.quote(str(settings.stub_output_file))}"
    else:
        command = DIFF_COMMAND

    if settings.skip_synth:
        command += f" {SKIP_SYNTH_FLAG}"

    return f"{command} {shlex.quote(settings.stack)}"


class DiffRunner:
    """Runs cdktf diff for one stack and publishes the classified result."""

    def __init__(
        self,
        settings: Settings,
        context: GitHubContext,
        *,
        command_runner: CommandRunner | None = None,
        outputs: GitHubOutputs | None = None,
        raw_output_dir: Path | None = None,
    ) -> None:
        """Initialize with settings, run context and optional adapter overrides."""
        self.settings = settings
        self.context = context
        self._command_runner = command_runner or ShellCommandRunner(
            timeout_seconds=settings.diff_timeout_seconds
        )
        self._outputs = outputs or GitHubOutputs(context.output)
        self._raw_output_dir = raw_output_dir or Path(tempfile.gettempdir())

    async def run(self) -> DiffOutputs:
        """Resolve the job through the GitHub API, then diff and publish."""
        async with build_http_client(
            self.context.api_url,
            self.settings.github_token.get_secret_value(),
            timeout=self.settings.http_timeout_seconds,
        ) as client:
            fetcher = GitHubJobsClient(
                client,
                owner=self.context.owner,
                repo=self.context.repo,
                run_id=self.context.run_id,
            )
            return await self.run_with(fetcher)

    async def run_with(self, fetch_page: PageFetcher) -> DiffOutputs:
        """Run every step using the given job page source."""
        bind_job_context(self.settings.stack, self.settings.job_name)
        try:
            logger.info(
                "diff_run_start",
                ref=self.settings.ref or None,
                terraform_version=self.settings.terraform_version,
            )
            match = await resolve_job(fetch_page, self.settings.job_name)

            command = build_diff_command(self.settings)
            try:
                result = await self._command_runner.execute(
                    command, self.settings.working_directory
                )
            except Exception as exc:
                logger.error("diff_command_failed", error=str(exc), error_type=type(exc).__name__)
                self._publish(
                    DiffOutputs(
                        result_code=ResultCode.ERROR,
                        summary=str(exc) or type(exc).__name__,
                        job_id=str(match.job_id),
                        html_url=match.html_url,
                        stack=self.settings.stack,
                    )
                )
                raise
            self._save_raw_output(result.output)

            classification = classify(result.output, result.exit_code)
            logger.info(
                "diff_classified",
                result_code=classification.code.value,
                summary=classification.summary,
            )

            outputs = DiffOutputs(
                result_code=classification.code,
                summary=classification.summary,
                job_id=str(match.job_id),
                html_url=match.html_url,
                stack=self.settings.stack,
            )
            self._publish(outputs)
            return outputs
        finally:
            clear_job_context()

    def _save_raw_output(self, output: str) -> Path:
        """Keep the uncleaned output for later inspection."""
        path = self._raw_output_dir / RAW_OUTPUT_FILENAME
        path.write_text(output, encoding="utf-8")
        logger.debug("raw_output_saved", path=str(path))
        return path

    def _publish(self, outputs: DiffOutputs) -> None:
        """Set step outputs and write the JSON result record."""
        for name, value in outputs.model_dump(mode="json").items():
            self._outputs.set_output(name, value)

        path = self.settings.output_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(outputs.model_dump_json(), encoding="utf-8")
        logger.info("result_record_written", path=str(path))
