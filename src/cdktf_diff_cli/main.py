"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
from pathlib import Path

import structlog
import typer
from rich.console import Console

from cdktf_diff_action.classifier import classify
from cdktf_diff_action.observability import configure_logging
from cdktf_diff_action.orchestrator.runner import DiffRunner
from cdktf_diff_action.tools.github_outputs import GitHubOutputs
from cdktf_diff_core.config.settings import GitHubContext, Settings
from cdktf_diff_core.models.result import ResultCode

app = typer.Typer(
    name="cdktf-diff",
    help="Run cdktf diff and publish a structured result",
)
console = Console(stderr=True)
logger = structlog.get_logger()


@app.command()
def run(
    stack: str | None = typer.Option(None, "--stack", help="Override the stack input"),
    skip_synth: bool = typer.Option(False, "--skip-synth", help="Skip synthesis"),
    stub_output_file: Path | None = typer.Option(
        None, "--stub-output-file", help="Replay this file instead of running cdktf diff"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Resolve the current job, run the diff and publish its result."""
    reporter = GitHubOutputs(output_file=None)
    try:
        settings = Settings()  # type: ignore[call-arg]
        context = GitHubContext()  # type: ignore[call-arg]
    except Exception as exc:
        reporter.set_failed(f"Invalid action configuration: {exc}")
        raise typer.Exit(code=1) from exc

    if stack:
        settings.stack = stack
    if skip_synth:
        settings.skip_synth = True
    if stub_output_file is not None:
        settings.stub_output_file = stub_output_file
    if verbose:
        settings.log_level = "DEBUG"

    configure_logging(settings)

    try:
        outputs = asyncio.run(DiffRunner(settings, context).run())
    except Exception as exc:
        logger.error("diff_run_failed", error=str(exc), error_type=type(exc).__name__)
        reporter.set_failed(str(exc))
        raise typer.Exit(code=1) from exc

    console.print(f"[bold]Summary of diff:[/bold] {outputs.summary}")
    if outputs.result_code == ResultCode.ERROR:
        reporter.set_failed(outputs.summary)
        raise typer.Exit(code=1)


@app.command(name="classify")
def classify_file(
    path: Path = typer.Argument(..., help="File holding captured diff output", exists=True),
    exit_code: int | None = typer.Option(
        None, "--exit-code", help="Exit code of the process that produced the output"
    ),
) -> None:
    """Classify previously captured diff output and print the result as JSON."""
    result = classify(path.read_text(encoding="utf-8", errors="replace"), exit_code)
    typer.echo(result.model_dump_json())


@app.command()
def version() -> None:
    """Show version."""
    typer.echo("cdktf-diff v0.1.0")


if __name__ == "__main__":
    app()
