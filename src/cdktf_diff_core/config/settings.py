"""Application settings using pydantic-settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cdktf_diff_core.constants import DEFAULT_GITHUB_API_URL
from cdktf_diff_core.exceptions import GitHubContextError


class Settings(BaseSettings):
    """Action inputs, read from the INPUT_* variables GitHub Actions exports."""

    model_config = SettingsConfigDict(env_prefix="INPUT_", env_file=".env", extra="ignore")

    # --- Job lookup ---
    github_token: SecretStr = Field(
        description="GITHUB_TOKEN used to query the jobs API",
    )
    job_name: str = Field(
        description="jobs.<job-id>.name of the workflow job running the diff",
    )

    # --- Diff ---
    stack: str = Field(
        description="Full name of the CDKTF stack to diff",
    )
    ref: str = Field(
        default="",
        description="Ref (branch or sha) the diff runs against",
    )
    working_directory: Path = Field(
        default=Path("./"),
        description="Directory containing the cdktf code",
    )
    skip_synth: bool = Field(
        default=False,
        description="Assume synthesized Terraform code is present and up to date",
    )
    stub_output_file: Path | None = Field(
        default=None,
        description="When set, print this file instead of running cdktf diff",
    )
    terraform_version: str = Field(
        default="1.8.0",
        description="Terraform version the runner was provisioned with",
    )
    diff_timeout_seconds: float | None = Field(
        default=None,
        description="Kill the diff process after this many seconds",
    )

    # --- Output ---
    output_filename: str = Field(
        description="Name of the JSON file the result record is saved into",
    )

    # --- HTTP ---
    http_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout per jobs API request in seconds",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer",
    )

    @field_validator("stub_output_file", "diff_timeout_seconds", mode="before")
    @classmethod
    def blank_input_as_unset(cls, value: object) -> object:
        """Treat inputs the workflow left blank as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("skip_synth", mode="before")
    @classmethod
    def blank_skip_synth_as_false(cls, value: object) -> object:
        """Blank skip_synth means false."""
        if isinstance(value, str) and not value.strip():
            return False
        return value

    @property
    def output_path(self) -> Path:
        """Where the JSON result record is written."""
        return self.working_directory / self.output_filename


class GitHubContext(BaseSettings):
    """Workflow run context from the GITHUB_* default environment variables."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    repository: str = Field(description="owner/repo slug of the workflow repository")
    run_id: int = Field(description="ID of the current workflow run")
    api_url: str = Field(
        default=DEFAULT_GITHUB_API_URL,
        description="Base URL of the GitHub REST API",
    )
    output: Path | None = Field(
        default=None,
        description="File that step outputs are appended to",
    )

    @property
    def owner(self) -> str:
        """Repository owner."""
        return self._split_repository()[0]

    @property
    def repo(self) -> str:
        """Repository name."""
        return self._split_repository()[1]

    def _split_repository(self) -> tuple[str, str]:
        owner, sep, repo = self.repository.partition("/")
        if not sep or not owner or not repo:
            msg = f"GITHUB_REPOSITORY must look like owner/repo, got {self.repository!r}"
            raise GitHubContextError(msg)
        return owner, repo
