"""Tests for Settings and GitHubContext configuration."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from cdktf_diff_core.config.settings import GitHubContext, Settings
from cdktf_diff_core.exceptions import GitHubContextError


def _base_env() -> dict[str, str]:
    """Return the required action inputs."""
    return {
        "INPUT_GITHUB_TOKEN": "ghs_test",
        "INPUT_JOB_NAME": "diff (my-stack)",
        "INPUT_OUTPUT_FILENAME": "result.json",
        "INPUT_STACK": "my-stack",
    }


@pytest.mark.unit
class TestSettings:
    """Test Settings validation and defaults."""

    def test_default_settings(self) -> None:
        """Settings loads with required inputs and correct defaults."""
        with patch.dict(os.environ, _base_env(), clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.github_token.get_secret_value() == "ghs_test"
        assert s.working_directory == Path("./")
        assert s.terraform_version == "1.8.0"
        assert s.skip_synth is False
        assert s.stub_output_file is None
        assert s.log_format == "console"

    def test_output_path(self) -> None:
        """output_path joins working directory and filename."""
        env = {**_base_env(), "INPUT_WORKING_DIRECTORY": "infra"}
        with patch.dict(os.environ, env, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.output_path == Path("infra/result.json")

    def test_blank_optional_inputs_are_unset(self) -> None:
        """Inputs GitHub passes as empty strings fall back to defaults."""
        env = {
            **_base_env(),
            "INPUT_STUB_OUTPUT_FILE": "",
            "INPUT_SKIP_SYNTH": "",
            "INPUT_DIFF_TIMEOUT_SECONDS": " ",
        }
        with patch.dict(os.environ, env, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.stub_output_file is None
        assert s.skip_synth is False
        assert s.diff_timeout_seconds is None

    def test_skip_synth_true(self) -> None:
        """The string 'true' enables skip_synth."""
        env = {**_base_env(), "INPUT_SKIP_SYNTH": "true"}
        with patch.dict(os.environ, env, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.skip_synth is True

    def test_missing_job_name_raises(self) -> None:
        """job_name is required."""
        env = _base_env()
        del env["INPUT_JOB_NAME"]
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValidationError, match="job_name"):
                Settings(_env_file=None)  # type: ignore[call-arg]

    def test_token_not_leaked_in_repr(self) -> None:
        """The token is a secret."""
        with patch.dict(os.environ, _base_env(), clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert "ghs_test" not in repr(s)


@pytest.mark.unit
class TestGitHubContext:
    """Test workflow context parsing."""

    def test_splits_repository(self) -> None:
        """owner and repo come from GITHUB_REPOSITORY."""
        env = {"GITHUB_REPOSITORY": "octo/infra", "GITHUB_RUN_ID": "987"}
        with patch.dict(os.environ, env, clear=True):
            ctx = GitHubContext()  # type: ignore[call-arg]
        assert (ctx.owner, ctx.repo, ctx.run_id) == ("octo", "infra", 987)
        assert ctx.api_url == "https://api.github.com"
        assert ctx.output is None

    def test_reads_output_file(self) -> None:
        """GITHUB_OUTPUT is picked up as a path."""
        env = {
            "GITHUB_REPOSITORY": "octo/infra",
            "GITHUB_RUN_ID": "1",
            "GITHUB_OUTPUT": "/tmp/out",
            "GITHUB_API_URL": "https://ghe.example.com/api/v3",
        }
        with patch.dict(os.environ, env, clear=True):
            ctx = GitHubContext()  # type: ignore[call-arg]
        assert ctx.output == Path("/tmp/out")
        assert ctx.api_url == "https://ghe.example.com/api/v3"

    def test_malformed_repository_raises(self) -> None:
        """A slug without a slash is rejected when used."""
        env = {"GITHUB_REPOSITORY": "infra", "GITHUB_RUN_ID": "1"}
        with patch.dict(os.environ, env, clear=True):
            ctx = GitHubContext()  # type: ignore[call-arg]
        with pytest.raises(GitHubContextError, match="owner/repo"):
            _ = ctx.owner
