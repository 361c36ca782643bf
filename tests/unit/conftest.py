"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tests.mocks.mock_settings import make_context, make_settings


@pytest.fixture
def mock_settings(tmp_path: Path) -> MagicMock:
    """Return a MagicMock Settings rooted in a temporary working directory."""
    return make_settings(working_directory=tmp_path)


@pytest.fixture
def mock_context() -> MagicMock:
    """Return a MagicMock GitHubContext with no outputs file."""
    return make_context()


@pytest.fixture
def raw_output_dir(tmp_path: Path) -> Path:
    """Return a temporary directory for captured raw diff output."""
    d = tmp_path / "tmp"
    d.mkdir()
    return d
