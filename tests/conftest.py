"""Shared pytest fixtures for attrlit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray attrlit.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ATTRLIT_CONFIG", raising=False)
