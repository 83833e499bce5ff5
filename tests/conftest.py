"""Shared pytest fixtures for timetraveller tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no TIMETRAVELLER_* env vars.

    Keeps a stray ``timetraveller.toml`` or exported default from leaking
    into settings resolution.
    """
    for key in list(os.environ):
        if key.startswith("TIMETRAVELLER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()
