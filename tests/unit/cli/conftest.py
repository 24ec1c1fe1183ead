"""Fixtures for CLI tests."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

import blickline.cli.main as cli_main


@pytest.fixture
def console_output(monkeypatch) -> StringIO:
    """Capture rich console output; leave root logging untouched."""
    buffer = StringIO()
    monkeypatch.setattr(cli_main, "console", Console(file=buffer, width=200))
    monkeypatch.setattr(cli_main, "configure_logging", lambda config: None)
    return buffer


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each CLI test where no default blickline.yaml exists."""
    monkeypatch.chdir(tmp_path)
