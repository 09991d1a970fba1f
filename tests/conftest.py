"""Shared pytest fixtures for the unreal-log-parser test suite."""

from __future__ import annotations

import os
from typing import Callable

import pytest

SAMPLE_LOG = os.path.join(os.path.dirname(__file__), "..", "logs", "sample.log")


@pytest.fixture()
def sample_log() -> str:
    """Path to the bundled sample Unreal log."""
    return SAMPLE_LOG


@pytest.fixture()
def write_log(tmp_path) -> Callable[[str], str]:
    """Return a helper that writes text to a temp log file and returns its path."""

    def _write(text: str, name: str = "test.log") -> str:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return str(path)

    return _write
