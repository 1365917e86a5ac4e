"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os

import pytest

from caseconv.config import reset_settings, runtime


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against a clean environment and no .env defaults."""
    for name in list(os.environ):
        if name.startswith("CASECONV_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_FILE_VALUES", {})
    reset_settings()
    yield
    reset_settings()
