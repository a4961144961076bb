"""Global test fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep the developer's YTAUTH_* env vars and .env file out of Config()."""
    for key in list(os.environ):
        if key.startswith("YTAUTH_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
