"""
Shared fixtures for cistools tests.
"""

import pytest

from cistools.core.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Run every test with cached settings cleared and no CISTOOLS_ environment."""
    monkeypatch.delenv("CISTOOLS_PASSWORD_LENGTH", raising=False)
    monkeypatch.delenv("CISTOOLS_URL_TOKEN_LENGTH", raising=False)
    reset_settings()
    yield
    reset_settings()
