"""
Pytest configuration for formview tests.

Why: Rendering defaults come from FORMVIEW_* environment variables; clear them
so a developer's shell cannot change the expected markup. Force AnyIO to the
asyncio backend for the request glue tests.
"""
import os

import pytest


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _clear_formview_env(monkeypatch: pytest.MonkeyPatch):
    for name in list(os.environ):
        if name.startswith("FORMVIEW_"):
            monkeypatch.delenv(name, raising=False)
    yield
