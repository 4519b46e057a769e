"""Root conftest — shared test configuration and record fixtures."""

import os

import pytest

ENV_PREFIX = "INDEXED_REGISTRY_"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Strip host INDEXED_REGISTRY_* variables and any .env in the cwd."""
    from indexed_registry.config import get_settings

    for key in list(os.environ):
        if key.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def tasks() -> list[dict]:
    return [
        {"id": 1, "kind": "bug", "priority": 3, "meta": {"owner": "ana"}},
        {"id": 2, "kind": "feature", "priority": 1, "meta": {"owner": "bo"}},
        {"id": 3, "kind": "bug", "priority": 2, "meta": {"owner": "ana"}},
    ]
