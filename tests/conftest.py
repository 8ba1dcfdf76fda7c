"""Pytest configuration helpers for test collection.

Ensure the project root is on sys.path so tests can import the package
without requiring PYTHONPATH to be set externally, and give every test a
clean storage registry and shared memory backend.
"""
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    # Insert repo root (one level up from tests/) to sys.path
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture(autouse=True)
def fresh_storage_state(monkeypatch):
    from prefs_lib.config.settings import BACKEND_ENV, CONFIG_ENV, StorageSettings
    from prefs_lib.storage.memory_backend import MemoryBackend
    from prefs_lib.storage.registry import reset_registry

    monkeypatch.delenv(CONFIG_ENV, raising=False)
    monkeypatch.delenv(BACKEND_ENV, raising=False)
    MemoryBackend.set_initial_values({})
    reset_registry(StorageSettings())
    yield
    reset_registry()
