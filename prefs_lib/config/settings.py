"""Storage configuration.

Settings live in a small YAML file so operators can switch between the
in-memory and file backends without code changes. The file is optional;
when it is missing every setting takes its default.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

DEFAULT_CONFIG_PATH = Path("data/config/storage_config.yml")
DEFAULT_FILE_PATH = "data/prefs/preferences.json"
CONFIG_ENV = "PREFS_STORAGE_CONFIG"
BACKEND_ENV = "PREFS_STORAGE_BACKEND"


@dataclass
class StorageSettings:
    backend: str = "memory"
    file_path: str = DEFAULT_FILE_PATH
    log_level: str = "WARNING"


def resolve_config_path(config_path: Optional[str | Path] = None) -> Path:
    """Return the config path to use: argument, then env var, then default."""
    if config_path:
        return Path(config_path)
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_settings(config_path: Optional[str | Path] = None) -> StorageSettings:
    """Load `StorageSettings` from YAML.

    - A missing file yields the defaults.
    - A file that fails to parse or does not hold a mapping raises
      `ValueError`.
    - `PREFS_STORAGE_BACKEND` overrides the configured backend.
    """
    path = resolve_config_path(config_path)
    data: Any = {}
    if path.exists():
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"invalid storage config {path}: parse error") from e
        if not isinstance(data, dict):
            raise ValueError(f"invalid storage config {path}: expected mapping")

    defaults = StorageSettings()
    settings = StorageSettings(
        backend=str(data.get("backend", defaults.backend)).lower(),
        file_path=str(data.get("file_path", defaults.file_path)),
        log_level=str(data.get("log_level", defaults.log_level)).upper(),
    )
    override = os.environ.get(BACKEND_ENV)
    if override:
        settings.backend = override.lower()
    return settings
