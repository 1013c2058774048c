"""Settings for where wizard drafts are stored.

Values come from a YAML file (``WIZFLOW_CONFIG`` or ``wizflow.yaml``) and
are then overridden by ``WIZFLOW_STORAGE``, ``WIZFLOW_STORAGE_PATH`` and
``WIZFLOW_STORAGE_KEY``. Overrides go through the same validation as the
file, so an unknown backend name is rejected when the config is loaded.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel

StorageBackend = Literal["inmemory", "file", "sqlite", "redis"]

_ENV_OVERRIDES = {
    "WIZFLOW_STORAGE": ("storage", "backend"),
    "WIZFLOW_STORAGE_PATH": ("storage", "path"),
    "WIZFLOW_STORAGE_KEY": (None, "storage_key"),
}


class RedisConfig(BaseModel):
    """Connection settings for drafts kept in Redis."""

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: Optional[str] = None


class StorageConfig(BaseModel):
    """Backend holding the selections snapshot.

    ``path`` is a directory for the file backend and either a directory or a
    ``.db`` file for sqlite.
    """

    backend: StorageBackend = "file"
    path: str = "~/.wizflow"
    redis: RedisConfig = RedisConfig()


class WizflowConfig(BaseModel):
    storage: StorageConfig = StorageConfig()
    storage_key: str = "workflowSelections"


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    for env_name, (section, field) in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if not value:
            continue
        if env_name == "WIZFLOW_STORAGE":
            value = value.lower()
        if section is None:
            data[field] = value
        else:
            data[section] = {**(data.get(section) or {}), field: value}
    return data


def load_config(path: Optional[str] = None) -> WizflowConfig:
    """Load configuration from YAML file plus environment overrides.

    Args:
        path: Optional path to config file. Falls back to WIZFLOW_CONFIG env
            variable or 'wizflow.yaml' in the current directory.

    Raises:
        pydantic.ValidationError: If the file or an override holds an
            invalid value, such as an unknown storage backend.
    """

    config_path = path or os.getenv("WIZFLOW_CONFIG", "wizflow.yaml")
    data: Dict[str, Any] = {}
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    return WizflowConfig.model_validate(_apply_env_overrides(data))
