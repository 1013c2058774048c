"""Loading workflow definitions from disk."""

from __future__ import annotations

from pathlib import Path

import yaml

from .contracts import WorkflowDefinition


def load_definition(path: str | Path) -> WorkflowDefinition:
    """Read a workflow definition from a YAML or JSON file.

    JSON is a subset of YAML, so both go through ``yaml.safe_load``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the document is not a valid workflow definition.
    """
    with open(Path(path).expanduser(), encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Workflow definition in {path} must be a mapping")
    return WorkflowDefinition.model_validate(data)
