"""Shared fixtures: the five-step alert workflow used across the suite."""

from pathlib import Path

import pytest

from wizflow import Category, Step, WorkflowDefinition

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def definition_path() -> Path:
    return FIXTURES / "alert_workflow.yaml"


@pytest.fixture
def definition() -> WorkflowDefinition:
    """trigger -> criteria (+ criteria2 sub-step) -> action -> review."""
    return WorkflowDefinition(
        name="Scenario",
        steps=[
            Step(
                id="trigger",
                name="Trigger",
                prompt="Pick a trigger",
                categories=[Category(name="A"), Category(name="B")],
            ),
            Step(
                id="criteria",
                name="Criteria",
                prompt="Pick criteria",
                categories=[Category(name="X"), Category(name="Y")],
            ),
            Step(
                id="criteria2",
                name="Criteria types",
                prompt="Pick types",
                select_all=True,
                sub_step=True,
                categories=[Category(name="X"), Category(name="Y")],
            ),
            Step(
                id="action",
                name="Action",
                prompt="Pick an action",
                categories=[Category(name="Flag")],
            ),
            Step(id="review", name="Review", prompt="Review"),
        ],
    )


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Keep every test away from real config files and ~/.wizflow."""
    monkeypatch.setenv("WIZFLOW_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.setenv("WIZFLOW_STORAGE_PATH", str(tmp_path / "store"))
    monkeypatch.delenv("WIZFLOW_STORAGE", raising=False)
    monkeypatch.delenv("WIZFLOW_STORAGE_KEY", raising=False)
