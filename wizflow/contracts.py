"""Core data contracts for wizflow workflows."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)


class Category(BaseModel):
    """A selectable option within a step."""

    name: str
    text: Optional[str] = None


class Step(BaseModel):
    """One stage of the wizard."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    prompt: str = ""
    sub_prompt: Optional[str] = Field(default=None, alias="subPrompt")
    categories: List[Category] = Field(default_factory=list)
    select_all: bool = Field(default=False, alias="selectAll")
    sub_step: bool = Field(default=False, alias="subStep")

    @property
    def is_multi_select(self) -> bool:
        return self.select_all


class WorkflowDefinition(BaseModel):
    """Read-only description of a wizard: ordered steps plus sub-step wiring.

    ``sub_step_parents`` maps each sub-step id to the id of the step it is
    rolled into. When omitted, every ``sub_step`` is attached to the nearest
    preceding ordinary step. ``review_step_id`` defaults to the last step.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    steps: List[Step] = Field(default_factory=list)
    sub_step_parents: Dict[str, str] = Field(
        default_factory=dict, alias="subStepParents"
    )
    review_step_id: Optional[str] = Field(default=None, alias="reviewStepId")

    @model_validator(mode="after")
    def _derive_wiring(self) -> "WorkflowDefinition":
        if not self.sub_step_parents:
            parents: Dict[str, str] = {}
            parent: Optional[str] = None
            for step in self.steps:
                if not step.sub_step:
                    parent = step.id
                elif parent is not None:
                    parents[step.id] = parent
                else:
                    logger.warning(f"Sub-step {step.id} has no preceding parent step")
            self.sub_step_parents = parents
        if self.review_step_id is None and self.steps:
            self.review_step_id = self.steps[-1].id
        return self

    def index_of(self, step_id: str) -> int:
        """Return the original index of ``step_id`` or ``-1`` when unknown."""
        for index, step in enumerate(self.steps):
            if step.id == step_id:
                return index
        return -1

    def get_step(self, step_id: str) -> Step:
        """Return the step with ``step_id``; raise ``KeyError`` when unknown."""
        index = self.index_of(step_id)
        if index < 0:
            raise KeyError(f"Unknown step: {step_id}")
        return self.steps[index]

    def parent_of(self, step_id: str) -> Optional[str]:
        return self.sub_step_parents.get(step_id)

    def sub_steps_of(self, step_id: str) -> List[str]:
        """Ids of the sub-steps rolled into ``step_id``, in definition order."""
        return [
            step.id
            for step in self.steps
            if self.sub_step_parents.get(step.id) == step_id
        ]


class SingleChoice(BaseModel):
    """Radio-style answer: exactly one category."""

    model_config = ConfigDict(extra="forbid")

    name: str
    text: str
    completed: bool = True

    @model_validator(mode="before")
    @classmethod
    def _default_text(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("text") is None and "name" in data:
            data = {**data, "text": data["name"]}
        return data


class MultiChoice(BaseModel):
    """Checkbox-style answer: an ordered set of category names."""

    model_config = ConfigDict(extra="forbid")

    types: List[str] = Field(default_factory=list)
    completed: bool = False

    @field_validator("types")
    @classmethod
    def _unique_types(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(v))


SelectionRecord = Union[SingleChoice, MultiChoice]
WorkflowSelections = Dict[str, SelectionRecord]


def parse_selection_record(data: Any) -> SelectionRecord:
    """Build the record variant matching the shape of ``data``.

    Raises:
        ValueError: If ``data`` fits neither variant.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Selection record must be an object, got {type(data).__name__}")
    if "types" in data:
        return MultiChoice.model_validate(data)
    if "name" in data:
        return SingleChoice.model_validate(data)
    raise ValueError("Selection record has neither 'types' nor 'name'")


def parse_selections(data: Any) -> WorkflowSelections:
    """Decode a ``{step_id: record}`` mapping."""
    if not isinstance(data, dict):
        raise ValueError(f"Selections must be an object, got {type(data).__name__}")
    return {str(step_id): parse_selection_record(raw) for step_id, raw in data.items()}


def dump_selections(selections: WorkflowSelections) -> Dict[str, Dict[str, Any]]:
    """Encode selections into the plain JSON layout."""
    return {step_id: record.model_dump() for step_id, record in selections.items()}
