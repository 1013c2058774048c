"""Derived views over a workflow: visible steps, completion and navigability.

Everything here is a pure function of the definition, the selections and the
cursor. Nothing is cached, so results always reflect the latest selections.
"""

from __future__ import annotations

from typing import List, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel

from .contracts import MultiChoice, SelectionRecord, SingleChoice, Step, WorkflowDefinition


class ProgressEntry(BaseModel):
    """Status of one visible step in the progress indicator."""

    step_id: str
    name: str
    index: int
    visible_index: int
    status: Literal["current", "completed", "pending"]
    navigable: bool


def visible_steps(definition: WorkflowDefinition) -> List[Step]:
    return [step for step in definition.steps if not step.sub_step]


def highlighted_step_id(
    definition: WorkflowDefinition, current_index: int
) -> Optional[str]:
    """Id of the visible step to mark as current.

    A sub-step is highlighted through its parent.
    """
    if not 0 <= current_index < len(definition.steps):
        return None
    current = definition.steps[current_index]
    if current.sub_step:
        return definition.parent_of(current.id) or current.id
    return current.id


def _self_completed(selections: Mapping[str, SelectionRecord], step_id: str) -> bool:
    record = selections.get(step_id)
    return record is not None and record.completed is True


def is_step_completed(
    definition: WorkflowDefinition,
    selections: Mapping[str, SelectionRecord],
    step: Step,
) -> bool:
    """A step is completed when it and all of its sub-steps are completed."""
    if not _self_completed(selections, step.id):
        return False
    return all(
        _self_completed(selections, sub_id) for sub_id in definition.sub_steps_of(step.id)
    )


def all_prior_steps_completed(
    definition: WorkflowDefinition, selections: Mapping[str, SelectionRecord]
) -> bool:
    """Whether every visible step except the review step is completed."""
    return all(
        is_step_completed(definition, selections, step)
        for step in visible_steps(definition)
        if step.id != definition.review_step_id
    )


def is_navigable(
    definition: WorkflowDefinition,
    selections: Mapping[str, SelectionRecord],
    current_index: int,
    step: Step,
) -> bool:
    """Whether the caller should offer a direct jump to ``step``."""
    if definition.index_of(step.id) < current_index:
        return True
    if is_step_completed(definition, selections, step):
        return True
    return step.id == definition.review_step_id and all_prior_steps_completed(
        definition, selections
    )


def build_progress(
    definition: WorkflowDefinition,
    selections: Mapping[str, SelectionRecord],
    current_index: int,
) -> List[ProgressEntry]:
    highlighted = highlighted_step_id(definition, current_index)
    entries: List[ProgressEntry] = []
    for visible_index, step in enumerate(visible_steps(definition)):
        if step.id == highlighted:
            status = "current"
        elif is_step_completed(definition, selections, step):
            status = "completed"
        else:
            status = "pending"
        entries.append(
            ProgressEntry(
                step_id=step.id,
                name=step.name,
                index=definition.index_of(step.id),
                visible_index=visible_index,
                status=status,
                navigable=is_navigable(definition, selections, current_index, step),
            )
        )
    return entries


def is_next_disabled(
    definition: WorkflowDefinition,
    selections: Mapping[str, SelectionRecord],
    current_index: int,
) -> bool:
    """Footer rule for the forward button.

    The review step always allows moving on. Elsewhere a missing answer, an
    empty checkbox set or a blank radio name disables it.
    """
    if not 0 <= current_index < len(definition.steps):
        return True
    step = definition.steps[current_index]
    if step.id == definition.review_step_id:
        return False
    record = selections.get(step.id)
    if record is None:
        return True
    if isinstance(record, MultiChoice):
        return len(record.types) == 0
    return record.name == ""


def review_summary(
    definition: WorkflowDefinition, selections: Mapping[str, SelectionRecord]
) -> List[Tuple[str, List[str]]]:
    """Step names paired with the chosen values, skipping unanswered steps."""
    summary: List[Tuple[str, List[str]]] = []
    for step in definition.steps:
        if step.id == definition.review_step_id:
            continue
        record = selections.get(step.id)
        if isinstance(record, SingleChoice):
            summary.append((step.name, [record.text]))
        elif isinstance(record, MultiChoice) and record.types:
            summary.append((step.name, list(record.types)))
    return summary
