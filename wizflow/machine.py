"""Workflow state machine: cursor, selections and write-through persistence."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .contracts import (
    Category,
    SelectionRecord,
    Step,
    WorkflowDefinition,
    WorkflowSelections,
)
from .persistence import SelectionPersistence
from .progress import ProgressEntry, build_progress, is_next_disabled
from .selection import apply_checkbox_toggle, apply_select_all, value_to_store

logger = logging.getLogger(__name__)


class WorkflowStateMachine:
    """Owns the cursor and the selections for one wizard session.

    The definition is shared read-only. Every selection change replaces the
    whole record for one step and is saved immediately through
    ``persistence``. Navigation is a bounded linear cursor; out-of-range
    targets are clamped, never rejected. Which jumps are sensible to offer is
    decided by :mod:`wizflow.progress`, not here.
    """

    def __init__(
        self,
        definition: WorkflowDefinition,
        persistence: Optional[SelectionPersistence] = None,
    ) -> None:
        if not definition.steps:
            raise ValueError(f"Workflow '{definition.name}' has no steps")
        self._definition = definition
        self._persistence = persistence or SelectionPersistence()
        self._current_step_index = 0
        self._selections: Dict[str, SelectionRecord] = self._persistence.load() or {}
        logger.debug(
            f"Started workflow '{definition.name}' with {len(self._selections)} saved selections"
        )

    # ------------------------------------------------------------------
    # Read-only state
    @property
    def workflow_data(self) -> WorkflowDefinition:
        return self._definition

    @property
    def total_steps(self) -> int:
        return len(self._definition.steps)

    @property
    def current_step_index(self) -> int:
        return self._current_step_index

    @property
    def current_step_data(self) -> Step:
        return self._definition.steps[self._current_step_index]

    @property
    def workflow_selections(self) -> WorkflowSelections:
        """Snapshot of the selections; mutating it does not affect the session."""
        return dict(self._selections)

    # ------------------------------------------------------------------
    # Navigation
    def go_to_step(self, step_index: int) -> None:
        self._current_step_index = min(max(0, step_index), self.total_steps - 1)

    def go_to_next_step(self) -> None:
        self.go_to_step(self._current_step_index + 1)

    def go_to_previous_step(self) -> None:
        self.go_to_step(self._current_step_index - 1)

    # ------------------------------------------------------------------
    # Mutation
    def update_step_selection(self, step_id: str, selection: SelectionRecord) -> None:
        """Replace the record for ``step_id`` and persist all selections."""
        self._selections = {**self._selections, step_id: selection}
        self._persistence.save(self._selections)

    def choose(self, step_id: str, category_name: str) -> None:
        """Radio selection of ``category_name`` on a single-select step."""
        step = self._definition.get_step(step_id)
        if step.select_all:
            raise ValueError(f"Step {step_id} is multi-select; use toggle()")
        record = value_to_store(self._category(step, category_name), False)
        self.update_step_selection(step_id, record)

    def toggle(self, step_id: str, category_name: str, checked: bool = True) -> None:
        """Check or uncheck ``category_name`` on a multi-select step."""
        step = self._definition.get_step(step_id)
        if not step.select_all:
            raise ValueError(f"Step {step_id} is single-select; use choose()")
        name = value_to_store(self._category(step, category_name), True)
        record = apply_checkbox_toggle(self._selections.get(step_id), name, checked)
        self.update_step_selection(step_id, record)

    def select_all(self, step_id: str, checked: bool = True) -> None:
        step = self._definition.get_step(step_id)
        if not step.select_all:
            raise ValueError(f"Step {step_id} is single-select")
        self.update_step_selection(step_id, apply_select_all(step, checked))

    @staticmethod
    def _category(step: Step, category_name: str) -> Category:
        for category in step.categories:
            if category.name == category_name:
                return category
        raise KeyError(f"Unknown category '{category_name}' for step {step.id}")

    # ------------------------------------------------------------------
    # Persistence checkpoints
    def save_and_finish_later(self) -> None:
        self._persistence.save(self._selections)

    def clear_persisted(self) -> None:
        """Drop the saved snapshot; in-memory cursor and selections are kept."""
        self._persistence.clear()

    clear_local_storage = clear_persisted

    # ------------------------------------------------------------------
    # Derived views
    def progress(self) -> List[ProgressEntry]:
        return build_progress(self._definition, self._selections, self._current_step_index)

    @property
    def next_disabled(self) -> bool:
        return is_next_disabled(
            self._definition, self._selections, self._current_step_index
        )
