"""Pure helpers translating between category choices and stored records.

Radio steps store a :class:`SingleChoice`; checkbox (``select_all``) steps
store a :class:`MultiChoice` whose ``types`` list is kept free of duplicates.
None of the query helpers raise on missing or mismatched records.
"""

from __future__ import annotations

from typing import Mapping, Optional, Union

from .contracts import Category, MultiChoice, SelectionRecord, SingleChoice, Step


def is_selected(
    selections: Mapping[str, SelectionRecord],
    step_id: str,
    category: Category,
    is_multi_select: bool,
) -> bool:
    """Return ``True`` when ``category`` is part of the answer for ``step_id``."""
    record = selections.get(step_id)
    if is_multi_select:
        return isinstance(record, MultiChoice) and category.name in record.types
    return isinstance(record, SingleChoice) and record.name == category.name


def value_to_store(
    category: Category, is_multi_select: bool
) -> Union[SingleChoice, str]:
    """Value a click on ``category`` contributes to the stored answer.

    Radio steps get a complete record. Checkbox steps get the bare category
    name; the caller folds it into ``types`` via :func:`apply_checkbox_toggle`.
    """
    if is_multi_select:
        return category.name
    return SingleChoice(
        name=category.name,
        text=category.text or category.name,
        completed=True,
    )


def apply_checkbox_toggle(
    existing: Optional[SelectionRecord], category_name: str, checked: bool
) -> MultiChoice:
    """Return a new record with ``category_name`` added or removed."""
    current = list(existing.types) if isinstance(existing, MultiChoice) else []
    if checked:
        if category_name not in current:
            current.append(category_name)
    else:
        current = [name for name in current if name != category_name]
    return MultiChoice(types=current, completed=True)


def apply_select_all(step: Step, checked: bool) -> MultiChoice:
    """Record for the "Select all" checkbox: every category or none."""
    types = [category.name for category in step.categories] if checked else []
    return MultiChoice(types=types, completed=True)


def is_select_all_satisfied(
    selections: Mapping[str, SelectionRecord], step: Step
) -> bool:
    """Whether every category of a checkbox step is currently chosen."""
    if not step.select_all or not step.categories:
        return False
    record = selections.get(step.id)
    types = record.types if isinstance(record, MultiChoice) else []
    names = [category.name for category in step.categories]
    return len(types) == len(names) and all(name in types for name in names)
