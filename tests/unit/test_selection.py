"""Selection codec tests."""

from wizflow.contracts import Category, MultiChoice, SingleChoice, Step
from wizflow.selection import (
    apply_checkbox_toggle,
    apply_select_all,
    is_select_all_satisfied,
    is_selected,
    value_to_store,
)


def _checkbox_step() -> Step:
    return Step(
        id="types",
        name="Types",
        select_all=True,
        categories=[Category(name="X"), Category(name="Y")],
    )


def test_radio_value_is_selected_and_others_are_not():
    chosen = Category(name="A")
    record = value_to_store(chosen, False)
    selections = {"trigger": record}

    assert is_selected(selections, "trigger", chosen, False)
    assert not is_selected(selections, "trigger", Category(name="B"), False)


def test_radio_value_falls_back_to_name_for_text():
    assert value_to_store(Category(name="Flag"), False) == SingleChoice(
        name="Flag", text="Flag", completed=True
    )
    rich = value_to_store(Category(name="Flag", text="Flag the record"), False)
    assert rich.text == "Flag the record"


def test_checkbox_value_is_bare_name():
    assert value_to_store(Category(name="X"), True) == "X"


def test_is_selected_tolerates_missing_and_mismatched_records():
    x = Category(name="X")
    assert not is_selected({}, "step", x, True)
    assert not is_selected({}, "step", x, False)
    # radio record queried as checkbox and vice versa
    assert not is_selected({"step": SingleChoice(name="X", text="X")}, "step", x, True)
    assert not is_selected({"step": MultiChoice(types=["X"])}, "step", x, False)


def test_checkbox_toggle_round_trip_keeps_completed():
    before = MultiChoice(types=["Y"], completed=True)
    on = apply_checkbox_toggle(before, "X", True)
    assert on.types == ["Y", "X"]

    off = apply_checkbox_toggle(on, "X", False)
    assert off.types == before.types
    assert off.completed is True


def test_checkbox_toggle_is_idempotent_and_starts_from_nothing():
    first = apply_checkbox_toggle(None, "X", True)
    again = apply_checkbox_toggle(first, "X", True)
    assert again.types == ["X"]
    assert again.completed is True


def test_checkbox_toggle_ignores_radio_record():
    record = apply_checkbox_toggle(SingleChoice(name="A", text="A"), "X", True)
    assert record == MultiChoice(types=["X"], completed=True)


def test_unchecking_last_entry_still_counts_as_completed():
    record = apply_checkbox_toggle(MultiChoice(types=["X"], completed=True), "X", False)
    assert record.types == []
    assert record.completed is True


def test_select_all_satisfied_requires_every_category():
    step = _checkbox_step()
    assert not is_select_all_satisfied({}, step)
    assert not is_select_all_satisfied({"types": MultiChoice(types=["X"])}, step)
    assert is_select_all_satisfied({"types": MultiChoice(types=["Y", "X"])}, step)


def test_select_all_satisfied_is_not_fooled_by_duplicates_or_extras():
    step = _checkbox_step()
    record = apply_checkbox_toggle(MultiChoice(types=["X"]), "X", True)
    assert not is_select_all_satisfied({"types": record}, step)
    extra = MultiChoice(types=["X", "Y", "Z"])
    assert not is_select_all_satisfied({"types": extra}, step)


def test_select_all_satisfied_false_for_radio_or_empty_steps():
    radio = Step(id="r", name="R", categories=[Category(name="X")])
    assert not is_select_all_satisfied({"r": MultiChoice(types=["X"])}, radio)
    empty = Step(id="e", name="E", select_all=True)
    assert not is_select_all_satisfied({"e": MultiChoice(types=[])}, empty)


def test_apply_select_all_checks_and_clears():
    step = _checkbox_step()
    assert apply_select_all(step, True) == MultiChoice(types=["X", "Y"], completed=True)
    assert apply_select_all(step, False) == MultiChoice(types=[], completed=True)
