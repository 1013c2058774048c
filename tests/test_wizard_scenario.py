"""End-to-end walk through the alert wizard."""

from wizflow import SelectionPersistence, WorkflowStateMachine
from wizflow.progress import is_navigable, is_step_completed, visible_steps
from wizflow.selection import is_select_all_satisfied, is_selected
from wizflow.storage import FileStore


def test_full_walk_through(definition, tmp_path):
    machine = WorkflowStateMachine(definition, SelectionPersistence(FileStore(tmp_path)))
    review = definition.get_step("review")
    criteria = definition.get_step("criteria")

    assert machine.next_disabled
    machine.choose("trigger", "A")
    assert not machine.next_disabled
    machine.go_to_next_step()

    machine.choose("criteria", "X")
    assert not is_step_completed(definition, machine.workflow_selections, criteria)
    machine.go_to_next_step()
    assert machine.progress()[1].status == "current"

    for category in definition.get_step("criteria2").categories:
        machine.toggle("criteria2", category.name)
    assert is_select_all_satisfied(
        machine.workflow_selections, definition.get_step("criteria2")
    )
    assert is_step_completed(definition, machine.workflow_selections, criteria)
    assert not is_navigable(
        definition, machine.workflow_selections, machine.current_step_index, review
    )
    machine.go_to_next_step()

    machine.choose("action", "Flag")
    assert is_navigable(
        definition, machine.workflow_selections, machine.current_step_index, review
    )
    assert "criteria2" not in [s.id for s in visible_steps(definition)]

    machine.go_to_next_step()
    assert machine.current_step_data.id == "review"
    assert "review" not in machine.workflow_selections
    assert not machine.next_disabled
    assert [e.status for e in machine.progress()] == [
        "completed",
        "completed",
        "completed",
        "current",
    ]

    resumed = WorkflowStateMachine(definition, SelectionPersistence(FileStore(tmp_path)))
    assert resumed.workflow_selections == machine.workflow_selections
    trigger = definition.get_step("trigger")
    assert is_selected(resumed.workflow_selections, "trigger", trigger.categories[0], False)

    machine.clear_persisted()
    fresh = WorkflowStateMachine(definition, SelectionPersistence(FileStore(tmp_path)))
    assert fresh.workflow_selections == {}


def test_cleared_checkboxes_still_count_as_touched(definition):
    machine = WorkflowStateMachine(definition)
    machine.choose("criteria", "Y")
    machine.toggle("criteria2", "X")
    machine.toggle("criteria2", "X", checked=False)
    criteria = definition.get_step("criteria")

    assert is_step_completed(definition, machine.workflow_selections, criteria)
    machine.go_to_step(2)
    assert machine.next_disabled
