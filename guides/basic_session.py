"""Simple example walking the alert wizard with saved progress."""

from pathlib import Path

from wizflow import SelectionPersistence, WorkflowStateMachine, get_store, load_definition
from wizflow.progress import review_summary


def main():
    """Answer every step, then print progress and the review summary."""
    definition = load_definition(Path(__file__).parent / "alert_workflow.yaml")

    # Selections are written through to the configured store on every change
    session = WorkflowStateMachine(definition, SelectionPersistence(get_store()))

    session.choose("triggerStep", "Record created")
    session.go_to_next_step()
    session.choose("criteriaStep", "Company")
    session.go_to_next_step()
    session.select_all("criteriaStep2")
    session.toggle("criteriaStep2", "Vendor", checked=False)
    session.go_to_next_step()
    session.choose("actionStep", "Flag")
    session.go_to_next_step()

    for entry in session.progress():
        print(f"{entry.name}: {entry.status}")
    for name, values in review_summary(definition, session.workflow_selections):
        print(f"{name}: {', '.join(values)}")

    # Final submission drops the saved draft
    session.clear_persisted()


if __name__ == "__main__":
    main()
