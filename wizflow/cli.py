"""Command line interface for inspecting and driving saved wizard sessions."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

import typer
import yaml

from wizflow import SelectionPersistence, WorkflowStateMachine, get_store, load_definition
from wizflow.config import load_config
from wizflow.progress import review_summary, visible_steps

app = typer.Typer(help="CLI for wizflow configuration wizards")

_STATUS_MARKERS = {"current": ">", "completed": "x", "pending": " "}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable logging"),
) -> None:
    """wizflow CLI entry point."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _persistence() -> SelectionPersistence:
    try:
        config = load_config()
        return SelectionPersistence(get_store(config=config), key=config.storage_key)
    except (OSError, ValueError, yaml.YAMLError, sqlite3.Error) as exc:
        typer.secho(f"Cannot open storage: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)


def _open_session(definition_path: Path) -> WorkflowStateMachine:
    try:
        definition = load_definition(definition_path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        typer.secho(f"Cannot load workflow {definition_path}: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    try:
        return WorkflowStateMachine(definition, _persistence())
    except ValueError as exc:
        typer.secho(f"Cannot start workflow {definition_path}: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)


def _apply(action, *args) -> None:
    try:
        action(*args)
    except (KeyError, ValueError) as exc:
        typer.secho(str(exc).strip("'\""), fg=typer.colors.RED)
        raise typer.Exit(code=1)


@app.command("steps")
def steps(definition_path: Path) -> None:
    """
    List the visible steps of a workflow and the sub-steps folded into them.

    Example:
        wizflow steps ./workflow.yaml
        # Output: 1. Trigger (triggerStep, single)
        #         2. Criteria (criteriaStep, single)
        #            + criteriaStep2
    """
    session = _open_session(definition_path)
    definition = session.workflow_data
    for position, step in enumerate(visible_steps(definition), start=1):
        mode = "multi" if step.select_all else "single"
        typer.echo(f"{position}. {step.name} ({step.id}, {mode})")
        for sub_id in definition.sub_steps_of(step.id):
            typer.echo(f"   + {sub_id}")


@app.command("status")
def status(
    definition_path: Path,
    step: int = typer.Option(0, help="Index of the step the user is on"),
) -> None:
    """
    Show progress for the saved selections.

    Each visible step is marked current (>), completed (x) or pending, and
    flagged when a direct jump to it would be offered.

    Example:
        wizflow status ./workflow.yaml --step 2
        # Output: [x] Trigger  (navigable)
        #         [>] Criteria  (navigable)
        #         [ ] Action
    """
    session = _open_session(definition_path)
    session.go_to_step(step)
    for entry in session.progress():
        marker = _STATUS_MARKERS[entry.status]
        suffix = "  (navigable)" if entry.navigable else ""
        typer.echo(f"[{marker}] {entry.name}{suffix}")
    current = session.current_step_data
    typer.echo(
        f"On: {current.name} - Next {'disabled' if session.next_disabled else 'enabled'}"
    )


@app.command("choose")
def choose(definition_path: Path, step_id: str, category: str) -> None:
    """Select ``category`` on a single-select step and save."""
    session = _open_session(definition_path)
    _apply(session.choose, step_id, category)
    typer.echo(f"{step_id}: {category}")


@app.command("toggle")
def toggle(
    definition_path: Path,
    step_id: str,
    category: str,
    off: bool = typer.Option(False, "--off", help="Uncheck instead of check"),
) -> None:
    """Check or uncheck ``category`` on a multi-select step and save."""
    session = _open_session(definition_path)
    _apply(session.toggle, step_id, category, not off)
    record = session.workflow_selections[step_id]
    typer.echo(f"{step_id}: {', '.join(record.types) or '(none)'}")


@app.command("select-all")
def select_all(
    definition_path: Path,
    step_id: str,
    off: bool = typer.Option(False, "--off", help="Clear every category"),
) -> None:
    """Check or clear every category on a multi-select step and save."""
    session = _open_session(definition_path)
    _apply(session.select_all, step_id, not off)
    record = session.workflow_selections[step_id]
    typer.echo(f"{step_id}: {', '.join(record.types) or '(none)'}")


@app.command("review")
def review(definition_path: Path) -> None:
    """Print the answers collected so far."""
    session = _open_session(definition_path)
    summary = review_summary(session.workflow_data, session.workflow_selections)
    if not summary:
        typer.echo("No selections saved.")
        return
    for name, values in summary:
        typer.echo(f"{name}: {', '.join(values)}")


@app.command("clear")
def clear() -> None:
    """Remove the saved selections snapshot."""
    _persistence().clear()
    typer.echo("Saved selections cleared.")


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    app()
