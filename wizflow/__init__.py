"""wizflow: persisted multi-step configuration wizards."""

from .contracts import (
    Category,
    MultiChoice,
    SelectionRecord,
    SingleChoice,
    Step,
    WorkflowDefinition,
    WorkflowSelections,
)
from .definition import load_definition
from .machine import WorkflowStateMachine
from .persistence import SelectionPersistence
from .storage import get_store

__version__ = "0.1.0"
__all__ = [
    "Category",
    "Step",
    "WorkflowDefinition",
    "SingleChoice",
    "MultiChoice",
    "SelectionRecord",
    "WorkflowSelections",
    "WorkflowStateMachine",
    "SelectionPersistence",
    "get_store",
    "load_definition",
]
