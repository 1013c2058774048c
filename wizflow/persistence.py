"""Load/save/clear adapter for the persisted selections snapshot.

Persistence failures must never interrupt an interactive session, so every
operation here logs and degrades instead of raising.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

from .contracts import WorkflowSelections, dump_selections, parse_selections
from .storage import InMemoryStore, KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "workflowSelections"


class SelectionPersistence:
    """Serialize the whole selections map into one key of a store."""

    def __init__(
        self, store: Optional[KeyValueStore] = None, key: str = DEFAULT_STORAGE_KEY
    ) -> None:
        self.store = store if store is not None else InMemoryStore()
        self.key = key

    def save(self, selections: WorkflowSelections) -> None:
        try:
            payload = json.dumps(dump_selections(selections))
            self.store.set(self.key, payload)
        except Exception as e:
            logger.error(f"Error saving workflow selections under '{self.key}': {e}")
            return
        logger.info(f"Workflow selections saved under '{self.key}'")

    def load(self) -> Optional[WorkflowSelections]:
        """Return the stored selections, or ``None`` when absent or unreadable."""
        try:
            payload = self.store.get(self.key)
        except Exception as e:
            logger.error(f"Error loading workflow selections from '{self.key}': {e}")
            return None

        if payload is None:
            logger.debug(f"No saved workflow selections under '{self.key}'")
            return None

        try:
            return parse_selections(json.loads(payload))
        except Exception as e:
            logger.warning(f"Discarding corrupt workflow selections under '{self.key}': {e}")
            return None

    def clear(self) -> None:
        try:
            self.store.delete(self.key)
        except Exception as e:
            logger.error(f"Error clearing workflow selections under '{self.key}': {e}")
            return
        logger.info(f"Workflow selections cleared from '{self.key}'")
