"""
History Manager for Undo/Redo

Keeps a bounded, linear log of full layer-stack snapshots:
- Every committed edit appends a snapshot and discards the redo branch
- Undo/redo move an index through the log
- The oldest snapshot is dropped once the limit is reached

"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import MAX_HISTORY
from ..enums import ActionType
from .layer import Layer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """One undoable state: the whole layer stack plus the active layer."""
    layers: Tuple[Layer, ...]
    active_layer_id: str
    action: ActionType

    def copy(self) -> "Snapshot":
        return Snapshot(tuple(layer.copy() for layer in self.layers), self.active_layer_id, self.action)


class HistoryManager:
    """Manages undo/redo history as a list of snapshots and a cursor into it"""

    def __init__(self, limit: int = MAX_HISTORY):
        """
        Initialize history manager

        Args:
            limit: Maximum number of snapshots kept (default 50)
                Older snapshots are automatically removed to save memory
        """
        if limit < 1:
            raise ValueError(f"History limit must be at least 1, got {limit}")
        self.limit = limit
        self.history: List[Snapshot] = []
        self.index = -1  # -1 = nothing recorded yet

    def record(self, layers, active_layer_id: str, action: ActionType) -> bool:
        """
        Save a new state after an edit

        Args:
            layers: The layer stack after the edit
            active_layer_id: Active layer after the edit
            action: What kind of edit produced this state

        Returns:
            bool: False if the state matched the current snapshot and was skipped
        """
        snapshot = Snapshot(tuple(layer.copy() for layer in layers), active_layer_id, action)

        if 0 <= self.index < len(self.history):
            current = self.history[self.index]
            if current.layers == snapshot.layers and current.active_layer_id == active_layer_id:
                logger.debug("History: skipped unchanged '%s' snapshot", action.value)
                return False

        # New action = can't redo old futures!
        del self.history[self.index + 1:]
        self.history.append(snapshot)

        if len(self.history) > self.limit:
            self.history.pop(0)  # Remove the oldest memory

        self.index = len(self.history) - 1
        logger.debug("History saved '%s'. Size: %d", action.value, len(self.history))
        return True

    def undo(self) -> Optional[Snapshot]:
        """
        Step back one snapshot

        Returns:
            Snapshot: Copy of the state to restore, or None if nothing to undo
        """
        if not self.can_undo():
            return None

        self.index -= 1
        return self.history[self.index].copy()

    def redo(self) -> Optional[Snapshot]:
        """
        Step forward one snapshot

        Returns:
            Snapshot: Copy of the state to restore, or None if nothing to redo
        """
        if not self.can_redo():
            return None

        self.index += 1
        return self.history[self.index].copy()

    def can_undo(self) -> bool:
        """Index 0 is the first recorded edit; there is no older state to return to"""
        return self.index > 0

    def can_redo(self) -> bool:
        return self.index < len(self.history) - 1

    def clear(self):
        self.history.clear()
        self.index = -1

    def __len__(self):
        return len(self.history)

    def get_stats(self) -> dict:
        """
        Get statistics about history usage

        Returns:
            dict: Statistics including undo/redo counts
        """
        return {
            'undo_count': max(self.index, 0),
            'redo_count': len(self.history) - 1 - self.index,
            'size': len(self.history),
            'limit': self.limit,
            'full': len(self.history) >= self.limit,
        }
