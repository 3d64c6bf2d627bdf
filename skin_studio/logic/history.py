"""
History Manager for Undo

- Saves a snapshot of every layer at the start of each action
- Restores all layers at once on undo (no partial restore)
- Limits history to prevent memory overflow; oldest states go first

"""

import logging
from collections import deque

logger = logging.getLogger(__name__)


class HistoryManager:
    """Bounded undo stack of whole-store snapshots"""

    def __init__(self, layers, limit: int = 50):
        """
        Initialize history manager

        Args:
            layers: The LayerStore whose rasters are captured and restored
            limit: Maximum number of undo states (default 50)
                Older states are automatically removed to save memory
        """
        self.layers = layers
        self.limit = limit
        self.undo_stack = deque(maxlen=limit)  # full deque drops from the left

    def snapshot(self):
        """Capture every layer. Call once per user action, never mid-stroke."""
        evicting = len(self.undo_stack) == self.limit
        self.undo_stack.append(self.layers.snapshot())  # copies, never aliases
        logger.debug("History saved (%d/%d)%s", len(self.undo_stack), self.limit,
                     ", oldest evicted" if evicting else "")

    def undo(self) -> bool:
        """
        Undo last action

        Returns:
            bool: False if there was nothing to undo
        """
        if not self.undo_stack:
            return False

        self.layers.restore(self.undo_stack.pop())
        logger.debug("Undid action (%d left)", len(self.undo_stack))
        return True

    def clear(self):
        self.undo_stack.clear()

    def can_undo(self) -> bool:
        """Check if undo is available"""
        return len(self.undo_stack) > 0

    def __len__(self):
        return len(self.undo_stack)

    def get_stats(self) -> dict:
        """
        Get statistics about history usage

        Returns:
            dict: Undo count, limit and the memory held by snapshots
        """
        per_snapshot_mb = self.layers.get_memory_size()
        return {
            'undo_count': len(self.undo_stack),
            'limit': self.limit,
            'undo_full': len(self.undo_stack) >= self.limit,
            'memory_mb': per_snapshot_mb * len(self.undo_stack),
        }
