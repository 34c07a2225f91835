"""Linear undo/redo over whole-document snapshots."""
from __future__ import annotations

import logging
from typing import List, Optional

from playboard.models import SceneDocument, SceneStore

logger = logging.getLogger(__name__)


class HistoryManager:
    """
    Keeps undo and redo stacks of full scene snapshots for one store.

    Mutating commands call ``snapshot_before_change`` once before they touch
    the store. Any new snapshot discards the redo stack.
    """

    def __init__(self, store: SceneStore, limit: Optional[int] = None) -> None:
        self.store = store
        self.limit = limit
        self._undo: List[SceneDocument] = []
        self._redo: List[SceneDocument] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def depth(self) -> int:
        return len(self._undo)

    def snapshot_before_change(self) -> None:
        self._undo.append(self.store.snapshot())
        self._redo.clear()
        if self.limit is not None and len(self._undo) > self.limit:
            del self._undo[: len(self._undo) - self.limit]
        logger.debug("History snapshot taken (undo depth %d)", len(self._undo))

    def undo(self) -> bool:
        if not self._undo:
            return False
        self._redo.append(self.store.snapshot())
        self.store.restore(self._undo.pop())
        self.store.notify()
        return True

    def redo(self) -> bool:
        if not self._redo:
            return False
        self._undo.append(self.store.snapshot())
        self.store.restore(self._redo.pop())
        self.store.notify()
        return True

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
