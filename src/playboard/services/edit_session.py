"""Pointer-driven drag editing.

The session is either idle or dragging one handle of one entity. A drag
starts on a pointer-down that hits something, mutates that entity on every
pointer-move and ends on pointer-up or when the pointer leaves the board.
History is snapshotted once, when the drag starts.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Tuple

from playboard.config import DEFAULT_SETTINGS, ZONE_MIN_RADIUS, BoardSettings
from playboard.models import Arrow, Ball, Entity, Handle, Pick, Player, SceneStore, Zone, anchor_of
from playboard.services.history import HistoryManager
from playboard.services.hit_testing import Hit, hit_test
from playboard.utils import distance

logger = logging.getLogger(__name__)


class DragState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class EditSession:
    def __init__(
        self,
        store: SceneStore,
        history: Optional[HistoryManager] = None,
        settings: BoardSettings = DEFAULT_SETTINGS,
    ) -> None:
        self.store = store
        self.history = history
        self.settings = settings
        self._target: Optional[Entity] = None
        self._handle: Handle = Handle.NONE
        self._offset: Tuple[float, float] = (0.0, 0.0)

    @property
    def state(self) -> DragState:
        return DragState.DRAGGING if self._target is not None else DragState.IDLE

    @property
    def dragging(self) -> bool:
        return self._target is not None

    @property
    def target(self) -> Optional[Entity]:
        return self._target

    @property
    def handle(self) -> Handle:
        return self._handle

    @property
    def offset(self) -> Tuple[float, float]:
        return self._offset

    # ---------- Pointer handlers ----------
    def pointer_down(self, x: float, y: float) -> bool:
        """Start a drag if something is under the pointer. Returns True if a drag began."""
        if self._target is not None:
            return False
        hit = hit_test(self.store.document, (x, y), self.settings)
        if hit is None:
            return False
        self._begin(hit, x, y)
        return True

    def pointer_move(self, x: float, y: float) -> bool:
        if self._target is None:
            return False
        self._apply(x, y)
        self.store.notify()
        return True

    def pointer_up(self) -> None:
        self._end()

    def pointer_leave(self) -> None:
        self._end()

    # ---------- Internals ----------
    def _begin(self, hit: Hit, x: float, y: float) -> None:
        if self.history is not None:
            self.history.snapshot_before_change()
        ax, ay = anchor_of(hit.entity, hit.handle)
        self._target = hit.entity
        self._handle = hit.handle
        self._offset = (ax - x, ay - y)
        logger.debug("Drag started on %s (%s)", type(hit.entity).__name__, hit.handle.value)

    def _end(self) -> None:
        if self._target is not None:
            logger.debug("Drag ended on %s", type(self._target).__name__)
        self._target = None
        self._handle = Handle.NONE
        self._offset = (0.0, 0.0)

    def _apply(self, x: float, y: float) -> None:
        target = self._target
        handle = self._handle
        nx = x + self._offset[0]
        ny = y + self._offset[1]

        if isinstance(target, (Player, Ball)):
            target.move_to(nx, ny)
        elif isinstance(target, Zone):
            if handle == Handle.EDGE:
                target.radius = max(ZONE_MIN_RADIUS, distance((x, y), target.center))
            else:
                target.move_to(nx, ny)
        elif isinstance(target, (Arrow, Pick)):
            if handle == Handle.START:
                target.set_start(nx, ny)
            elif handle == Handle.END:
                target.set_end(nx, ny)
            elif handle == Handle.CONTROL:
                target.set_control((nx, ny))
            elif handle == Handle.CENTER and isinstance(target, Pick):
                target.translate(nx - target.x1, ny - target.y1)
