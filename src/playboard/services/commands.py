"""Board commands issued by the toolbar, menus and keyboard shortcuts.

Every command that changes the board snapshots history exactly once before
mutating and notifies the store afterwards. Commands whose prerequisites are
missing do nothing and return False.
"""
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

from playboard.config import CURVE_BEND, DEFAULT_SETTINGS, HISTORY_LIMIT, BoardSettings
from playboard.models import (
    Arrow,
    ArrowStyle,
    Ball,
    Entity,
    Pick,
    Player,
    SceneDocument,
    SceneStore,
    Team,
    Zone,
    new_arrow,
    new_ball,
    new_pick,
    new_player,
    new_zone,
)
from playboard.services.edit_session import EditSession
from playboard.services.history import HistoryManager
from playboard.services.hit_testing import label_target_at
from playboard.services.layout_service import LayoutService
from playboard.utils import perpendicular_offset

logger = logging.getLogger(__name__)


class BoardController:
    """Owns one board: its store, history, drag session and persistence."""

    def __init__(
        self,
        store: Optional[SceneStore] = None,
        history: Optional[HistoryManager] = None,
        settings: BoardSettings = DEFAULT_SETTINGS,
        rng: Optional[random.Random] = None,
        layout_service: Optional[LayoutService] = None,
    ) -> None:
        self.store = store if store is not None else SceneStore()
        self.history = history if history is not None else HistoryManager(self.store, limit=HISTORY_LIMIT)
        self.settings = settings
        self.rng = rng
        self.layout_service = layout_service if layout_service is not None else LayoutService()
        self.session = EditSession(self.store, self.history, settings)

    @property
    def document(self) -> SceneDocument:
        return self.store.document

    def _commit(self) -> None:
        self.store.notify()

    # ---------- Entity creation ----------
    def add_player(self, team: Team) -> Player:
        team = Team(team)
        self.history.snapshot_before_change()
        index = len(self.store.players_of(team)) + 1
        player = self.store.add(new_player(team, index, self.rng))
        self._commit()
        return player

    def add_ball(self) -> Ball:
        self.history.snapshot_before_change()
        ball = self.store.add(new_ball(self.rng))
        self._commit()
        return ball

    def add_arrow(self, style: ArrowStyle = ArrowStyle.SOLID, curved: bool = False) -> Arrow:
        self.history.snapshot_before_change()
        arrow = self.store.add(new_arrow(ArrowStyle(style), self.rng, curved=curved))
        self._commit()
        return arrow

    def add_pick(self, between_players: bool = False) -> Optional[Pick]:
        """Add a pick marker, or a screen line joining the two most recent visible players."""
        if between_players:
            visible = [p for p in self.store.players if p.visible]
            if len(visible) < 2:
                logger.warning("Add pick needs two visible players, found %d", len(visible))
                return None
            start, end = visible[-2].position, visible[-1].position
            pick = new_pick(start=start, end=end)
        else:
            pick = new_pick(self.rng)
        self.history.snapshot_before_change()
        self.store.add(pick)
        self._commit()
        return pick

    def add_zone(self) -> Zone:
        self.history.snapshot_before_change()
        zone = self.store.add(new_zone(self.rng))
        self._commit()
        return zone

    # ---------- Editing ----------
    def clear_board(self) -> None:
        self.session.pointer_up()
        self.history.snapshot_before_change()
        self.store.clear()
        self._commit()

    def delete(self, entity: Entity) -> bool:
        if not self.store.contains(entity):
            return False
        self.history.snapshot_before_change()
        self.store.remove(entity)
        self._commit()
        return True

    def toggle_team_visibility(self, team: Team) -> bool:
        players = self.store.players_of(team)
        if not players:
            return False
        self.history.snapshot_before_change()
        show = not all(p.visible for p in players)
        for player in players:
            player.visible = show
        self._commit()
        return True

    def relabel(self, entity: Optional[Entity], text: str) -> bool:
        if not isinstance(entity, (Player, Arrow)) or not self.store.contains(entity):
            logger.info("Relabel ignored: no player or arrow selected")
            return False
        self.history.snapshot_before_change()
        entity.label = text
        self._commit()
        return True

    def relabel_at(self, x: float, y: float, text: str) -> bool:
        return self.relabel(self.label_target_at(x, y), text)

    def label_target_at(self, x: float, y: float) -> Optional[Entity]:
        return label_target_at(self.store.document, (x, y), self.settings)

    def toggle_curve(self, entity: Optional[Entity]) -> bool:
        if not isinstance(entity, (Arrow, Pick)) or not self.store.contains(entity):
            return False
        if isinstance(entity, Pick) and entity.is_point:
            return False
        self.history.snapshot_before_change()
        if entity.curved:
            entity.set_control(None)
        else:
            entity.set_control(perpendicular_offset(entity.start, entity.end, CURVE_BEND))
        self._commit()
        return True

    # ---------- History ----------
    def undo(self) -> bool:
        self.session.pointer_up()
        return self.history.undo()

    def redo(self) -> bool:
        self.session.pointer_up()
        return self.history.redo()

    # ---------- Persistence ----------
    def _replace_document(self, document: SceneDocument) -> None:
        self.session.pointer_up()
        self.history.snapshot_before_change()
        self.store.restore(document)
        self._commit()

    def save(self, path: str | Path) -> Path:
        return self.layout_service.write(path, self.store.document)

    def load(self, path: str | Path) -> None:
        self._replace_document(self.layout_service.read(path))

    def save_slot(self, name: str) -> Path:
        return self.layout_service.save_slot(name, self.store.document)

    def load_slot(self, name: str) -> None:
        self._replace_document(self.layout_service.load_slot(name))

    def export(self, path: str | Path | None = None) -> Path:
        return self.layout_service.export(self.store.document, path, self.settings)
