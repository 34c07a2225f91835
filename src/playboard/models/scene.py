from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional

from playboard.models.entities import Arrow, Ball, Entity, EntityKind, Pick, Player, Team, Zone


@dataclass
class SceneDocument:
    """Complete state of a board at one instant."""

    players: List[Player] = field(default_factory=list)
    ball: Optional[Ball] = None
    arrows: List[Arrow] = field(default_factory=list)
    picks: List[Pick] = field(default_factory=list)
    zones: List[Zone] = field(default_factory=list)

    def copy(self) -> "SceneDocument":
        return copy.deepcopy(self)

    @property
    def is_empty(self) -> bool:
        return not (self.players or self.arrows or self.picks or self.zones) and self.ball is None


class SceneStore:
    """
    Owns every entity on the board. Components that edit the board hold a
    reference to one store and call ``notify`` once a mutation is complete so
    listeners (the editor canvas) can redraw.
    """

    def __init__(self, document: Optional[SceneDocument] = None) -> None:
        self._doc = document.copy() if document is not None else SceneDocument()
        self._listeners: List[Callable[[SceneDocument], None]] = []
        self._disposed = False

    # ---------- Read access ----------
    @property
    def document(self) -> SceneDocument:
        """The live document. Callers must not keep it beyond the current event."""
        return self._doc

    @property
    def players(self) -> List[Player]:
        return self._doc.players

    @property
    def ball(self) -> Optional[Ball]:
        return self._doc.ball

    @property
    def arrows(self) -> List[Arrow]:
        return self._doc.arrows

    @property
    def picks(self) -> List[Pick]:
        return self._doc.picks

    @property
    def zones(self) -> List[Zone]:
        return self._doc.zones

    @property
    def is_empty(self) -> bool:
        return self._doc.is_empty

    def players_of(self, team: Team) -> List[Player]:
        team = Team(team)
        return [p for p in self._doc.players if p.team == team]

    def entities(self) -> Iterator[Entity]:
        yield from self._doc.zones
        yield from self._doc.arrows
        yield from self._doc.picks
        yield from self._doc.players
        if self._doc.ball is not None:
            yield self._doc.ball

    def contains(self, entity: Entity) -> bool:
        return any(e is entity for e in self.entities())

    # ---------- Listener mgmt ----------
    def add_listener(self, callback: Callable[[SceneDocument], None]) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[SceneDocument], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def notify(self) -> None:
        for cb in list(self._listeners):
            cb(self._doc)

    # ---------- Mutation ----------
    def add(self, entity: Entity) -> Entity:
        self._check_alive()
        kind = getattr(entity, "kind", None)
        if kind == EntityKind.PLAYER:
            self._doc.players.append(entity)
        elif kind == EntityKind.BALL:
            self._doc.ball = entity
        elif kind == EntityKind.ARROW:
            self._doc.arrows.append(entity)
        elif kind == EntityKind.PICK:
            self._doc.picks.append(entity)
        elif kind == EntityKind.ZONE:
            self._doc.zones.append(entity)
        else:
            raise TypeError(f"Not a board entity: {entity!r}")
        return entity

    def remove(self, entity: Entity) -> bool:
        """Remove by identity; returns True if removed."""
        self._check_alive()
        if self._doc.ball is entity:
            self._doc.ball = None
            return True
        for items in (self._doc.players, self._doc.arrows, self._doc.picks, self._doc.zones):
            for index, item in enumerate(items):
                if item is entity:
                    del items[index]
                    return True
        return False

    def clear(self) -> None:
        self._check_alive()
        self._doc = SceneDocument()

    # ---------- State (snapshot/restore) ----------
    def snapshot(self) -> SceneDocument:
        return self._doc.copy()

    def restore(self, document: SceneDocument) -> None:
        self._check_alive()
        self._doc = document.copy()

    def dispose(self) -> None:
        self._listeners.clear()
        self._doc = SceneDocument()
        self._disposed = True

    def _check_alive(self) -> None:
        if self._disposed:
            raise RuntimeError("Scene store has been disposed.")
