"""Resolve which entity, and which of its handles, lies under the pointer.

Small handles are tested before large areas so a control point sitting inside
a zone stays reachable:

1. curve control handles of arrows, then picks
2. endpoints of arrows, then picks (start before end)
3. zone edges, then zone interiors
4. visible players
5. the ball

Within a tier the first entity in collection order wins, regardless of which
candidate is closest.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from playboard.config import DEFAULT_SETTINGS, BoardSettings
from playboard.models import Entity, Handle, LineEntity, Pick, Player, SceneDocument
from playboard.utils import Point, distance


@dataclass(frozen=True)
class Hit:
    entity: Entity
    handle: Handle = Handle.NONE


def _line_entities(document: SceneDocument) -> Iterable[LineEntity]:
    yield from document.arrows
    yield from document.picks


def _hit_control(document: SceneDocument, point: Point, radius: float) -> Optional[Hit]:
    for entity in _line_entities(document):
        control = entity.control
        if control is not None and distance(point, control) <= radius:
            return Hit(entity, Handle.CONTROL)
    return None


def _hit_endpoints(document: SceneDocument, point: Point, radius: float, marker_radius: float) -> Optional[Hit]:
    for entity in _line_entities(document):
        if isinstance(entity, Pick) and entity.is_point:
            if distance(point, entity.start) <= max(radius, marker_radius):
                return Hit(entity, Handle.CENTER)
            continue
        if distance(point, entity.start) <= radius:
            return Hit(entity, Handle.START)
        if distance(point, entity.end) <= radius:
            return Hit(entity, Handle.END)
    return None


def _hit_zones(document: SceneDocument, point: Point, tolerance: float) -> Optional[Hit]:
    for zone in document.zones:
        if abs(distance(point, zone.center) - zone.radius) <= tolerance:
            return Hit(zone, Handle.EDGE)
    for zone in document.zones:
        if distance(point, zone.center) < zone.radius:
            return Hit(zone, Handle.CENTER)
    return None


def _hit_players(players: Sequence[Player], point: Point, radius: float) -> Optional[Hit]:
    for player in players:
        if player.visible and distance(point, player.position) <= radius:
            return Hit(player, Handle.NONE)
    return None


def hit_test(
    document: SceneDocument,
    point: Point,
    settings: BoardSettings = DEFAULT_SETTINGS,
) -> Optional[Hit]:
    """Return the highest-priority hit at ``point``, or None."""
    hit = (
        _hit_control(document, point, settings.handle_radius)
        or _hit_endpoints(document, point, settings.handle_radius, settings.pick_radius)
        or _hit_zones(document, point, settings.zone_edge_tolerance)
        or _hit_players(document.players, point, settings.player_radius)
    )
    if hit is not None:
        return hit
    ball = document.ball
    if ball is not None and distance(point, ball.position) <= settings.ball_radius:
        return Hit(ball, Handle.NONE)
    return None


def player_at(
    document: SceneDocument,
    point: Point,
    settings: BoardSettings = DEFAULT_SETTINGS,
) -> Optional[Player]:
    hit = _hit_players(document.players, point, settings.player_radius)
    return hit.entity if hit is not None else None


def label_target_at(
    document: SceneDocument,
    point: Point,
    settings: BoardSettings = DEFAULT_SETTINGS,
) -> Optional[Entity]:
    """The player under ``point``, else an arrow grabbed by one of its handles.

    Zones and picks carry no label, so they never shadow a player here.
    """
    player = player_at(document, point, settings)
    if player is not None:
        return player
    radius = settings.handle_radius
    for arrow in document.arrows:
        handles = [arrow.start, arrow.end]
        if arrow.control is not None:
            handles.append(arrow.control)
        if any(distance(point, handle) <= radius for handle in handles):
            return arrow
    return None
