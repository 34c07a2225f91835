"""Drawing surfaces and the scene painter.

A surface only knows primitives: circles, polylines, filled polygons and
text. ``render_scene`` turns a document into those calls, so the Tk editor
and the PNG exporter paint identical boards.
"""
from __future__ import annotations

import math
from typing import Optional, Sequence

from playboard.config import (
    ARROW_COLOR,
    BALL_COLOR,
    BOARD_LINE_COLOR,
    DASH_PATTERN,
    DEFAULT_SETTINGS,
    EMPHASIS_COLOR,
    EMPHASIS_WIDTH,
    HANDLE_COLOR,
    LABEL_COLOR,
    LINE_WIDTH,
    PICK_COLOR,
    TEAM_COLORS,
    ZONE_FILL,
    ZONE_OUTLINE,
    BoardSettings,
)
from playboard.models import Arrow, ArrowStyle, Pick, Player, SceneDocument, Zone
from playboard.utils import Point, arrowhead_angle, midpoint, quadratic_point, sample_quadratic


class DrawingSurface:
    """Primitive drawing calls; ``path`` and ``arrowhead`` are built on ``polyline`` and ``polygon``."""

    curve_steps: int = DEFAULT_SETTINGS.curve_steps

    def clear(self) -> None:
        raise NotImplementedError

    def circle(
        self,
        center: Point,
        radius: float,
        fill: Optional[str] = None,
        outline: Optional[str] = None,
        width: float = 1,
    ) -> None:
        raise NotImplementedError

    def polyline(
        self,
        points: Sequence[Point],
        color: str,
        width: float = 1,
        dash: Optional[Sequence[int]] = None,
    ) -> None:
        raise NotImplementedError

    def polygon(self, points: Sequence[Point], fill: str) -> None:
        raise NotImplementedError

    def text(self, at: Point, text: str, color: str = LABEL_COLOR, size: int = 12) -> None:
        raise NotImplementedError

    # ---------- Composite primitives ----------
    def path(
        self,
        start: Point,
        end: Point,
        control: Optional[Point] = None,
        color: str = ARROW_COLOR,
        width: float = LINE_WIDTH,
        dash: Optional[Sequence[int]] = None,
    ) -> None:
        if control is None:
            points = [start, end]
        else:
            points = sample_quadratic(start, control, end, self.curve_steps)
        self.polyline(points, color, width, dash)

    def arrowhead(self, tip: Point, angle: float, size: float, color: str = ARROW_COLOR) -> None:
        spread = math.pi / 7
        left = (tip[0] - size * math.cos(angle - spread), tip[1] - size * math.sin(angle - spread))
        right = (tip[0] - size * math.cos(angle + spread), tip[1] - size * math.sin(angle + spread))
        self.polygon([tip, left, right], color)


# ----------------------------- Scene painter -----------------------------

def _draw_zone(surface: DrawingSurface, zone: Zone) -> None:
    surface.circle(zone.center, zone.radius, fill=ZONE_FILL, outline=ZONE_OUTLINE, width=LINE_WIDTH)


def _draw_arrow(surface: DrawingSurface, arrow: Arrow, settings: BoardSettings) -> None:
    color = EMPHASIS_COLOR if arrow.style == ArrowStyle.EMPHASIS else ARROW_COLOR
    width = EMPHASIS_WIDTH if arrow.style == ArrowStyle.EMPHASIS else LINE_WIDTH
    dash = DASH_PATTERN if arrow.style == ArrowStyle.DASHED else None
    control = arrow.control
    surface.path(arrow.start, arrow.end, control, color=color, width=width, dash=dash)
    angle = arrowhead_angle(arrow.start, arrow.end, control)
    surface.arrowhead(arrow.end, angle, settings.arrowhead_size, color)
    if arrow.label:
        if control is not None:
            mx, my = quadratic_point(arrow.start, control, arrow.end, 0.5)
        else:
            mx, my = midpoint(arrow.start, arrow.end)
        surface.text((mx, my - 12), arrow.label, LABEL_COLOR)


def _draw_pick(surface: DrawingSurface, pick: Pick, settings: BoardSettings) -> None:
    if pick.is_point:
        surface.circle(pick.start, settings.pick_radius, outline=PICK_COLOR, width=LINE_WIDTH)
        return
    surface.path(pick.start, pick.end, pick.control, color=PICK_COLOR, width=EMPHASIS_WIDTH)
    # Screen bar across the end of the line.
    angle = arrowhead_angle(pick.start, pick.end, pick.control) + math.pi / 2
    half = settings.pick_radius
    dx, dy = half * math.cos(angle), half * math.sin(angle)
    ex, ey = pick.end
    surface.polyline([(ex - dx, ey - dy), (ex + dx, ey + dy)], PICK_COLOR, EMPHASIS_WIDTH)


def _draw_player(surface: DrawingSurface, player: Player, settings: BoardSettings) -> None:
    surface.circle(
        player.position,
        settings.player_radius,
        fill=TEAM_COLORS[player.team.value],
        outline=BOARD_LINE_COLOR,
        width=LINE_WIDTH,
    )
    if player.label:
        surface.text((player.x, player.y - settings.player_radius - 5), player.label, LABEL_COLOR)


def _draw_handles(surface: DrawingSurface, document: SceneDocument, settings: BoardSettings) -> None:
    for entity in list(document.arrows) + list(document.picks):
        control = entity.control
        if control is not None:
            surface.polyline([entity.start, control, entity.end], HANDLE_COLOR, 1, dash=(2, 4))
            surface.circle(control, settings.handle_radius / 2, fill=HANDLE_COLOR, outline=ARROW_COLOR)
        if isinstance(entity, Pick) and entity.is_point:
            continue
        for point in (entity.start, entity.end):
            surface.circle(point, settings.handle_radius / 2, outline=HANDLE_COLOR)


def render_scene(
    document: SceneDocument,
    surface: DrawingSurface,
    settings: BoardSettings = DEFAULT_SETTINGS,
    show_handles: bool = False,
) -> None:
    """Paint a full board, back to front."""
    surface.curve_steps = settings.curve_steps
    surface.clear()
    for zone in document.zones:
        _draw_zone(surface, zone)
    for arrow in document.arrows:
        _draw_arrow(surface, arrow, settings)
    for pick in document.picks:
        _draw_pick(surface, pick, settings)
    for player in document.players:
        if player.visible:
            _draw_player(surface, player, settings)
    if document.ball is not None:
        surface.circle(document.ball.position, settings.ball_radius, fill=BALL_COLOR)
    if show_handles:
        _draw_handles(surface, document, settings)
