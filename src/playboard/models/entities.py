"""Board entities: players, the ball, arrows, picks and zones.

Each kind is a plain dataclass tagged with a ``kind`` class attribute. They
share no base class; drawing and hit-testing are functions elsewhere that read
these fields.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

from playboard.config import (
    BOARD_HEIGHT,
    BOARD_MARGIN,
    BOARD_WIDTH,
    CURVE_BEND,
    ZONE_DEFAULT_RADIUS,
    ZONE_MIN_RADIUS,
)
from playboard.utils import Point, perpendicular_offset


class EntityKind(str, Enum):
    PLAYER = "player"
    BALL = "ball"
    ARROW = "arrow"
    PICK = "pick"
    ZONE = "zone"


class Team(str, Enum):
    A = "A"
    B = "B"


class ArrowStyle(str, Enum):
    SOLID = "solid"
    DASHED = "dashed"
    EMPHASIS = "emphasis"


class Handle(str, Enum):
    """Which part of an entity a pointer has grabbed."""

    NONE = "none"
    START = "start"
    END = "end"
    CONTROL = "control"
    CENTER = "center"
    EDGE = "edge"


@dataclass
class Player:
    kind: ClassVar[EntityKind] = EntityKind.PLAYER

    x: float
    y: float
    team: Team
    label: str = ""
    visible: bool = True

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


@dataclass
class Ball:
    kind: ClassVar[EntityKind] = EntityKind.BALL

    x: float
    y: float

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


@dataclass
class Arrow:
    kind: ClassVar[EntityKind] = EntityKind.ARROW

    x1: float
    y1: float
    x2: float
    y2: float
    cx: Optional[float] = None
    cy: Optional[float] = None
    style: ArrowStyle = ArrowStyle.SOLID
    label: str = ""

    @property
    def start(self) -> Point:
        return (self.x1, self.y1)

    @property
    def end(self) -> Point:
        return (self.x2, self.y2)

    @property
    def control(self) -> Optional[Point]:
        if self.cx is None or self.cy is None:
            return None
        return (self.cx, self.cy)

    @property
    def curved(self) -> bool:
        return self.control is not None

    def set_start(self, x: float, y: float) -> None:
        self.x1, self.y1 = x, y

    def set_end(self, x: float, y: float) -> None:
        self.x2, self.y2 = x, y

    def set_control(self, point: Optional[Point]) -> None:
        if point is None:
            self.cx = self.cy = None
        else:
            self.cx, self.cy = point


@dataclass
class Pick:
    """A screen: a short line between two endpoints, or a marker when they coincide."""

    kind: ClassVar[EntityKind] = EntityKind.PICK

    x1: float
    y1: float
    x2: float
    y2: float
    cx: Optional[float] = None
    cy: Optional[float] = None

    @property
    def start(self) -> Point:
        return (self.x1, self.y1)

    @property
    def end(self) -> Point:
        return (self.x2, self.y2)

    @property
    def control(self) -> Optional[Point]:
        if self.cx is None or self.cy is None:
            return None
        return (self.cx, self.cy)

    @property
    def curved(self) -> bool:
        return self.control is not None

    @property
    def is_point(self) -> bool:
        return self.x1 == self.x2 and self.y1 == self.y2

    def set_start(self, x: float, y: float) -> None:
        self.x1, self.y1 = x, y

    def set_end(self, x: float, y: float) -> None:
        self.x2, self.y2 = x, y

    def set_control(self, point: Optional[Point]) -> None:
        if point is None:
            self.cx = self.cy = None
        else:
            self.cx, self.cy = point

    def translate(self, dx: float, dy: float) -> None:
        self.x1 += dx
        self.y1 += dy
        self.x2 += dx
        self.y2 += dy
        if self.cx is not None and self.cy is not None:
            self.cx += dx
            self.cy += dy


@dataclass
class Zone:
    kind: ClassVar[EntityKind] = EntityKind.ZONE

    x: float
    y: float
    radius: float = ZONE_DEFAULT_RADIUS

    def __post_init__(self) -> None:
        self.radius = max(float(self.radius), ZONE_MIN_RADIUS)

    @property
    def center(self) -> Point:
        return (self.x, self.y)

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


Entity = Union[Player, Ball, Arrow, Pick, Zone]
LineEntity = Union[Arrow, Pick]


# ----------------------------- Factories -----------------------------

_DEFAULT_PLAYER_POSITIONS = {Team.A: (100.0, 100.0), Team.B: (200.0, 100.0)}
_DEFAULT_ARROWS = {
    ArrowStyle.SOLID: ((400.0, 100.0), (500.0, 150.0)),
    ArrowStyle.DASHED: ((400.0, 200.0), (500.0, 250.0)),
    ArrowStyle.EMPHASIS: ((400.0, 300.0), (500.0, 350.0)),
}


def _scatter(
    rng: random.Random,
    width: float = BOARD_WIDTH,
    height: float = BOARD_HEIGHT,
    margin: float = BOARD_MARGIN,
) -> Point:
    return (rng.uniform(margin, width - margin), rng.uniform(margin, height - margin))


def default_label(team: Team, index: int) -> str:
    return f"{team.value}{index}"


def new_player(team: Team, index: int = 1, rng: Optional[random.Random] = None) -> Player:
    team = Team(team)
    x, y = _scatter(rng) if rng is not None else _DEFAULT_PLAYER_POSITIONS[team]
    return Player(x=x, y=y, team=team, label=default_label(team, index))


def new_ball(rng: Optional[random.Random] = None) -> Ball:
    x, y = _scatter(rng) if rng is not None else (300.0, 100.0)
    return Ball(x=x, y=y)


def new_arrow(
    style: ArrowStyle = ArrowStyle.SOLID,
    rng: Optional[random.Random] = None,
    curved: bool = False,
) -> Arrow:
    style = ArrowStyle(style)
    if rng is not None:
        start = _scatter(rng)
        end = (start[0] + 100.0, start[1] + 50.0)
    else:
        start, end = _DEFAULT_ARROWS[style]
    arrow = Arrow(x1=start[0], y1=start[1], x2=end[0], y2=end[1], style=style)
    if curved:
        arrow.set_control(perpendicular_offset(start, end, CURVE_BEND))
    return arrow


def new_pick(
    rng: Optional[random.Random] = None,
    start: Optional[Point] = None,
    end: Optional[Point] = None,
) -> Pick:
    if start is None:
        start = _scatter(rng) if rng is not None else (700.0, 200.0)
    if end is None:
        end = start
    return Pick(x1=start[0], y1=start[1], x2=end[0], y2=end[1])


def new_zone(rng: Optional[random.Random] = None, radius: float = ZONE_DEFAULT_RADIUS) -> Zone:
    x, y = _scatter(rng) if rng is not None else (600.0, 300.0)
    return Zone(x=x, y=y, radius=radius)


def anchor_of(entity: Entity, handle: Handle) -> Tuple[float, float]:
    """Coordinates of the grabbed point of an entity."""
    if isinstance(entity, (Arrow, Pick)):
        if handle == Handle.START or handle == Handle.CENTER:
            return entity.start
        if handle == Handle.END:
            return entity.end
        if handle == Handle.CONTROL and entity.control is not None:
            return entity.control
        return entity.start
    if isinstance(entity, Zone):
        return entity.center
    return entity.position
