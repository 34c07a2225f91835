from .entities import (
    Arrow,
    ArrowStyle,
    Ball,
    Entity,
    EntityKind,
    Handle,
    LineEntity,
    Pick,
    Player,
    Team,
    Zone,
    anchor_of,
    default_label,
    new_arrow,
    new_ball,
    new_pick,
    new_player,
    new_zone,
)
from .scene import SceneDocument, SceneStore
