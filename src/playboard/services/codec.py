"""JSON encoding of scene documents.

Every collection is always written. On read, missing collections become
empty and a missing ball becomes absent, so older saves keep loading as the
format grows. Anything that is not a JSON object with well-formed entries
raises :class:`MalformedDocumentError` and yields no document at all.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from playboard.config import DOCUMENT_VERSION
from playboard.legacy import is_legacy_document, upgrade_legacy_document
from playboard.models import Arrow, ArrowStyle, Ball, Pick, Player, SceneDocument, Team, Zone
from playboard.services.errors import MalformedDocumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ----------------------------- Encoding -----------------------------

def _player_to_dict(player: Player) -> Dict[str, Any]:
    return {
        "x": player.x,
        "y": player.y,
        "team": player.team.value,
        "label": player.label,
        "visible": player.visible,
    }


def _line_to_dict(entity: Any) -> Dict[str, Any]:
    return {
        "x1": entity.x1,
        "y1": entity.y1,
        "x2": entity.x2,
        "y2": entity.y2,
        "cx": entity.cx,
        "cy": entity.cy,
    }


def _arrow_to_dict(arrow: Arrow) -> Dict[str, Any]:
    data = _line_to_dict(arrow)
    data["style"] = arrow.style.value
    data["label"] = arrow.label
    return data


def document_to_dict(document: SceneDocument) -> Dict[str, Any]:
    return {
        "version": DOCUMENT_VERSION,
        "players": [_player_to_dict(p) for p in document.players],
        "ball": {"x": document.ball.x, "y": document.ball.y} if document.ball is not None else None,
        "arrows": [_arrow_to_dict(a) for a in document.arrows],
        "picks": [_line_to_dict(p) for p in document.picks],
        "zones": [{"x": z.x, "y": z.y, "radius": z.radius} for z in document.zones],
    }


def serialize(document: SceneDocument) -> str:
    return json.dumps(document_to_dict(document), indent=2)


# ----------------------------- Decoding -----------------------------

def _number(entry: Dict[str, Any], key: str) -> float:
    value = entry.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedDocumentError(f"Expected a number for '{key}', got {value!r}.")
    return value


def _optional_number(entry: Dict[str, Any], key: str) -> Optional[float]:
    if entry.get(key) is None:
        return None
    return _number(entry, key)


def _text(entry: Dict[str, Any], key: str) -> str:
    value = entry.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedDocumentError(f"Expected text for '{key}', got {value!r}.")
    return value


def _flag(entry: Dict[str, Any], key: str, default: bool) -> bool:
    if key not in entry:
        return default
    value = entry[key]
    if not isinstance(value, bool):
        raise MalformedDocumentError(f"Expected true or false for '{key}', got {value!r}.")
    return value


def _player_from_dict(entry: Dict[str, Any]) -> Player:
    try:
        team = Team(entry.get("team"))
    except ValueError as exc:
        raise MalformedDocumentError(f"Unknown team {entry.get('team')!r}.", cause=exc)
    return Player(
        x=_number(entry, "x"),
        y=_number(entry, "y"),
        team=team,
        label=_text(entry, "label"),
        visible=_flag(entry, "visible", True),
    )


def _control(entry: Dict[str, Any]) -> Dict[str, Optional[float]]:
    cx = _optional_number(entry, "cx")
    cy = _optional_number(entry, "cy")
    if cx is None or cy is None:
        cx = cy = None
    return {"cx": cx, "cy": cy}


def _arrow_from_dict(entry: Dict[str, Any]) -> Arrow:
    try:
        style = ArrowStyle(entry.get("style", ArrowStyle.SOLID.value))
    except ValueError as exc:
        raise MalformedDocumentError(f"Unknown arrow style {entry.get('style')!r}.", cause=exc)
    return Arrow(
        x1=_number(entry, "x1"),
        y1=_number(entry, "y1"),
        x2=_number(entry, "x2"),
        y2=_number(entry, "y2"),
        style=style,
        label=_text(entry, "label"),
        **_control(entry),
    )


def _pick_from_dict(entry: Dict[str, Any]) -> Pick:
    return Pick(
        x1=_number(entry, "x1"),
        y1=_number(entry, "y1"),
        x2=_number(entry, "x2"),
        y2=_number(entry, "y2"),
        **_control(entry),
    )


def _zone_from_dict(entry: Dict[str, Any]) -> Zone:
    return Zone(x=_number(entry, "x"), y=_number(entry, "y"), radius=_number(entry, "radius"))


def _collection(data: Dict[str, Any], key: str, decode: Callable[[Dict[str, Any]], T]) -> List[T]:
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise MalformedDocumentError(f"'{key}' must be a list.")
    items: List[T] = []
    for entry in raw:
        if not isinstance(entry, dict):
            raise MalformedDocumentError(f"Entries of '{key}' must be objects.")
        items.append(decode(entry))
    return items


def document_from_dict(data: Any) -> SceneDocument:
    if not isinstance(data, dict):
        raise MalformedDocumentError("Board document must be a JSON object.")
    if is_legacy_document(data):
        logger.info("Upgrading legacy board document")
        data = upgrade_legacy_document(data)

    ball_data = data.get("ball")
    if ball_data is not None and not isinstance(ball_data, dict):
        raise MalformedDocumentError("'ball' must be an object or null.")

    return SceneDocument(
        players=_collection(data, "players", _player_from_dict),
        ball=Ball(x=_number(ball_data, "x"), y=_number(ball_data, "y")) if ball_data is not None else None,
        arrows=_collection(data, "arrows", _arrow_from_dict),
        picks=_collection(data, "picks", _pick_from_dict),
        zones=_collection(data, "zones", _zone_from_dict),
    )


def deserialize(text: str) -> SceneDocument:
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise MalformedDocumentError(f"Not a valid JSON document: {exc}", cause=exc)
    except RecursionError as exc:
        raise MalformedDocumentError("Board document is nested too deeply.", cause=exc)
    return document_from_dict(data)
