"""Support for boards saved by the original browser tool.

Those saves keep players in ``redPlayers``/``bluePlayers``, mark dashed arrows
with a boolean and store picks as single ``{x, y}`` markers.
"""
from __future__ import annotations

import copy
import json
import logging
import os
import shutil
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

LEGACY_TEAM_KEYS = (("redPlayers", "A"), ("bluePlayers", "B"))


def is_legacy_document(data: Dict[str, Any]) -> bool:
    if "players" in data:
        return False
    return any(key in data for key, _ in LEGACY_TEAM_KEYS)


def _upgrade_arrow(entry: Any) -> Any:
    if not isinstance(entry, dict):
        return entry
    arrow = dict(entry)
    dashed = arrow.pop("dashed", False)
    arrow.setdefault("style", "dashed" if dashed else "solid")
    return arrow


def _upgrade_pick(entry: Any) -> Any:
    if not isinstance(entry, dict) or "x1" in entry:
        return entry
    x, y = entry.get("x"), entry.get("y")
    return {"x1": x, "y1": y, "x2": x, "y2": y, "cx": None, "cy": None}


def upgrade_legacy_document(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of a legacy board in the current document layout."""
    legacy = copy.deepcopy(data)
    players: List[Any] = []
    for key, team in LEGACY_TEAM_KEYS:
        group = legacy.pop(key, None) or []
        if not isinstance(group, list):
            players.append(group)
            continue
        for entry in group:
            if isinstance(entry, dict):
                entry = dict(entry, team=team)
            players.append(entry)
    legacy["players"] = players

    arrows = legacy.get("arrows")
    if isinstance(arrows, list):
        legacy["arrows"] = [_upgrade_arrow(a) for a in arrows]
    picks = legacy.get("picks")
    if isinstance(picks, list):
        legacy["picks"] = [_upgrade_pick(p) for p in picks]
    return legacy


def convert_legacy_layouts(layouts_dir: Path | str) -> int:
    """Rewrite legacy saves in ``layouts_dir`` in place, keeping a ``.legacy`` backup.

    Returns the number of files converted.
    """
    directory = Path(layouts_dir)
    try:
        entries = sorted(os.listdir(directory))
    except FileNotFoundError:
        return 0

    converted = 0
    for entry in entries:
        if not entry.lower().endswith(".json"):
            continue
        path = directory / entry
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, ValueError) as exc:
            logger.warning("Skipping unreadable layout %s: %s", path, exc)
            continue
        if not isinstance(data, dict) or not is_legacy_document(data):
            continue

        backup_path = path.with_suffix(".json.legacy")
        suffix = 1
        while backup_path.exists():
            suffix += 1
            backup_path = path.with_suffix(f".json.legacy{suffix}")
        try:
            shutil.copyfile(path, backup_path)
            with path.open("w", encoding="utf-8") as handle:
                json.dump(upgrade_legacy_document(data), handle, indent=2)
        except OSError as exc:
            logger.warning("Failed to convert legacy layout %s: %s", path, exc)
            continue
        converted += 1
        logger.info("Converted legacy layout %s", path)
    return converted


__all__ = ["convert_legacy_layouts", "is_legacy_document", "upgrade_legacy_document"]
