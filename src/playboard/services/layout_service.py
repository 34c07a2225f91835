from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

from playboard.config import DEFAULT_SETTINGS, EXPORTS_DIR, LAYOUTS_DIR, BoardSettings
from playboard.infrastructure import export_png
from playboard.models import SceneDocument
from playboard.services.codec import deserialize, serialize
from playboard.services.errors import BoardPersistenceError, MalformedDocumentError, SlotNotFoundError

logger = logging.getLogger(__name__)

_SLOT_INVALID = re.compile(r"[^A-Za-z0-9_\- ]+")


def slot_stem(name: str) -> str:
    cleaned = _SLOT_INVALID.sub("", (name or "").strip()).strip()
    return cleaned.replace(" ", "_")


class LayoutService:
    """Handles board persistence: JSON files, named save slots and PNG export."""

    def __init__(
        self,
        layouts_dir: Path | str = LAYOUTS_DIR,
        exports_dir: Path | str = EXPORTS_DIR,
    ) -> None:
        self.layouts_dir = Path(layouts_dir)
        self.exports_dir = Path(exports_dir)

    # ----------------------------- Persistence -----------------------------
    def read(self, path: str | Path) -> SceneDocument:
        target = Path(path)
        try:
            with target.open("r", encoding="utf-8") as handle:
                text = handle.read()
        except UnicodeDecodeError as exc:
            raise MalformedDocumentError(f"Board file is not UTF-8 text:\n{exc}", path=target, cause=exc)
        except OSError as exc:
            raise BoardPersistenceError(f"Failed to read board:\n{exc}", path=target, cause=exc)
        document = deserialize(text)
        logger.info("Loaded board from %s", target)
        return document

    def write(self, path: str | Path, document: SceneDocument) -> Path:
        target = Path(path)
        text = serialize(document)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            raise BoardPersistenceError(f"Failed to save board:\n{exc}", path=target, cause=exc)
        logger.info("Saved board to %s", target)
        return target

    # ----------------------------- Slots -----------------------------
    def slot_path(self, name: str) -> Path:
        stem = slot_stem(name)
        if not stem:
            raise BoardPersistenceError(f"Invalid slot name {name!r}.")
        return self.layouts_dir / f"{stem}.json"

    def save_slot(self, name: str, document: SceneDocument) -> Path:
        return self.write(self.slot_path(name), document)

    def load_slot(self, name: str) -> SceneDocument:
        path = self.slot_path(name)
        if not path.exists():
            raise SlotNotFoundError(f"No saved board named '{name}'.", path=path)
        return self.read(path)

    def delete_slot(self, name: str) -> bool:
        path = self.slot_path(name)
        if not path.exists():
            return False
        try:
            path.unlink()
        except OSError as exc:
            raise BoardPersistenceError(f"Failed to delete board:\n{exc}", path=path, cause=exc)
        return True

    def list_slots(self) -> List[str]:
        if not self.layouts_dir.exists():
            return []
        return [path.stem for path in sorted(self.layouts_dir.glob("*.json"))]

    # ----------------------------- Export -----------------------------
    def export(
        self,
        document: SceneDocument,
        path: str | Path | None = None,
        settings: BoardSettings = DEFAULT_SETTINGS,
    ) -> Path:
        target = Path(path) if path is not None else self.exports_dir / "board.png"
        try:
            written = export_png(document, target, settings)
        except OSError as exc:
            raise BoardPersistenceError(f"Failed to export image:\n{exc}", path=target, cause=exc)
        logger.info("Exported board image to %s", written)
        return written


__all__ = ["LayoutService", "slot_stem"]
