from __future__ import annotations

import io
from pathlib import Path
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from playboard.config import BOARD_BACKGROUND, DEFAULT_SETTINGS, LABEL_COLOR, BoardSettings
from playboard.models import SceneDocument
from playboard.ui.surface import DrawingSurface, render_scene
from playboard.utils import Point, dash_polyline


class PillowSurface(DrawingSurface):
    """
    Off-screen drawing surface backed by a PIL RGBA image.
    Fills with an alpha channel are blended over what is already drawn.
    """

    def __init__(self, width: int, height: int, background: str = BOARD_BACKGROUND) -> None:
        self.background = background
        self.image = Image.new("RGBA", (max(1, int(width)), max(1, int(height))), background)
        self._draw = ImageDraw.Draw(self.image, "RGBA")
        self._font = ImageFont.load_default()

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    def clear(self) -> None:
        self._draw.rectangle((0, 0, self.image.width, self.image.height), fill=self.background)

    def circle(self, center: Point, radius: float, fill: Optional[str] = None, outline: Optional[str] = None, width: float = 1) -> None:
        x, y = center
        box = (x - radius, y - radius, x + radius, y + radius)
        self._draw.ellipse(box, fill=fill, outline=outline, width=max(1, int(round(width))))

    def polyline(self, points: Sequence[Point], color: str, width: float = 1, dash: Optional[Sequence[int]] = None) -> None:
        runs = dash_polyline(points, dash) if dash else [list(points)]
        for run in runs:
            if len(run) < 2:
                continue
            self._draw.line(run, fill=color, width=max(1, int(round(width))), joint="curve")

    def polygon(self, points: Sequence[Point], fill: str) -> None:
        self._draw.polygon(list(points), fill=fill)

    def text(self, at: Point, text: str, color: str = LABEL_COLOR, size: int = 12) -> None:
        left, top, right, bottom = self._draw.textbbox((0, 0), text, font=self._font)
        x = at[0] - (right - left) / 2.0
        y = at[1] - (bottom - top) / 2.0
        self._draw.text((x, y), text, fill=color, font=self._font)

    def to_png_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.image.save(buffer, format="PNG")
        return buffer.getvalue()


def rasterize(document: SceneDocument, settings: BoardSettings = DEFAULT_SETTINGS) -> Image.Image:
    surface = PillowSurface(settings.width, settings.height)
    render_scene(document, surface, settings)
    return surface.image


def export_png(document: SceneDocument, path: Path | str, settings: BoardSettings = DEFAULT_SETTINGS) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    rasterize(document, settings).save(target, format="PNG")
    return target
