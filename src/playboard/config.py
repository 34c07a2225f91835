import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = Path(os.environ.get("PLAYBOARD_HOME", Path.home() / ".playboard")).expanduser()
LAYOUTS_DIR = DATA_DIR / "layouts"
EXPORTS_DIR = DATA_DIR / "exports"

IMAGE_FILETYPES: List[Tuple[str, str]] = [("PNG images", "*.png"), ("All Files", "*.*")]

JSON_FILETYPES: List[Tuple[str, str]] = [("JSON files", "*.json"), ("All Files", "*.*")]

DOCUMENT_VERSION = 1

# Board
BOARD_WIDTH = 1000
BOARD_HEIGHT = 560
BOARD_MARGIN = 40
BOARD_BACKGROUND = "#2e7d32"
BOARD_LINE_COLOR = "#e8f5e9"

# Entity sizes
PLAYER_RADIUS = 15
BALL_RADIUS = 8
PICK_RADIUS = 10
HANDLE_RADIUS = 8
ZONE_DEFAULT_RADIUS = 50
ZONE_MIN_RADIUS = 20
ZONE_EDGE_TOLERANCE = 6
ARROWHEAD_SIZE = 12
CURVE_BEND = 40
CURVE_STEPS = 24

# Colors
TEAM_COLORS = {"A": "#d32f2f", "B": "#1565c0"}
LABEL_COLOR = "#000000"
ARROW_COLOR = "#000000"
EMPHASIS_COLOR = "#ffb300"
PICK_COLOR = "#fb8c00"
ZONE_FILL = "#80008040"
ZONE_OUTLINE = "#800080"
BALL_COLOR = "#000000"
HANDLE_COLOR = "#ffffff"

# Strokes
LINE_WIDTH = 2
EMPHASIS_WIDTH = 4
DASH_PATTERN: Tuple[int, int] = (10, 5)

HISTORY_LIMIT: Optional[int] = 200


@dataclass(frozen=True)
class BoardSettings:
    """Geometric tunables shared by hit-testing, editing and rendering."""

    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    margin: int = BOARD_MARGIN
    player_radius: float = PLAYER_RADIUS
    ball_radius: float = BALL_RADIUS
    pick_radius: float = PICK_RADIUS
    handle_radius: float = HANDLE_RADIUS
    zone_edge_tolerance: float = ZONE_EDGE_TOLERANCE
    arrowhead_size: float = ARROWHEAD_SIZE
    curve_steps: int = CURVE_STEPS


DEFAULT_SETTINGS = BoardSettings()


def ensure_directories() -> None:
    for path in (LAYOUTS_DIR, EXPORTS_DIR):
        path.mkdir(parents=True, exist_ok=True)
