"""Tests for the scene painter and the Pillow surface."""

import math

import pytest

from playboard.config import DASH_PATTERN, TEAM_COLORS
from playboard.infrastructure import PillowSurface, rasterize
from playboard.models import Arrow, ArrowStyle, Player, SceneDocument, Team
from playboard.ui.surface import DrawingSurface, render_scene


class RecordingSurface(DrawingSurface):
    """Collects primitive calls instead of drawing them."""

    def __init__(self):
        self.calls = []
        self.arrowheads = []

    def clear(self):
        self.calls.append(("clear",))

    def circle(self, center, radius, fill=None, outline=None, width=1):
        self.calls.append(("circle", center, radius, fill))

    def polyline(self, points, color, width=1, dash=None):
        self.calls.append(("polyline", list(points), color, dash))

    def polygon(self, points, fill):
        self.calls.append(("polygon", list(points), fill))

    def text(self, at, text, color="#000000", size=12):
        self.calls.append(("text", at, text))

    def arrowhead(self, tip, angle, size, color="#000000"):
        self.arrowheads.append((tip, angle))
        super().arrowhead(tip, angle, size, color)

    def of(self, name):
        return [call for call in self.calls if call[0] == name]


class TestRenderScene:
    def test_clears_first(self, sample_document):
        surface = RecordingSurface()
        render_scene(sample_document, surface)
        assert surface.calls[0] == ("clear",)

    def test_hidden_players_not_drawn(self):
        doc = SceneDocument(players=[Player(x=100, y=100, team=Team.A, label="hidden", visible=False)])
        surface = RecordingSurface()
        render_scene(doc, surface)
        assert surface.of("circle") == []
        assert surface.of("text") == []

    def test_player_fill_uses_team_color(self):
        doc = SceneDocument(players=[Player(x=100, y=100, team=Team.B)])
        surface = RecordingSurface()
        render_scene(doc, surface)
        assert surface.of("circle")[0][3] == TEAM_COLORS["B"]

    def test_dashed_arrow_passes_dash_pattern(self):
        doc = SceneDocument(arrows=[Arrow(x1=0, y1=0, x2=100, y2=0, style=ArrowStyle.DASHED)])
        surface = RecordingSurface()
        render_scene(doc, surface)
        assert surface.of("polyline")[0][3] == DASH_PATTERN

    def test_curved_arrowhead_follows_tangent(self):
        """The head points along control -> end, not along start -> end."""
        doc = SceneDocument(arrows=[Arrow(x1=0, y1=0, x2=100, y2=0, cx=100, cy=-100)])
        surface = RecordingSurface()
        render_scene(doc, surface)

        tip, angle = surface.arrowheads[0]
        assert tip == (100, 0)
        assert angle == pytest.approx(math.pi / 2)

    def test_straight_arrowhead(self):
        doc = SceneDocument(arrows=[Arrow(x1=0, y1=0, x2=100, y2=0)])
        surface = RecordingSurface()
        render_scene(doc, surface)
        assert surface.arrowheads[0][1] == pytest.approx(0.0)
        assert len(surface.of("polygon")) == 1

    def test_curved_path_is_sampled(self, settings):
        doc = SceneDocument(arrows=[Arrow(x1=0, y1=0, x2=100, y2=0, cx=50, cy=80)])
        surface = RecordingSurface()
        render_scene(doc, surface, settings)
        points = surface.of("polyline")[0][1]
        assert len(points) == settings.curve_steps + 1

    def test_arrow_label_drawn(self, sample_document):
        surface = RecordingSurface()
        render_scene(sample_document, surface)
        assert "cut" in [call[2] for call in surface.of("text")]

    def test_handles_only_when_requested(self, sample_document):
        plain = RecordingSurface()
        render_scene(sample_document, plain)
        with_handles = RecordingSurface()
        render_scene(sample_document, with_handles, show_handles=True)
        assert len(with_handles.of("circle")) > len(plain.of("circle"))


class TestPillowSurface:
    def test_rasterize_size(self, settings):
        image = rasterize(SceneDocument(), settings)
        assert image.size == (settings.width, settings.height)

    def test_player_pixel(self):
        image = rasterize(SceneDocument(players=[Player(x=100, y=100, team=Team.A)]))
        assert image.getpixel((100, 100)) == (0xD3, 0x2F, 0x2F, 255)

    def test_png_bytes(self):
        surface = PillowSurface(50, 40)
        render_scene(SceneDocument(), surface)
        assert surface.size == (50, 40)
        assert surface.to_png_bytes().startswith(b"\x89PNG\r\n\x1a\n")
