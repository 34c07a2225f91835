"""Shared pytest fixtures for Playboard tests."""

import pytest

from playboard.config import DEFAULT_SETTINGS
from playboard.models import Arrow, ArrowStyle, Ball, Pick, Player, SceneDocument, SceneStore, Team, Zone
from playboard.services import BoardController, EditSession, HistoryManager, LayoutService


# =============================================================================
# Board Fixtures
# =============================================================================


@pytest.fixture
def settings():
    return DEFAULT_SETTINGS


@pytest.fixture
def store() -> SceneStore:
    return SceneStore()


@pytest.fixture
def history(store) -> HistoryManager:
    return HistoryManager(store)


@pytest.fixture
def session(store, history, settings) -> EditSession:
    return EditSession(store, history, settings)


@pytest.fixture
def layout_service(tmp_path) -> LayoutService:
    return LayoutService(tmp_path / "layouts", tmp_path / "exports")


@pytest.fixture
def controller(store, history, layout_service) -> BoardController:
    return BoardController(store=store, history=history, layout_service=layout_service)


@pytest.fixture
def sample_document() -> SceneDocument:
    """A board with one of everything, including a curved arrow and a screen line."""
    return SceneDocument(
        players=[
            Player(x=100, y=100, team=Team.A, label="A1"),
            Player(x=200, y=100, team=Team.B, label="B1", visible=False),
        ],
        ball=Ball(x=300, y=100),
        arrows=[
            Arrow(x1=400, y1=100, x2=500, y2=150),
            Arrow(x1=400, y1=200, x2=500, y2=250, cx=450, cy=300, style=ArrowStyle.DASHED, label="cut"),
        ],
        picks=[
            Pick(x1=700, y1=200, x2=700, y2=200),
            Pick(x1=650, y1=400, x2=720, y2=420),
        ],
        zones=[Zone(x=600, y=300, radius=50)],
    )
