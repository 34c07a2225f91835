"""Tests for the application entry point wiring."""

import pytest

pytest.importorskip("tkinter")

from playboard import board  # noqa: E402
from playboard.ui import app  # noqa: E402


def test_board_main_is_the_only_entry_point():
    """The window module only defines the window; startup lives in ``board.main``."""
    assert callable(board.main)
    assert board.App is app.App
    assert not hasattr(app, "main")
