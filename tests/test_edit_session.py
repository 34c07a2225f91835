"""Tests for the drag state machine."""

import pytest

from playboard.config import ZONE_MIN_RADIUS, BoardSettings
from playboard.models import Arrow, Ball, Handle, Pick, Player, Team, Zone
from playboard.services import DragState, EditSession


class TestDragLifecycle:
    def test_pointer_down_on_nothing_stays_idle(self, session, history):
        assert not session.pointer_down(50, 50)
        assert session.state == DragState.IDLE
        assert history.depth == 0

    def test_pointer_down_starts_drag(self, session, store):
        player = store.add(Player(x=100, y=100, team=Team.A))
        assert session.pointer_down(100, 100)
        assert session.state == DragState.DRAGGING
        assert session.target is player

    def test_pointer_up_returns_to_idle(self, session, store):
        store.add(Player(x=100, y=100, team=Team.A))
        session.pointer_down(100, 100)
        session.pointer_up()
        assert session.state == DragState.IDLE
        assert session.target is None
        assert session.handle == Handle.NONE

    def test_pointer_up_while_idle_is_harmless(self, session):
        session.pointer_up()
        session.pointer_leave()
        assert session.state == DragState.IDLE

    def test_move_while_idle_does_nothing(self, session, store):
        player = store.add(Player(x=100, y=100, team=Team.A))
        assert not session.pointer_move(300, 300)
        assert player.position == (100, 100)

    def test_second_pointer_down_is_ignored(self, session, store):
        first = store.add(Player(x=100, y=100, team=Team.A))
        store.add(Player(x=300, y=300, team=Team.B))
        session.pointer_down(100, 100)

        assert not session.pointer_down(300, 300)
        assert session.target is first

    def test_leave_keeps_partial_mutation(self, session, store):
        player = store.add(Player(x=100, y=100, team=Team.A))
        session.pointer_down(100, 100)
        session.pointer_move(150, 120)
        session.pointer_leave()

        assert session.state == DragState.IDLE
        assert player.position == (150, 120)

    def test_moves_request_redraw(self, session, store):
        redraws = []
        store.add_listener(redraws.append)
        store.add(Ball(x=300, y=100))
        session.pointer_down(300, 100)
        session.pointer_move(310, 100)
        session.pointer_move(320, 100)
        assert len(redraws) == 2


class TestDragOffset:
    def test_grab_off_center_moves_by_pointer_delta(self, session, store):
        """The grabbed point does not jump to the pointer."""
        player = store.add(Player(x=100, y=100, team=Team.A))
        session.pointer_down(105, 103)
        assert session.offset == (-5, -3)

        session.pointer_move(125, 113)
        assert player.position == (120, 110)

        session.pointer_move(85, 93)
        assert player.position == (80, 90)

    def test_zone_center_translates(self, session, store):
        zone = store.add(Zone(x=600, y=300, radius=50))
        session.pointer_down(610, 310)
        session.pointer_move(630, 320)
        assert zone.center == (620, 310)
        assert zone.radius == 50


class TestLineHandles:
    def test_drag_end_point(self, session, store):
        arrow = store.add(Arrow(x1=400, y1=100, x2=500, y2=150))
        session.pointer_down(502, 150)
        assert session.handle == Handle.END

        session.pointer_move(602, 250)
        assert arrow.end == (600, 250)
        assert arrow.start == (400, 100)

    def test_drag_control_point(self, session, store):
        arrow = store.add(Arrow(x1=400, y1=100, x2=500, y2=150, cx=450, cy=50))
        session.pointer_down(450, 50)
        assert session.handle == Handle.CONTROL

        session.pointer_move(460, 20)
        assert arrow.control == (460, 20)
        assert arrow.start == (400, 100)
        assert arrow.end == (500, 150)

    def test_point_pick_moves_whole(self, session, store):
        pick = store.add(Pick(x1=700, y1=200, x2=700, y2=200))
        session.pointer_down(703, 200)
        session.pointer_move(713, 210)

        assert pick.start == (710, 210)
        assert pick.end == (710, 210)
        assert pick.is_point

    def test_line_pick_start(self, session, store):
        pick = store.add(Pick(x1=100, y1=100, x2=160, y2=100))
        session.pointer_down(100, 100)
        session.pointer_move(90, 80)
        assert pick.start == (90, 80)
        assert pick.end == (160, 100)


class TestZoneResize:
    def test_edge_drag_sets_radius_from_pointer(self, session, store):
        zone = store.add(Zone(x=600, y=300, radius=50))
        session.pointer_down(650, 300)
        assert session.handle == Handle.EDGE

        session.pointer_move(600, 380)
        assert zone.radius == pytest.approx(80)
        assert zone.center == (600, 300)

    def test_edge_drag_clamps_to_floor(self, session, store):
        """Dragging the edge to 10px from the center yields the floor, not 10."""
        zone = store.add(Zone(x=600, y=300, radius=50))
        session.pointer_down(650, 300)
        session.pointer_move(610, 300)
        assert zone.radius == ZONE_MIN_RADIUS

        session.pointer_move(600, 300)
        assert zone.radius == ZONE_MIN_RADIUS


class TestDragHistory:
    def test_one_snapshot_per_gesture(self, session, store, history):
        store.add(Player(x=100, y=100, team=Team.A))
        session.pointer_down(100, 100)
        for step in range(10):
            session.pointer_move(100 + step, 100)
        session.pointer_up()
        assert history.depth == 1

    def test_undo_reverts_whole_drag(self, session, store, history):
        store.add(Player(x=100, y=100, team=Team.A))
        session.pointer_down(100, 100)
        session.pointer_move(200, 200)
        session.pointer_move(300, 300)
        session.pointer_up()

        assert history.undo()
        assert store.players[0].position == (100, 100)


class TestZoneFloor:
    def test_floor_matches_zone_model_under_custom_settings(self, store, history):
        """Resizing and construction clamp to the same floor whatever the settings."""
        session = EditSession(store, history, BoardSettings(zone_edge_tolerance=10))
        zone = store.add(Zone(x=600, y=300, radius=50))
        session.pointer_down(655, 300)
        session.pointer_move(601, 300)

        assert zone.radius == ZONE_MIN_RADIUS
        assert Zone(x=0, y=0, radius=1).radius == zone.radius
