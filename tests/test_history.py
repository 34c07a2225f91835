"""Tests for undo/redo."""

from playboard.models import Team, new_player, new_zone
from playboard.services import HistoryManager


class TestHistoryManager:
    def test_undo_and_redo_on_empty_stacks_are_noops(self, history, store):
        assert not history.undo()
        assert not history.redo()
        assert store.is_empty

    def test_undo_restores_previous_document(self, history, store):
        before = store.snapshot()
        history.snapshot_before_change()
        store.add(new_player(Team.A))

        assert history.undo()
        assert store.document == before
        assert history.can_redo

    def test_redo_restores_post_change_document(self, history, store):
        history.snapshot_before_change()
        store.add(new_player(Team.A))
        after = store.snapshot()

        history.undo()
        assert history.redo()
        assert store.document == after
        assert not history.can_redo

    def test_new_change_clears_redo(self, history, store):
        """Linear history: a fresh change after undo discards forward states."""
        history.snapshot_before_change()
        store.add(new_player(Team.A))
        history.undo()

        history.snapshot_before_change()
        store.add(new_zone())

        assert not history.can_redo
        assert not history.redo()
        assert len(store.zones) == 1
        assert store.players == []

    def test_snapshots_do_not_alias_live_entities(self, history, store):
        player = store.add(new_player(Team.A))
        history.snapshot_before_change()
        player.move_to(400, 400)

        history.undo()
        assert store.players[0].position == (100.0, 100.0)
        assert store.players[0] is not player

    def test_undo_notifies(self, history, store):
        calls = []
        store.add_listener(calls.append)
        history.snapshot_before_change()
        store.add(new_player(Team.A))
        history.undo()
        history.redo()
        assert len(calls) == 2

    def test_limit_drops_oldest(self, store):
        history = HistoryManager(store, limit=2)
        for _ in range(5):
            history.snapshot_before_change()
            store.add(new_zone())

        assert history.depth == 2
        assert history.undo()
        assert history.undo()
        assert not history.undo()
        assert len(store.zones) == 3

    def test_clear(self, history, store):
        history.snapshot_before_change()
        history.clear()
        assert not history.can_undo
