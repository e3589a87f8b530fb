"""Tests for the event manager."""

import pytest

from tictactoe_sim.engine.event_system import EventContext, GameEvent, GameEventManager
from tictactoe_sim.models.game.player import Player


class TestGameEventManager:
    """Test subscription and dispatch."""

    def setup_method(self):
        self.manager = GameEventManager()
        self.calls = []

    def test_listeners_called_in_subscription_order(self):
        self.manager.subscribe(GameEvent.MOVE_MADE, lambda ctx: self.calls.append("first"))
        self.manager.subscribe(GameEvent.MOVE_MADE, lambda ctx: self.calls.append("second"))

        self.manager.emit(GameEvent.MOVE_MADE, 0, 0, Player.A)

        assert self.calls == ["first", "second"]

    def test_only_matching_event_type_is_delivered(self):
        self.manager.subscribe(GameEvent.WIN, self.calls.append)
        self.manager.emit(GameEvent.MOVE_MADE, 0, 0, Player.A)
        self.manager.emit(GameEvent.DRAW, 0, 0, Player.A)
        assert self.calls == []

    def test_emit_builds_context(self):
        self.manager.subscribe(GameEvent.WIN, self.calls.append)
        returned = self.manager.emit(GameEvent.WIN, 1, 2, Player.B, line="row")

        context = self.calls[0]
        assert context is returned
        assert context.event_type is GameEvent.WIN
        assert (context.row, context.col, context.player) == (1, 2, Player.B)
        assert context.additional_data == {"line": "row"}
        assert self.manager.last_event is context

    def test_unsubscribe(self):
        listener = self.calls.append
        self.manager.subscribe(GameEvent.DRAW, listener)
        assert self.manager.listener_count(GameEvent.DRAW) == 1

        self.manager.unsubscribe(GameEvent.DRAW, listener)
        self.manager.emit(GameEvent.DRAW)

        assert self.calls == []
        assert self.manager.listener_count(GameEvent.DRAW) == 0

    def test_unsubscribe_unknown_listener_is_ignored(self):
        self.manager.unsubscribe(GameEvent.WIN, self.calls.append)
        assert self.manager.listener_count(GameEvent.WIN) == 0

    def test_listener_may_unsubscribe_during_dispatch(self):
        def once(ctx):
            self.calls.append("once")
            self.manager.unsubscribe(GameEvent.MOVE_MADE, once)

        self.manager.subscribe(GameEvent.MOVE_MADE, once)
        self.manager.subscribe(GameEvent.MOVE_MADE, lambda ctx: self.calls.append("always"))

        self.manager.emit(GameEvent.MOVE_MADE)
        self.manager.emit(GameEvent.MOVE_MADE)

        assert self.calls == ["once", "always", "always"]

    def test_listener_errors_propagate(self):
        def broken(ctx):
            raise RuntimeError("listener failed")

        self.manager.subscribe(GameEvent.MOVE_MADE, broken)
        with pytest.raises(RuntimeError, match="listener failed"):
            self.manager.emit(GameEvent.MOVE_MADE)

    def test_trigger_event_fills_in_game_state(self):
        sentinel = object()
        manager = GameEventManager(sentinel)
        context = EventContext(event_type=GameEvent.MOVE_MADE)
        manager.trigger_event(context)
        assert context.game_state is sentinel

    def test_clear(self):
        self.manager.subscribe(GameEvent.WIN, self.calls.append)
        self.manager.clear()
        assert self.manager.listener_count(GameEvent.WIN) == 0
