"""Tests for the observer registry and the console observers."""

import logging

import pytest

from helpers import RecordingObserver, FailingObserver
from logic.errors import DuplicateObserverNameError, ConfigurationError
from logic.game_engine import GameEngine
from logic.game_state import Player
from logic.notifications import GameReset, NotificationKind
from logic.observer_registry import Observer, ObserverRegistry
from observers.console import (
    MinimalistObserver, DecoratedObserver, DebugObserver, SilentObserver, create_observer,
)
from observers.localization import get_language


class TestObserverInterface:

    def test_seven_handlers(self):
        assert {kind.handler_name for kind in NotificationKind} == {
            "on_invalid_move", "on_game_inactive", "on_move_made", "on_turn_changed",
            "on_game_won", "on_game_tied", "on_game_reset",
        }

    def test_incomplete_observer_cannot_be_created(self):
        class HalfDone(Observer):
            def on_move_made(self, event):
                pass

        with pytest.raises(TypeError):
            HalfDone()


class TestObserverRegistry:

    def test_subscribe_and_list(self):
        registry = ObserverRegistry()
        registry.subscribe("a", RecordingObserver())
        registry.subscribe("b", MinimalistObserver(out=lambda line: None))

        assert registry.list() == [("a", "RecordingObserver"), ("b", "minimalist (en)")]
        assert "a" in registry
        assert len(registry) == 2

    def test_duplicate_name_rejected(self):
        registry = ObserverRegistry()
        first = RecordingObserver()
        registry.subscribe("ui", first)

        with pytest.raises(DuplicateObserverNameError):
            registry.subscribe("ui", RecordingObserver())

        registry.notify(GameReset(first_player=Player.X))
        assert len(first.events) == 1

    def test_non_observer_rejected(self):
        with pytest.raises(TypeError):
            ObserverRegistry().subscribe("x", object())

    def test_unsubscribe_detaches(self):
        registry = ObserverRegistry()
        silent = SilentObserver(out=lambda line: None)
        silent.log.append("MOVE: X -> [0,0]")
        registry.subscribe("silent", silent)

        registry.unsubscribe("silent")

        assert silent.log == []
        assert registry.list() == []

    def test_detach_failure_is_logged(self, caplog):
        class Sticky(RecordingObserver):
            def detach(self):
                raise RuntimeError("cannot let go")

        registry = ObserverRegistry()
        registry.subscribe("sticky", Sticky())

        with caplog.at_level(logging.ERROR):
            registry.unsubscribe("sticky")

        assert "sticky" not in registry
        assert "cannot let go" in caplog.text

    def test_unsubscribe_unknown_is_noop(self):
        registry = ObserverRegistry()
        registry.unsubscribe("missing")
        assert len(registry) == 0

    def test_delivery_in_subscription_order(self):
        order = []

        class Tagged(RecordingObserver):
            def __init__(self, tag):
                super().__init__()
                self.tag = tag

            def record(self, event):
                order.append(self.tag)

        registry = ObserverRegistry()
        for tag in ("first", "second", "third"):
            registry.subscribe(tag, Tagged(tag))

        registry.notify(GameReset(first_player=Player.O))
        assert order == ["first", "second", "third"]

    def test_same_payload_to_everyone(self):
        registry = ObserverRegistry()
        a, b = RecordingObserver(), RecordingObserver()
        registry.subscribe("a", a)
        registry.subscribe("b", b)

        registry.notify(GameReset(first_player=Player.X))
        assert a.events[0] is b.events[0]

    def test_failing_observer_is_isolated(self, caplog):
        registry = ObserverRegistry()
        before, after = RecordingObserver(), RecordingObserver()
        registry.subscribe("before", before)
        registry.subscribe("broken", FailingObserver())
        registry.subscribe("after", after)

        with caplog.at_level(logging.ERROR):
            failed = registry.notify(GameReset(first_player=Player.X))

        assert failed == ["broken"]
        assert len(before.events) == 1
        assert len(after.events) == 1
        assert "broken" in caplog.text
        assert "boom on game_reset" in caplog.text

    def test_failing_observer_does_not_corrupt_engine(self, engine, recorder):
        engine.registry.subscribe("broken", FailingObserver())
        engine.registry.subscribe("late", RecordingObserver())

        for cell_id in [1, 5, 2, 9, 3]:
            engine.submit_cell_id(cell_id)

        assert engine.winner is Player.X
        assert engine.move_count == 5
        assert recorder.kinds[-2:] == ["move_made", "game_won"]

    def test_observer_unsubscribing_during_delivery(self):
        registry = ObserverRegistry()
        after = RecordingObserver()

        class Quitter(RecordingObserver):
            def record(self, event):
                super().record(event)
                registry.unsubscribe("quitter")

        registry.subscribe("quitter", Quitter())
        registry.subscribe("after", after)

        assert registry.notify(GameReset(first_player=Player.X)) == []
        assert len(after.events) == 1
        assert registry.list() == [("after", "RecordingObserver")]


def play_won_game(engine):
    for cell_id in [1, 5, 2, 9, 3]:
        engine.submit_cell_id(cell_id)


def play_tied_game(engine):
    for cell_id in [1, 5, 2, 3, 7, 4, 6, 9, 8]:
        engine.submit_cell_id(cell_id)


@pytest.fixture
def lines():
    return []


def watched_engine(observer):
    engine = GameEngine()
    engine.registry.subscribe("ui", observer)
    return engine


class TestConsoleObservers:

    def test_minimalist_in_spanish(self, lines):
        engine = watched_engine(MinimalistObserver(get_language("es"), lines.append))

        engine.submit_move(0, 0)
        assert lines[0] == "✅ X colocó en [0,0]"
        assert "0| X |   |   |" in lines
        assert lines[-1] == "🧩 Turno de O"

        engine.submit_move(0, 0)
        assert lines[-1] == "❌ ¡Posición inválida! Intenta de nuevo."

    def test_minimalist_win_and_inactive(self, lines):
        engine = watched_engine(MinimalistObserver(out=lines.append))
        play_won_game(engine)
        assert lines[-1] == "🏆 X WINS! Congratulations!"

        engine.submit_move(2, 2)
        assert lines[-1].startswith("⛔")

        engine.reset()
        assert lines[-1] == "🔄 Game reset"

    def test_decorated_board_and_win(self, lines):
        engine = watched_engine(DecoratedObserver(out=lines.append))
        play_won_game(engine)

        assert "0 │ ❌  │  ❌  │  ❌ │" in lines
        assert "🎉 🏆 X WINS! Congratulations! 🎉" in lines
        assert "📊 Moves: 5" in lines
        assert "Winning line: row 0" in lines

    def test_decorated_tie_in_portuguese(self, lines):
        engine = watched_engine(DecoratedObserver(get_language("pt"), lines.append))
        play_tied_game(engine)

        assert "💫 🤝 É um EMPATE! Bem jogado! 💫" in lines
        assert "📊 Jogadas: 9" in lines

    def test_debug_uses_payloads(self, lines):
        engine = watched_engine(DebugObserver(out=lines.append))
        engine.submit_move(1, 1)
        engine.submit_move(1, 1)

        assert "[DEBUG] MOVE EXECUTED - Player: X, Position: [1,1], Move #1" in lines
        assert '[DEBUG] Board array: [["", "", ""], ["", "X", ""], ["", "", ""]]' in lines
        assert any(line.startswith("[DEBUG] INVALID MOVE - Player: O") for line in lines)
        assert any("Reason: cell_occupied" in line for line in lines)

    def test_debug_history_on_win(self, lines):
        engine = watched_engine(DebugObserver(out=lines.append))
        play_won_game(engine)

        assert "[DEBUG] GAME WON - Winner: X, Total moves: 5" in lines
        assert "[DEBUG] Move history: X@(0,0), O@(1,1), X@(0,1), O@(2,2), X@(0,2)" in lines

    def test_silent_prints_only_at_end(self, lines):
        engine = watched_engine(SilentObserver(out=lines.append))
        engine.submit_move(0, 0)
        engine.submit_move(0, 0)
        assert lines == []

        engine.reset()
        play_tied_game(engine)
        assert lines[0] == "📋 GAME LOG:"
        assert "MOVE: X -> [0,0]" in lines
        assert "TIE: after 9 moves" in lines
        assert lines.count("MOVE: X -> [0,0]") == 1

    def test_factory(self):
        observer = create_observer("debug", get_language("fr"), out=lambda line: None)
        assert isinstance(observer, DebugObserver)
        assert observer.kind == "debug (fr)"

        with pytest.raises(ConfigurationError):
            create_observer("holographic")

    def test_many_observers_one_game(self, lines):
        engine = GameEngine()
        outputs = {}
        for kind, code in [("minimalist", "es"), ("decorated", "en"), ("debug", "fr"), ("silent", "pt")]:
            outputs[kind] = []
            engine.registry.subscribe(
                f"{code}-{kind}", create_observer(kind, get_language(code), outputs[kind].append)
            )

        play_won_game(engine)

        assert "🏆 ¡X GANA! ¡Felicidades!" in outputs["minimalist"]
        assert "🎉 🏆 X WINS! Congratulations! 🎉" in outputs["decorated"]
        assert "[DEBUG] GAME WON - Winner: X, Total moves: 5" in outputs["debug"]
        assert "WIN: X in 5 moves" in outputs["silent"]
