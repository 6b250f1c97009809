"""Test helpers for the TicTacToe tests."""

from logic.observer_registry import Observer


class RecordingObserver(Observer):
    """Observer that remembers every notification it receives."""

    def __init__(self):
        self.events = []

    @property
    def kinds(self):
        return [event.kind.value for event in self.events]

    def of_kind(self, kind):
        return [event for event in self.events if event.kind.value == kind]

    def clear(self):
        self.events = []

    def record(self, event):
        self.events.append(event)

    def on_invalid_move(self, event):
        self.record(event)

    def on_game_inactive(self, event):
        self.record(event)

    def on_move_made(self, event):
        self.record(event)

    def on_turn_changed(self, event):
        self.record(event)

    def on_game_won(self, event):
        self.record(event)

    def on_game_tied(self, event):
        self.record(event)

    def on_game_reset(self, event):
        self.record(event)


class FailingObserver(RecordingObserver):
    """Raises from every handler after recording the event."""

    def record(self, event):
        super().record(event)
        raise RuntimeError(f"boom on {event.kind.value}")
