"""
Observer interface and registry for engine notifications.

Any number of named observers can watch one engine. Each notification
is delivered to every observer in subscription order; an observer that
raises is logged and skipped so the rest still hear about the move.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Tuple

from .errors import DuplicateObserverNameError
from .logging_config import get_logger
from .notifications import (
    Notification, InvalidMove, GameInactive, MoveMade, TurnChanged,
    GameWon, GameTied, GameReset,
)


logger = get_logger(__name__)


class Observer(ABC):
    """
    Something that reacts to engine notifications.

    Implement all seven handlers. Observers get snapshots, never the
    engine's own board, and their return values are ignored.
    """

    @property
    def kind(self) -> str:
        """Short description shown by ObserverRegistry.list()."""
        return type(self).__name__

    @abstractmethod
    def on_invalid_move(self, event: InvalidMove) -> None: ...

    @abstractmethod
    def on_game_inactive(self, event: GameInactive) -> None: ...

    @abstractmethod
    def on_move_made(self, event: MoveMade) -> None: ...

    @abstractmethod
    def on_turn_changed(self, event: TurnChanged) -> None: ...

    @abstractmethod
    def on_game_won(self, event: GameWon) -> None: ...

    @abstractmethod
    def on_game_tied(self, event: GameTied) -> None: ...

    @abstractmethod
    def on_game_reset(self, event: GameReset) -> None: ...

    def detach(self) -> None:
        """Called once when the observer is unsubscribed."""


class ObserverRegistry:
    """
    Named observers, kept in subscription order.
    """

    def __init__(self):
        self._observers: Dict[str, Observer] = {}

    def subscribe(self, name: str, observer: Observer) -> None:
        """
        Register an observer under a unique name.

        Raises:
            DuplicateObserverNameError: If the name is taken.
            TypeError: If observer does not implement Observer.
        """
        if name in self._observers:
            raise DuplicateObserverNameError(name)
        if not isinstance(observer, Observer):
            raise TypeError(f"{observer!r} is not an Observer")

        self._observers[name] = observer
        logger.info("Subscribed observer '%s' (%s)", name, observer.kind)

    def unsubscribe(self, name: str) -> None:
        """
        Remove and detach an observer. Unknown names are ignored, and an
        error raised by detach() is logged, not propagated.
        """
        observer = self._observers.pop(name, None)
        if observer is None:
            return

        try:
            observer.detach()
        except Exception:
            logger.exception("Observer '%s' failed to detach", name)
        logger.info("Unsubscribed observer '%s'", name)

    def list(self) -> List[Tuple[str, str]]:
        """(name, kind) for every observer, in subscription order."""
        return [(name, observer.kind) for name, observer in self._observers.items()]

    def __contains__(self, name: str) -> bool:
        return name in self._observers

    def __len__(self) -> int:
        return len(self._observers)

    def notify(self, notification: Notification) -> List[str]:
        """
        Deliver a notification to every observer.

        Args:
            notification: The payload; the same object goes to everyone.

        Returns:
            Names of observers whose handler raised.
        """
        handler_name = notification.kind.handler_name
        failed = []

        # Copy so an observer unsubscribing mid-delivery doesn't break the loop
        for name, observer in list(self._observers.items()):
            try:
                getattr(observer, handler_name)(notification)
            except Exception:
                logger.exception(
                    "Observer '%s' failed handling %s", name, notification.kind.value
                )
                failed.append(name)

        return failed
