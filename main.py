"""
Console front-end for the TicTacToe engine.

This script ties together:
- Logic (board, move authorities, game engine)
- Observers (console renderings, translations)

Run it to play against the CPU, or with --demo to watch several
observers in different languages follow the same game.
"""

import sys
import time
import argparse
from typing import Callable, Optional

from logic.config import GameConfig
from logic.errors import ConfigurationError
from logic.game_engine import GameEngine
from logic.game_state import Player
from logic.logging_config import setup_logging, get_logger
from observers.console import OBSERVER_TYPES, create_observer
from observers.localization import available_languages, get_language


logger = get_logger(__name__)


class ConsoleGame:
    """
    Interactive game in the terminal.

    Game flow:
    1. The human enters a cell number (1-9) on their turn
    2. The engine validates it; the observer prints the result
    3. On the CPU's turn, wait a moment, then let it move
    4. Repeat until someone wins or it's a tie, then offer a rematch
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        ui: str = "decorated",
        input_func: Callable[[str], str] = input,
        out: Callable[[str], None] = print,
    ):
        """
        Initialize the console game.

        Args:
            config: Game configuration (CPU marker, language, delay...).
            ui: Observer style, see observers.console.OBSERVER_TYPES.
            input_func: Reads a line from the player.
            out: Writes a line to the player.
        """
        self.config = config or GameConfig()
        self.language = get_language(self.config.DEFAULT_LANGUAGE, self.config.LANGUAGE_FALLBACK)
        self.input_func = input_func
        self.out = out

        self.engine = GameEngine(config=self.config)
        self.engine.registry.subscribe("console", create_observer(ui, self.language, out))

    def start(self) -> None:
        """Play games until the player declines a rematch."""
        self.out(self.language.text("welcome"))

        while True:
            self.out(self.language.text("turn", player=self.engine.active_player))
            self._game_loop()

            answer = self.input_func(self.language.text("play_again"))
            if answer.strip().lower() not in ("y", "s", "o"):
                break
            self.engine.reset()

        self.out(self.language.text("goodbye"))

    def _game_loop(self) -> None:
        while self.engine.is_active:
            authority = self.engine.authority_for(self.engine.active_player)
            if authority.is_autonomous:
                self._cpu_move()
            else:
                self._human_move()

    def _human_move(self) -> None:
        answer = self.input_func(self.language.text("prompt_cell"))
        # Bad input is reported by the observer; the loop just asks again
        self.engine.submit_cell_id(answer)

    def _cpu_move(self) -> None:
        self.out(self.language.text("cpu_thinking"))
        if self.config.CPU_THINK_DELAY_S > 0:
            time.sleep(self.config.CPU_THINK_DELAY_S)
        move = self.engine.request_autonomous_move()
        logger.debug("CPU played %s", move)


def run_demo(out: Callable[[str], None] = print) -> GameEngine:
    """
    Four observers in four languages watching the same games.

    Plays a won game (with one attempt on an occupied cell), resets,
    drops one observer and plays a tied game.

    Returns:
        The engine, after the second game.
    """
    out("\n" + "🌟" * 50)
    out("🚀 DEMO: MULTI-UI / MULTI-LANGUAGE")
    out("🌟" * 50)

    engine = GameEngine()
    registry = engine.registry

    for name, kind, code in [
        ("es-minimal", "minimalist", "es"),
        ("en-decorated", "decorated", "en"),
        ("fr-debug", "debug", "fr"),
        ("pt-silent", "silent", "pt"),
    ]:
        registry.subscribe(name, create_observer(kind, get_language(code), out))
    _list_observers(engine, out)

    out("\n🎮 FIRST GAME...\n")
    engine.submit_move(0, 0)  # X
    engine.submit_move(1, 1)  # O
    engine.submit_move(0, 1)  # X
    engine.submit_move(1, 2)  # O
    engine.submit_move(0, 0)  # Occupied
    engine.submit_move(0, 2)  # X wins

    out("\n🔄 RESETTING...\n")
    engine.reset()
    registry.unsubscribe("fr-debug")
    _list_observers(engine, out)

    out("\n🎮 SECOND GAME...\n")
    for cell_id in [1, 5, 2, 3, 7, 4, 6, 9, 8]:
        engine.submit_cell_id(cell_id)

    out("\n🎯 DEMO COMPLETE\n")
    return engine


def _list_observers(engine: GameEngine, out: Callable[[str], None]) -> None:
    out("\n📱 ACTIVE UIs:")
    out("─" * 40)
    for name, kind in engine.registry.list():
        out(f"• {name}: {kind}")
    out("─" * 40)


def build_config(args: argparse.Namespace) -> GameConfig:
    """Turn command line arguments into a GameConfig."""
    config = GameConfig()
    config.AUTONOMOUS_PLAYER = None if args.cpu == "none" else Player.parse(args.cpu)
    config.CPU_THINK_DELAY_S = args.delay
    config.RANDOM_SEED = args.seed
    config.DEFAULT_LANGUAGE = args.lang
    config.LANGUAGE_FALLBACK = args.fallback_lang
    if args.log_level:
        config.LOG_LEVEL = args.log_level
    config.validate()
    return config


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run the multi-observer demonstration and exit"
    )
    parser.add_argument(
        "--cpu",
        choices=["x", "o", "none"],
        default="o",
        help="Marker played by the CPU (default: o, 'none' for two humans)"
    )
    parser.add_argument(
        "--ui",
        choices=sorted(OBSERVER_TYPES),
        default="decorated",
        help="Console style"
    )
    parser.add_argument(
        "--lang",
        default=GameConfig.DEFAULT_LANGUAGE,
        help=f"Language ({', '.join(available_languages())})"
    )
    parser.add_argument(
        "--fallback-lang",
        default=GameConfig.LANGUAGE_FALLBACK,
        help="Language to use if --lang is unknown (default: fail)"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.CPU_THINK_DELAY_S,
        help="Seconds the CPU 'thinks' before moving"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the CPU's random moves"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: TICTACTOE_LOG_LEVEL or WARNING)"
    )

    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except (ConfigurationError, ValueError) as e:
        parser.error(str(e))

    setup_logging(level=config.LOG_LEVEL, format_style=config.LOG_FORMAT)

    if args.demo:
        run_demo()
        return 0

    try:
        game = ConsoleGame(config=config, ui=args.ui)
    except ConfigurationError as e:
        parser.error(str(e))

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
