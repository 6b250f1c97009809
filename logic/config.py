"""
Configuration for the TicTacToe engine and its front-ends.
Change these values, or subclass GameConfig and override them.
"""

import os
from typing import Optional

from .errors import ConfigurationError
from .game_state import Player


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== PLAYERS ====================
    # Who moves first after construction and after every reset
    FIRST_PLAYER = Player.X

    # Marker played by the autonomous (CPU) authority; None = two humans
    AUTONOMOUS_PLAYER: Optional[Player] = None

    # Seed for the CPU's random fallback moves (None = system entropy)
    RANDOM_SEED: Optional[int] = None

    # Simulated "thinking" pause before a CPU move. Only the CLI sleeps;
    # the engine and the authority never do.
    CPU_THINK_DELAY_S = 1.0

    # ==================== LANGUAGE ====================
    DEFAULT_LANGUAGE = "en"

    # Table used when a requested language is unknown.
    # None means unknown languages are an error.
    LANGUAGE_FALLBACK: Optional[str] = None

    # ==================== LOGGING ====================
    LOG_LEVEL = os.getenv("TICTACTOE_LOG_LEVEL", "WARNING")
    LOG_FORMAT = "simple"  # "simple" or "detailed"

    def validate(self) -> None:
        """
        Check the settings are consistent.

        Raises:
            ConfigurationError: If a value is unusable.
        """
        if not isinstance(self.FIRST_PLAYER, Player):
            raise ConfigurationError(f"FIRST_PLAYER must be a Player, got {self.FIRST_PLAYER!r}")
        if self.AUTONOMOUS_PLAYER is not None and not isinstance(self.AUTONOMOUS_PLAYER, Player):
            raise ConfigurationError(
                f"AUTONOMOUS_PLAYER must be a Player or None, got {self.AUTONOMOUS_PLAYER!r}"
            )
        if self.CPU_THINK_DELAY_S < 0:
            raise ConfigurationError("CPU_THINK_DELAY_S cannot be negative")
