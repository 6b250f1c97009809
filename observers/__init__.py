"""
Observers module for TicTacToe.
Console front-ends and their translation tables.
"""

from .localization import Language, get_language, available_languages
from .console import (
    MinimalistObserver, DecoratedObserver, DebugObserver, SilentObserver, create_observer,
)
