"""
Localization for TicTacToe front-ends.

Each language is a table of format strings keyed by message name.
Observers pick a table by code; the engine never sees any of this.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass

from logic.errors import UnknownLanguageError
from logic.logging_config import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class Language:
    """A translation table for one language."""
    code: str
    name: str
    strings: Dict[str, str]

    def text(self, key: str, **values) -> str:
        """
        Format one message.

        Args:
            key: Message name, e.g. "winner".
            **values: Fields used by the message, e.g. player="X".

        Returns:
            The formatted string.
        """
        return self.strings[key].format(**values)


ENGLISH = Language("en", "English", {
    "welcome": "🎮 TIC TAC TOE - Multi-UI System",
    "turn": "🧩 {player}'s turn",
    "invalid_move": "❌ Invalid position! Try again.",
    "game_inactive": "⛔ The game is over. Start a new one to keep playing.",
    "winner": "🏆 {player} WINS! Congratulations!",
    "tied": "🤝 It's a TIE! Well played both!",
    "board_header": "  0   1   2",
    "cell_separator": "-----------",
    "reset": "🔄 Game reset",
    "move_made": "✅ {player} placed at [{row},{col}]",
    "moves": "📊 Moves: {count}",
    "orientation_row": "row",
    "orientation_column": "column",
    "orientation_diagonal_main": "main diagonal",
    "orientation_diagonal_anti": "anti-diagonal",
    "winning_line": "Winning line: {orientation} {index}",
    "prompt_cell": "Enter a number from 1-9: ",
    "cpu_thinking": "🤖 CPU is thinking...",
    "play_again": "Play again? [y/N]: ",
    "goodbye": "Goodbye! 👋",
})

SPANISH = Language("es", "Español", {
    "welcome": "🎮 TRES EN RAYA - Sistema Multi-UI",
    "turn": "🧩 Turno de {player}",
    "invalid_move": "❌ ¡Posición inválida! Intenta de nuevo.",
    "game_inactive": "⛔ El juego terminó. Inicia uno nuevo para seguir jugando.",
    "winner": "🏆 ¡{player} GANA! ¡Felicidades!",
    "tied": "🤝 ¡Es un EMPATE! ¡Bien jugado!",
    "board_header": "  0   1   2",
    "cell_separator": "-----------",
    "reset": "🔄 Juego reiniciado",
    "move_made": "✅ {player} colocó en [{row},{col}]",
    "moves": "📊 Movimientos: {count}",
    "orientation_row": "fila",
    "orientation_column": "columna",
    "orientation_diagonal_main": "diagonal principal",
    "orientation_diagonal_anti": "diagonal secundaria",
    "winning_line": "Línea ganadora: {orientation} {index}",
    "prompt_cell": "Ingrese un número de 1-9: ",
    "cpu_thinking": "🤖 Turno de la CPU...",
    "play_again": "¿Jugar de nuevo? [s/N]: ",
    "goodbye": "¡Hasta luego! 👋",
})

FRENCH = Language("fr", "Français", {
    "welcome": "🎮 MORPION - Système Multi-UI",
    "turn": "🧩 Tour de {player}",
    "invalid_move": "❌ Position invalide ! Réessayez.",
    "game_inactive": "⛔ La partie est terminée. Commencez-en une nouvelle.",
    "winner": "🏆 {player} GAGNE ! Félicitations !",
    "tied": "🤝 Match NUL ! Bien joué !",
    "board_header": "  0   1   2",
    "cell_separator": "-----------",
    "reset": "🔄 Jeu réinitialisé",
    "move_made": "✅ {player} placé à [{row},{col}]",
    "moves": "📊 Coups : {count}",
    "orientation_row": "ligne",
    "orientation_column": "colonne",
    "orientation_diagonal_main": "diagonale principale",
    "orientation_diagonal_anti": "diagonale secondaire",
    "winning_line": "Ligne gagnante : {orientation} {index}",
    "prompt_cell": "Entrez un nombre de 1 à 9 : ",
    "cpu_thinking": "🤖 Le CPU réfléchit...",
    "play_again": "Rejouer ? [o/N] : ",
    "goodbye": "Au revoir ! 👋",
})

PORTUGUESE = Language("pt", "Português", {
    "welcome": "🎮 JOGO DA VELHA - Sistema Multi-UI",
    "turn": "🧩 Vez de {player}",
    "invalid_move": "❌ Posição inválida! Tente novamente.",
    "game_inactive": "⛔ O jogo terminou. Comece um novo para continuar.",
    "winner": "🏆 {player} GANHOU! Parabéns!",
    "tied": "🤝 É um EMPATE! Bem jogado!",
    "board_header": "  0   1   2",
    "cell_separator": "-----------",
    "reset": "🔄 Jogo reiniciado",
    "move_made": "✅ {player} colocou em [{row},{col}]",
    "moves": "📊 Jogadas: {count}",
    "orientation_row": "linha",
    "orientation_column": "coluna",
    "orientation_diagonal_main": "diagonal principal",
    "orientation_diagonal_anti": "diagonal secundária",
    "winning_line": "Linha vencedora: {orientation} {index}",
    "prompt_cell": "Digite um número de 1-9: ",
    "cpu_thinking": "🤖 Vez da CPU...",
    "play_again": "Jogar de novo? [s/N]: ",
    "goodbye": "Até logo! 👋",
})

LANGUAGES: Dict[str, Language] = {
    language.code: language for language in (ENGLISH, SPANISH, FRENCH, PORTUGUESE)
}


def available_languages() -> List[str]:
    """Codes of every language with a table."""
    return list(LANGUAGES)


def get_language(code: str, fallback: Optional[str] = None) -> Language:
    """
    Look up a translation table.

    Args:
        code: Language code, e.g. "es" (case-insensitive).
        fallback: Code to use when `code` is unknown. None means fail.

    Returns:
        The Language table.

    Raises:
        UnknownLanguageError: If neither code nor fallback has a table.
    """
    language = LANGUAGES.get(str(code).strip().lower())
    if language is not None:
        return language

    if fallback is None:
        raise UnknownLanguageError(code)

    fallback_language = LANGUAGES.get(str(fallback).strip().lower())
    if fallback_language is None:
        raise UnknownLanguageError(fallback)

    logger.warning("No translations for %r, falling back to %r", code, fallback_language.code)
    return fallback_language
