"""magicsquares package.

A two-player number-picking game: claim numbers 1-9, and the first player
holding three that sum to 15 wins.

Convenience imports are exposed for common workflows.
"""

from .choices import ChoiceSet
from .engine import AwaitingMove, Draw, GameEngine, Won
from .errors import GameOver, InvalidSelection, MagicSquaresError, MalformedInput
from .layout import LAYOUT, WIN_MASKS, WIN_TRIPLES, is_draw, is_win

__all__ = [
    "ChoiceSet",
    "GameEngine",
    "AwaitingMove",
    "Won",
    "Draw",
    "MagicSquaresError",
    "InvalidSelection",
    "MalformedInput",
    "GameOver",
    "LAYOUT",
    "WIN_TRIPLES",
    "WIN_MASKS",
    "is_win",
    "is_draw",
]
