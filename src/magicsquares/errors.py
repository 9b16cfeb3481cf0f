"""Exceptions raised by the magicsquares package."""


class MagicSquaresError(Exception):
    pass


class InvalidSelection(MagicSquaresError, ValueError):
    """A number outside 1..9 was claimed or looked up."""


class MalformedInput(MagicSquaresError, ValueError):
    """Text at the console boundary that does not parse as an integer."""


class GameOver(MagicSquaresError):
    """A move was submitted after the game reached a win or a draw."""
