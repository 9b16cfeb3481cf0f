"""
Console boundary for Magic Squares.

Prompting, line reading and announcements live here. Everything takes
``read``/``write`` callables (``input``/``print`` by default) so games can be
driven from scripted input in tests.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .choices import ChoiceSet
from .engine import Draw, GameEngine, GameState, Won
from .errors import MalformedInput
from .layout import LAYOUT, MAX_NUMBER, MIN_NUMBER, check_number

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

RULE = "***********************************"

DIRECTIONS = [
    "Welcome to the game of Magic Squares",
    RULE,
    "Rules:",
    "2 players play the game.",
    "Each player takes turns picking a number from 1-9.",
    "No number can be chosen twice.",
    "The first player to have 3 numbers that sum to 15 wins!",
    *(" ".join(str(n) for n in LAYOUT[i:i + 3]) for i in range(0, len(LAYOUT), 3)),
    RULE,
    "",
]

RANGE_MESSAGE = f"Please enter a choice between {MIN_NUMBER} and {MAX_NUMBER}..."
DUPLICATE_MESSAGE = "Please make a selection that hasn't already been chosen."
DRAW_MESSAGE = "The game is a draw!"


@dataclass
class PlayConfig:
    player1: Optional[str] = None
    player2: Optional[str] = None
    placeholder: str = "_"


def print_directions(write: Writer = print) -> None:
    for line in DIRECTIONS:
        write(line)


def read_name(player_number: int, read: Reader = input, write: Writer = print) -> str:
    write(f"Please enter player name for player number {player_number}")
    name = read("").strip()
    return name or f"Player {player_number}"


def parse_selection(text: str) -> int:
    raw = (text or "").strip()
    try:
        return int(raw)
    except ValueError:
        raise MalformedInput(f"Not a number: {raw!r}") from None


def read_selection(engine: GameEngine, read: Reader = input, write: Writer = print) -> int:
    """Prompt the active player until they enter an available number.

    Each rejected line produces one message and one new prompt. Nothing is
    claimed here; the caller hands the result to ``engine.play``.
    """
    player = engine.active
    if player is None:
        raise ValueError("No player is awaiting a move")
    while True:
        write(f"{player.label}, please enter a number: ")
        line = read("")
        try:
            n = check_number(parse_selection(line))
        except ValueError as e:
            # MalformedInput and InvalidSelection are both ValueErrors
            logger.debug("rejected input %r: %s", line, e)
            write(RANGE_MESSAGE)
            continue
        if not engine.is_available(n):
            logger.debug("rejected duplicate selection %d", n)
            write(DUPLICATE_MESSAGE)
            continue
        return n


def announce(engine: GameEngine, state: GameState) -> str:
    if isinstance(state, Won):
        return f"Player {engine.player_number(state.player)} wins!"
    if isinstance(state, Draw):
        return DRAW_MESSAGE
    raise ValueError(f"Game is still in progress: {state!r}")


def play(
    engine: Optional[GameEngine] = None,
    read: Reader = input,
    write: Writer = print,
    config: Optional[PlayConfig] = None,
) -> GameState:
    """Run a full game on the console and return the terminal state."""
    cfg = config or PlayConfig()
    print_directions(write)
    if engine is None:
        name1 = cfg.player1 or read_name(1, read, write)
        name2 = cfg.player2 or read_name(2, read, write)
        engine = GameEngine(ChoiceSet(name1), ChoiceSet(name2))

    while not engine.is_over:
        mover = engine.active
        n = read_selection(engine, read, write)
        engine.play(n)
        write(mover.render(placeholder=cfg.placeholder))

    write(announce(engine, engine.state))
    return engine.state
