"""
Turn protocol for Magic Squares.

The engine owns both players' ChoiceSets, applies one validated number per
turn and decides after each move whether the mover has won, the board is
exhausted (draw), or play passes to the other player.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .choices import ChoiceSet
from .errors import GameOver
from .layout import MAX_NUMBER, MIN_NUMBER, check_number, is_draw, winning_triple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AwaitingMove:
    player: ChoiceSet


@dataclass(frozen=True)
class Won:
    player: ChoiceSet
    triple: Tuple[int, ...]


@dataclass(frozen=True)
class Draw:
    pass


GameState = Union[AwaitingMove, Won, Draw]


class GameEngine:
    def __init__(self, player1: ChoiceSet, player2: ChoiceSet) -> None:
        if player1 is player2:
            raise ValueError("Both players must have their own ChoiceSet")
        if player1.bits() & player2.bits():
            raise ValueError("Players cannot start with overlapping claims")
        self._players = (player1, player2)
        self._state: GameState = AwaitingMove(player1)
        self._moves: List[Tuple[int, int]] = []

    @property
    def players(self) -> Tuple[ChoiceSet, ChoiceSet]:
        return self._players

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_over(self) -> bool:
        return not isinstance(self._state, AwaitingMove)

    @property
    def active(self) -> Optional[ChoiceSet]:
        if isinstance(self._state, AwaitingMove):
            return self._state.player
        return None

    @property
    def winner(self) -> Optional[ChoiceSet]:
        if isinstance(self._state, Won):
            return self._state.player
        return None

    @property
    def moves(self) -> List[Tuple[int, int]]:
        return list(self._moves)

    def player_number(self, player: ChoiceSet) -> int:
        for i, p in enumerate(self._players, start=1):
            if p is player:
                return i
        raise ValueError(f"{player!r} is not playing in this game")

    def opponent(self, player: ChoiceSet) -> ChoiceSet:
        p1, p2 = self._players
        return p2 if player is p1 else p1

    def is_available(self, n: int) -> bool:
        """True if n is in range and neither player has claimed it."""
        if isinstance(n, bool) or not isinstance(n, int) or not MIN_NUMBER <= n <= MAX_NUMBER:
            return False
        return not any(p.has_claimed(n) for p in self._players)

    def play(self, n: int) -> GameState:
        """Claim n for the active player and advance the game.

        Out-of-range numbers raise InvalidSelection. A number already held by
        either player leaves everything untouched and returns the current state.
        """
        mover = self.active
        if mover is None:
            raise GameOver(f"Game already finished: {self._state!r}")
        n = check_number(n)
        if not self.is_available(n):
            logger.debug("duplicate selection ignored: number=%d", n)
            return self._state

        mover.claim(n)
        num = self.player_number(mover)
        self._moves.append((num, n))
        logger.debug("player=%d number=%d bits=%s", num, n, format(mover.bits(), "09b"))

        triple = winning_triple(mover.bits())
        if triple is not None:
            self._state = Won(mover, triple)
            logger.info("player %d wins with %s", num, triple)
        elif is_draw(*(p.bits() for p in self._players)):
            self._state = Draw()
            logger.info("draw after %d moves", len(self._moves))
        else:
            self._state = AwaitingMove(self.opponent(mover))
        return self._state
