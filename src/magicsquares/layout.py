"""
Layout and winning triples for Magic Squares.
Teaching notes:
- The numbers 1..9 sit in the classic order-3 magic square, so every row, column
  and diagonal sums to 15. Those 8 lines are exactly the winning triples.
- A player's claims are a 9-bit integer: bit i is set when number i+1 is held.
  A triple is won when (bits & mask) == mask.
"""
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .errors import InvalidSelection

LAYOUT: Tuple[int, ...] = (
    2, 7, 6,
    9, 5, 1,
    4, 3, 8,
)

MIN_NUMBER = 1
MAX_NUMBER = 9
TARGET_SUM = 15
FULL_MASK = (1 << MAX_NUMBER) - 1  # 0b111111111 == 511


def _lines_by_type(layout: Tuple[int, ...]) -> Dict[str, List[Tuple[int, ...]]]:
    grid = np.array(layout, dtype=int).reshape(3, 3)
    return {
        'row': [tuple(int(v) for v in r) for r in grid],
        'col': [tuple(int(v) for v in c) for c in grid.T],
        'diag': [
            tuple(int(v) for v in np.diag(grid)),
            tuple(int(v) for v in np.diag(np.fliplr(grid))),
        ],
    }


WIN_TRIPLES_BY_TYPE = _lines_by_type(LAYOUT)
WIN_TRIPLES: List[Tuple[int, ...]] = [t for lines in WIN_TRIPLES_BY_TYPE.values() for t in lines]


def check_number(n: int) -> int:
    # bool is an int subclass; True would otherwise pass as 1
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidSelection(f"Selection must be an integer between {MIN_NUMBER} and {MAX_NUMBER}, got {n!r}")
    if n < MIN_NUMBER or n > MAX_NUMBER:
        raise InvalidSelection(f"Please select a number between {MIN_NUMBER} and {MAX_NUMBER}, got {n}")
    return int(n)


def bit_for(n: int) -> int:
    return 1 << (check_number(n) - 1)


def mask_of(numbers: Iterable[int]) -> int:
    mask = 0
    for n in numbers:
        mask |= bit_for(n)
    return mask


def numbers_of(mask: int) -> List[int]:
    return [n for n in range(MIN_NUMBER, MAX_NUMBER + 1) if mask & (1 << (n - 1))]


WIN_MASKS: List[int] = [mask_of(t) for t in WIN_TRIPLES]


def winning_triple(bits: int) -> Optional[Tuple[int, ...]]:
    for triple, mask in zip(WIN_TRIPLES, WIN_MASKS):
        if bits & mask == mask:
            return triple
    return None


def is_win(bits: int) -> bool:
    return winning_triple(bits) is not None


def is_draw(bits_a: int, bits_b: int) -> bool:
    """All nine numbers are claimed between the two players.

    A win takes precedence; callers check is_win first.
    """
    return (bits_a | bits_b) == FULL_MASK
