"""
One player's claimed numbers, held as a 9-bit set.
Teaching notes:
- Bit i stands for number i+1, so claiming 2, 9 and 4 gives 0b100001010.
- Bits are only ever set during a game; there is no unclaim.
"""
from __future__ import annotations

from typing import List, Sequence

from .layout import LAYOUT, bit_for, numbers_of


class ChoiceSet:
    """Numbers 1..9 claimed by a single player.

    Only the owning player's claims are tracked here. Whether a number is still
    free for *either* player is a question for the engine, which holds both sets.
    """

    def __init__(self, label: str = "") -> None:
        self._label = label
        self._bits = 0

    def __repr__(self) -> str:
        return f"ChoiceSet(label={self.label!r}, numbers={self.numbers()})"

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    @property
    def label(self) -> str:
        return self._label

    def rename(self, label: str) -> None:
        self._label = label

    def claim(self, n: int) -> bool:
        """Claim number n for this player.

        Raises InvalidSelection if n is outside 1..9. Returns False, without
        changing anything, if n was already claimed by this set.
        """
        mask = bit_for(n)
        if self._bits & mask:
            return False
        self._bits |= mask
        return True

    def has_claimed(self, n: int) -> bool:
        mask = bit_for(n)
        return (self._bits & mask) == mask

    def bits(self) -> int:
        return self._bits

    def numbers(self) -> List[int]:
        return numbers_of(self._bits)

    def render(self, layout: Sequence[int] = LAYOUT, placeholder: str = "_") -> str:
        cells = [str(n) if self.has_claimed(n) else placeholder for n in layout]
        return "\n".join(" ".join(cells[i:i + 3]) for i in range(0, len(cells), 3))
