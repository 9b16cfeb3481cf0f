"""
Tactics and simple motifs: immediate wins/blocks, forks, safety checks.
Teaching notes:
- Positions are two disjoint 9-bit sets: the side to move and the other side.
- These helpers only describe a position; nothing here picks a move for a player.
"""
from typing import List

from .layout import FULL_MASK, bit_for, is_win, numbers_of


def available_numbers(own_bits: int, other_bits: int) -> List[int]:
    return numbers_of(FULL_MASK & ~(own_bits | other_bits))


def immediate_winning_numbers(own_bits: int, other_bits: int) -> List[int]:
    wins: List[int] = []
    for n in available_numbers(own_bits, other_bits):
        if is_win(own_bits | bit_for(n)):
            wins.append(n)
    return wins


def fork_numbers(own_bits: int, other_bits: int) -> List[int]:
    forks: List[int] = []
    for n in available_numbers(own_bits, other_bits):
        if len(immediate_winning_numbers(own_bits | bit_for(n), other_bits)) >= 2:
            forks.append(n)
    return forks


def gives_opponent_immediate_win(own_bits: int, other_bits: int, n: int) -> bool:
    mask = bit_for(n)
    if (own_bits | other_bits) & mask:
        return False
    return len(immediate_winning_numbers(other_bits, own_bits | mask)) > 0
