from __future__ import annotations

import argparse
import logging
from typing import List, Tuple

from .console import PlayConfig, play
from .errors import InvalidSelection, MagicSquaresError, MalformedInput
from .layout import WIN_TRIPLES_BY_TYPE, is_draw, mask_of, winning_triple
from .tactics import (
    available_numbers,
    fork_numbers,
    gives_opponent_immediate_win,
    immediate_winning_numbers,
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="magicsquares", description="Magic Squares: pick numbers that sum to 15")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    p_play = sub.add_parser("play", help="Play a two-player game on the console (default)")
    p_play.add_argument("--player1", help="Name for player 1 (skips the prompt)")
    p_play.add_argument("--player2", help="Name for player 2 (skips the prompt)")
    p_play.add_argument(
        "--placeholder", default="_", help="Glyph shown for unclaimed numbers (default: _)"
    )

    # position analysis
    for name, help_text in (
        ("status", "Report win/draw/turn for a position"),
        ("tactics", "List immediate wins and forks for the side to move"),
    ):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("--p1", default="", help='Numbers held by player 1, e.g. "2,9"')
        sp.add_argument("--p2", default="", help='Numbers held by player 2, e.g. "7"')

    sub.add_parser("triples", help="List the eight winning triples")
    return p


def parse_numbers(raw: str) -> List[int]:
    out: List[int] = []
    for tok in raw.split(","):
        tok = tok.strip()
        if not tok:
            continue
        try:
            out.append(int(tok))
        except ValueError:
            raise MalformedInput(f"Not a number: {tok!r}") from None
    return out


def load_position(p1_raw: str, p2_raw: str) -> Tuple[int, int]:
    """Parse and validate two claim lists; returns (p1_bits, p2_bits).

    Player 1 always moves first, so a reachable position has either equal
    counts or one extra number for player 1, and at most one winner, who
    made the last move.
    """
    p1 = parse_numbers(p1_raw)
    p2 = parse_numbers(p2_raw)
    if len(set(p1)) != len(p1) or len(set(p2)) != len(p2):
        raise InvalidSelection("A player cannot claim the same number twice")
    b1, b2 = mask_of(p1), mask_of(p2)
    if b1 & b2:
        raise InvalidSelection("Players cannot share a number")
    if not (len(p1) == len(p2) or len(p1) == len(p2) + 1):
        raise InvalidSelection(f"Unreachable move counts: p1={len(p1)} p2={len(p2)}")
    w1, w2 = winning_triple(b1), winning_triple(b2)
    if w1 is not None and w2 is not None:
        raise InvalidSelection("Both players cannot hold a winning triple")
    # the game stops on the winning move, so the winner moved last
    if w1 is not None and len(p1) != len(p2) + 1:
        raise InvalidSelection(f"Player 1 won with {w1} but player 2 moved afterwards")
    if w2 is not None and len(p1) != len(p2):
        raise InvalidSelection(f"Player 2 won with {w2} but player 1 moved afterwards")
    return b1, b2


def _status(b1: int, b2: int) -> Tuple[str, int]:
    if winning_triple(b1) is not None:
        return "won", 1
    if winning_triple(b2) is not None:
        return "won", 2
    if is_draw(b1, b2):
        return "draw", 0
    return "in_progress", 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import PackageNotFoundError, version as _ver

            print(_ver("magicsquares"))
        except PackageNotFoundError:
            print("unknown")
        return 0

    if ns.cmd in (None, "play"):
        cfg = PlayConfig(
            player1=getattr(ns, "player1", None),
            player2=getattr(ns, "player2", None),
            placeholder=getattr(ns, "placeholder", "_"),
        )
        if len(cfg.placeholder) != 1:
            logging.error("Placeholder must be a single character, got %r", cfg.placeholder)
            return 2
        try:
            play(config=cfg)
        except (EOFError, KeyboardInterrupt):
            logging.info("Game abandoned")
            return 1
        return 0

    if ns.cmd in ("status", "tactics"):
        try:
            b1, b2 = load_position(ns.p1, ns.p2)
        except MagicSquaresError as e:
            logging.error("Invalid position: %s", e)
            return 2
        if ns.cmd == "status":
            state, winner = _status(b1, b2)
            logging.info("state=%s winner=%d", state, winner)
            return 0
        status, _ = _status(b1, b2)
        if status != "in_progress":
            logging.error("Position is already finished: %s", status)
            return 2
        # equal counts -> player 1 to move
        to_move = 1 if bin(b1).count("1") == bin(b2).count("1") else 2
        own, other = (b1, b2) if to_move == 1 else (b2, b1)
        logging.info(
            "to_move=%d wins=%s blocks=%s forks=%s safe=%s",
            to_move,
            immediate_winning_numbers(own, other),
            immediate_winning_numbers(other, own),
            fork_numbers(own, other),
            [n for n in available_numbers(own, other) if not gives_opponent_immediate_win(own, other, n)],
        )
        return 0

    if ns.cmd == "triples":
        for kind, triples in WIN_TRIPLES_BY_TYPE.items():
            for t in triples:
                print(f"{kind} {' '.join(map(str, t))}")
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
