import subprocess
import sys
from pathlib import Path

import pytest

from magicsquares.cli import load_position, main
from magicsquares.errors import MagicSquaresError


def _run_cli(args: list[str], cwd: Path, stdin: str = "") -> subprocess.CompletedProcess:
    exe = [sys.executable, "-m", "magicsquares.cli"]
    return subprocess.run(exe + args, cwd=cwd, input=stdin, capture_output=True, text=True)


def test_cli_play_full_game(tmp_path: Path):
    r = _run_cli(["play", "--player1", "Ann", "--player2", "Bob"], cwd=tmp_path, stdin="2\n7\n9\n6\n4\n")
    assert r.returncode == 0
    assert "Welcome to the game of Magic Squares" in r.stdout
    assert "Ann, please enter a number:" in r.stdout
    assert r.stdout.rstrip().endswith("Player 1 wins!")


def test_cli_play_is_default_and_prompts_for_names(tmp_path: Path):
    stdin = "Ann\nBob\n2\n6\n7\n9\n1\n5\n4\n3\n8\n"
    r = _run_cli([], cwd=tmp_path, stdin=stdin)
    assert r.returncode == 0
    assert "Please enter player name for player number 1" in r.stdout
    assert r.stdout.rstrip().endswith("The game is a draw!")


def test_cli_play_eof_is_not_a_crash(tmp_path: Path):
    r = _run_cli(["play", "--player1", "A", "--player2", "B"], cwd=tmp_path, stdin="2\n")
    assert r.returncode == 1
    assert "Traceback" not in r.stderr


def test_cli_status_and_tactics(tmp_path: Path):
    r = _run_cli(["status", "--p1", "2,9,4", "--p2", "7,6"], cwd=tmp_path)
    assert r.returncode == 0
    assert "state=won winner=1" in r.stdout + r.stderr
    r = _run_cli(["tactics", "--p1", "2,9", "--p2", "7"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "to_move=2" in s and "blocks=[4]" in s


def test_cli_triples(capsys):
    assert main(["triples"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 8
    assert lines[0] == "row 2 7 6"
    assert lines[-1] == "diag 6 5 4"


@pytest.mark.parametrize(
    "p1,p2",
    [
        ("2,2", ""),
        ("2", "2"),
        ("0", ""),
        ("x", ""),
        ("1,2,3", ""),
        ("", "5"),
        ("2,9,4", "7,5,3"),
        # player 1 holds a triple but player 2 moved after it
        ("2,9,4", "1,3,5"),
        ("2,9,4", "1,3,7"),
        # player 2 holds a triple but player 1 moved after it
        ("1,3,6,7", "2,9,4"),
        ("1,3,7,6", "8,5,2"),
    ],
)
def test_load_position_rejects_bad_positions(p1, p2):
    with pytest.raises(MagicSquaresError):
        load_position(p1, p2)


def test_cli_error_invalid_position(tmp_path: Path):
    r = _run_cli(["status", "--p1", "2", "--p2", "2"], cwd=tmp_path)
    assert r.returncode == 2
    r = _run_cli(["tactics", "--p1", "2,9,4", "--p2", "7,6"], cwd=tmp_path)
    assert r.returncode == 2


def test_cli_rejects_long_placeholder():
    assert main(["play", "--placeholder", "ab"]) == 2


@pytest.mark.parametrize(
    "p1,p2",
    [
        # 1, 2, 9, 4 by player 1 with 3, 6, 8 in between: wins on the 4
        ("2,9,4,1", "3,6,8"),
        # player 2 completes 2, 9, 4 on the sixth move
        ("1,3,6", "2,9,4"),
        ("2,9,4", "7,6"),
    ],
)
def test_load_position_accepts_finished_games(p1, p2):
    b1, b2 = load_position(p1, p2)
    assert b1 & b2 == 0


def test_cli_tactics_reports_safe_numbers(tmp_path: Path):
    # player 2 to move; anything but 4 leaves player 1 the 2, 9, 4 column
    r = _run_cli(["tactics", "--p1", "2,9", "--p2", "7"], cwd=tmp_path)
    assert r.returncode == 0
    assert "safe=[4]" in r.stdout + r.stderr
