from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from rps_errors import InvalidArgument, InvalidMoveSet, InvariantViolation  # type: ignore[import-not-found]  # noqa: E402
from rps_rules import GameRules, validate_moves  # type: ignore[import-not-found]  # noqa: E402

RPS = ["rock", "paper", "scissors"]
RPSLS = ["rock", "paper", "scissors", "lizard", "spock"]


def _rules(n: int) -> GameRules:
    return GameRules([f"m{i}" for i in range(1, n + 1)])


@pytest.mark.parametrize("n", [3, 5, 7, 9, 11, 21])
def test_same_move_is_draw(n: int) -> None:
    rules = _rules(n)
    for i in range(1, n + 1):
        assert rules.compare(i, i) == "draw"


@pytest.mark.parametrize("n", [3, 5, 7, 9, 11, 21])
def test_compare_is_antisymmetric(n: int) -> None:
    rules = _rules(n)
    opposite = {"win": "lose", "lose": "win"}
    for i in range(1, n + 1):
        for j in range(1, n + 1):
            if i == j:
                continue
            outcome = rules.compare(i, j)
            assert outcome in ("win", "lose")
            assert rules.compare(j, i) == opposite[outcome]


@pytest.mark.parametrize("n", [3, 5, 7, 9, 11, 21])
def test_every_move_wins_and_loses_half(n: int) -> None:
    rules = _rules(n)
    half = (n - 1) // 2
    for row in rules.outcome_matrix():
        assert row.count("win") == half
        assert row.count("lose") == half
        assert row.count("draw") == 1


def test_classic_rock_paper_scissors() -> None:
    rules = GameRules(RPS)
    assert rules.compare(1, 3) == "win"  # rock beats scissors
    assert rules.compare(1, 2) == "lose"  # rock loses to paper
    assert rules.compare(2, 1) == "win"  # paper beats rock
    assert rules.compare(3, 2) == "win"  # scissors beats paper
    assert rules.compare(2, 3) == "lose"


def test_five_moves_beat_the_two_before() -> None:
    rules = GameRules(RPSLS)
    assert rules.compare(1, 1) == "draw"
    # rock beats the two moves before it on the cycle: spock and lizard
    assert rules.compare(1, 5) == "win"
    assert rules.compare(1, 4) == "win"
    assert rules.compare(1, 2) == "lose"
    assert rules.compare(1, 3) == "lose"
    assert rules.compare(3, 1) == "win"


@pytest.mark.parametrize("bad", [0, 4, -1, 100])
def test_out_of_range_index_rejected(bad: int) -> None:
    rules = GameRules(RPS)
    with pytest.raises(InvalidArgument):
        rules.compare(bad, 1)
    with pytest.raises(InvalidArgument):
        rules.compare(1, bad)
    with pytest.raises(InvalidArgument):
        rules.name_of(bad)


def test_non_int_index_rejected() -> None:
    rules = GameRules(RPS)
    with pytest.raises(InvalidArgument):
        rules.compare(True, 2)
    with pytest.raises(InvalidArgument):
        rules.name_of("1")  # type: ignore[arg-type]


def test_invalid_argument_is_value_error() -> None:
    with pytest.raises(ValueError):
        GameRules(RPS).name_of(0)


def test_even_move_count_cannot_resolve_opposite_moves() -> None:
    rules = GameRules(["a", "b", "c", "d"])
    assert rules.compare(1, 2) == "lose"
    assert rules.compare(1, 4) == "win"
    with pytest.raises(InvariantViolation):
        rules.compare(1, 3)


def test_accessors() -> None:
    rules = GameRules(RPSLS)
    assert rules.size() == 5
    assert len(rules) == 5
    assert rules.all_moves() == tuple(RPSLS)
    assert rules.name_of(1) == "rock"
    assert rules.name_of(5) == "spock"
    assert rules.index_of("lizard") == 4


def test_moves_are_copied_at_construction() -> None:
    moves = list(RPS)
    rules = GameRules(moves)
    moves.append("well")
    assert rules.size() == 3


def test_index_of_respects_case_policy() -> None:
    assert GameRules(["Rock", "Paper", "Scissors"], case_sensitive=False).index_of("rock") == 1
    with pytest.raises(InvalidArgument):
        GameRules(["Rock", "Paper", "Scissors"]).index_of("rock")


def test_validate_moves_accepts_odd_unique_list() -> None:
    assert validate_moves(RPSLS) == tuple(RPSLS)
    assert validate_moves(["Rock", "rock", "ROCK"]) == ("Rock", "rock", "ROCK")


@pytest.mark.parametrize(
    "moves",
    [
        [],
        ["rock"],
        ["rock", "paper"],
        ["rock", "paper", "scissors", "lizard"],
    ],
)
def test_validate_moves_rejects_bad_counts(moves: list[str]) -> None:
    with pytest.raises(InvalidMoveSet):
        validate_moves(moves)


def test_validate_moves_rejects_duplicates() -> None:
    with pytest.raises(InvalidMoveSet, match="repeated: rock"):
        validate_moves(["rock", "paper", "rock"])
    # the first element is checked like every other one
    with pytest.raises(InvalidMoveSet):
        validate_moves(["a", "b", "c", "d", "a"])


def test_validate_moves_case_insensitive_duplicates() -> None:
    with pytest.raises(InvalidMoveSet):
        validate_moves(["Rock", "rock", "paper"], case_sensitive=False)


def test_validate_moves_rejects_blank_names() -> None:
    with pytest.raises(InvalidMoveSet, match="empty"):
        validate_moves(["rock", " ", "paper"])


@pytest.mark.parametrize("reserved", ["0", "?", " ? "])
def test_validate_moves_rejects_command_names(reserved: str) -> None:
    with pytest.raises(InvalidMoveSet, match="reserved"):
        validate_moves(["rock", reserved, "paper"])


def test_validate_moves_allows_other_numeric_names() -> None:
    assert validate_moves(["10", "20", "30"]) == ("10", "20", "30")
