from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence

from rps_config import LOG_LEVELS, GameConfig, config_from_env
from rps_errors import EntropyUnavailable, InvalidArgument, InvalidMoveSet, InvariantViolation
from rps_game import Round, RoundResult
from rps_rules import GameRules, validate_moves
from rps_table import format_help_table

USAGE_EXAMPLE = "rps-fair rock paper scissors lizard spock"

logger = logging.getLogger(__name__)


def main(
    argv: Sequence[str] | None = None,
    *,
    input_fn: Callable[[str], str] = input,
    print_fn: Callable[..., None] = print,
) -> int:
    defaults = config_from_env()
    parser = argparse.ArgumentParser(
        prog="rps-fair",
        description="Play one provably fair round of generalized rock-paper-scissors.",
    )
    parser.add_argument("moves", nargs="*", help="odd number (>= 3) of unique move names")
    parser.add_argument(
        "--ignore-case",
        action=argparse.BooleanOptionalAction,
        default=not defaults.case_sensitive,
        help="treat move names differing only in case as the same move (default from RPS_IGNORE_CASE)",
    )
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging level (default from RPS_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    config = GameConfig(case_sensitive=not args.ignore_case, log_level=args.log_level)
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        moves = validate_moves(args.moves, case_sensitive=config.case_sensitive)
    except InvalidMoveSet as exc:
        print_fn(f"Error: {exc}")
        print_fn("Please provide an odd number of unique moves (>= 3), for example:")
        print_fn(f"  {USAGE_EXAMPLE}")
        return 1

    rules = GameRules(moves, case_sensitive=config.case_sensitive)
    try:
        game = Round.start(rules)
    except EntropyUnavailable:
        logger.exception("cannot start a round without a secure random source")
        raise

    print_fn(f"HMAC: {game.digest}")
    _print_menu(rules, print_fn)

    while True:
        try:
            raw = input_fn("Enter your move: ").strip()
        except EOFError:
            print_fn()
            return 0

        if raw == "?":
            print_fn(format_help_table(rules))
            continue
        if raw == "0":
            return 0

        user_move = _parse_move(raw, rules)
        if user_move is None:
            print_fn("Invalid input. Try again or enter '?' for help.")
            continue

        try:
            result = game.play(user_move)
        except InvariantViolation:
            logger.exception("move list does not form a fair cycle")
            raise
        _show_result(result, print_fn)
        print_fn(f"HMAC key: {game.disclose_hex()}")
        return 0


def _parse_move(choice: str, rules: GameRules) -> int | None:
    # A menu number wins over a move whose name happens to be the same digits.
    if choice.isdecimal() and 1 <= int(choice) <= rules.size():
        return int(choice)
    try:
        return rules.index_of(choice)
    except InvalidArgument:
        return None


def _print_menu(rules: GameRules, print_fn: Callable[..., None]) -> None:
    print_fn("Available moves:")
    for i, name in enumerate(rules.all_moves(), start=1):
        print_fn(f"{i} - {name}")
    print_fn("0 - exit")
    print_fn("? - help")


def _show_result(result: RoundResult, print_fn: Callable[..., None]) -> None:
    print_fn(f"Your move: {result.user_move_name}")
    print_fn(f"Computer move: {result.computer_move_name}")
    if result.outcome == "draw":
        print_fn("It's a draw!")
    elif result.outcome == "win":
        print_fn("You win!")
    else:
        print_fn("You lose!")


if __name__ == "__main__":
    raise SystemExit(main())
