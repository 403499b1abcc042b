from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Final, Literal

from rps_errors import InvalidArgument, InvalidMoveSet, InvariantViolation

Outcome = Literal["win", "lose", "draw"]

MIN_MOVES: Final[int] = 3
# Console commands: exit and help.
RESERVED_NAMES: Final[frozenset[str]] = frozenset({"0", "?"})


def validate_moves(moves: Iterable[str], *, case_sensitive: bool = True) -> tuple[str, ...]:
    """Check a raw move list and return it as an immutable tuple.

    A fair game needs an odd number (at least three) of distinct, non-empty names.
    """
    names = tuple(moves)
    if len(names) < MIN_MOVES:
        raise InvalidMoveSet(f"at least {MIN_MOVES} moves are required, got {len(names)}")
    if len(names) % 2 == 0:
        raise InvalidMoveSet(f"the number of moves must be odd, got {len(names)}")

    blank = [i + 1 for i, name in enumerate(names) if not name.strip()]
    if blank:
        raise InvalidMoveSet("moves must not be empty (position " + ", ".join(map(str, blank)) + ")")

    reserved = [name for name in names if name.strip() in RESERVED_NAMES]
    if reserved:
        raise InvalidMoveSet("move names are reserved for commands: " + ", ".join(reserved))

    seen: set[str] = set()
    duplicates: list[str] = []
    for name in names:
        key = _normalize(name, case_sensitive)
        if key in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(key)
    if duplicates:
        raise InvalidMoveSet("moves must be unique, repeated: " + ", ".join(duplicates))

    return names


class GameRules:
    """Cyclic dominance over an ordered move list.

    Moves sit on a circle; each move beats the ``n // 2`` moves before it and loses
    to the ``n // 2`` moves after it. The list is expected to be validated already.
    """

    def __init__(self, moves: Sequence[str], *, case_sensitive: bool = True) -> None:
        self._moves: tuple[str, ...] = tuple(moves)
        # n // 2 for an odd n; an even n leaves the opposite move unresolved.
        self._half = (len(self._moves) - 1) // 2
        self._case_sensitive = case_sensitive

    def __len__(self) -> int:
        return len(self._moves)

    def __repr__(self) -> str:
        return f"GameRules({list(self._moves)!r})"

    def size(self) -> int:
        return len(self._moves)

    def all_moves(self) -> tuple[str, ...]:
        return self._moves

    def name_of(self, index: int) -> str:
        self._check_index(index)
        return self._moves[index - 1]

    def index_of(self, name: str) -> int:
        key = _normalize(name, self._case_sensitive)
        for i, move in enumerate(self._moves, start=1):
            if _normalize(move, self._case_sensitive) == key:
                return i
        raise InvalidArgument(f"unknown move: {name!r}")

    def compare(self, a: int, b: int) -> Outcome:
        """Outcome of move ``a`` played against move ``b`` (both 1-based)."""
        self._check_index(a)
        self._check_index(b)

        n = len(self._moves)
        offset = (b - a) % n
        if offset == 0:
            return "draw"
        if offset <= self._half:
            return "lose"
        if offset >= n - self._half:
            return "win"
        # Only reachable with an even number of moves: b sits exactly opposite a.
        raise InvariantViolation(
            f"cannot resolve {self._moves[a - 1]!r} vs {self._moves[b - 1]!r} "
            f"with {n} moves; the move count must be odd"
        )

    def outcome_matrix(self) -> list[list[Outcome]]:
        n = len(self._moves)
        return [[self.compare(i, j) for j in range(1, n + 1)] for i in range(1, n + 1)]

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgument(f"move index must be an int, got {type(index).__name__}")
        if not 1 <= index <= len(self._moves):
            raise InvalidArgument(f"move index must be in 1..{len(self._moves)}, got {index}")


def _normalize(name: str, case_sensitive: bool) -> str:
    return name if case_sensitive else name.casefold()
