from __future__ import annotations

import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal

from rps_commit import (
    Commitment,
    KeyedHash,
    RandomBytes,
    canonical_bytes,
    commit,
    format_key,
    hmac_sha256,
    verify,
)
from rps_errors import ProtocolError
from rps_rules import GameRules, Outcome

RoundStatus = Literal["committed", "played", "revealed"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundResult:
    user_move: int
    user_move_name: str
    computer_move: int
    computer_move_name: str
    # From the user's side.
    outcome: Outcome


@dataclass
class Round:
    """One game: the computer commits first, the user answers, then the key is disclosed.

    Status only moves forward: committed -> played -> revealed.
    """

    rules: GameRules
    computer_move: int
    commitment: Commitment = field(repr=False)
    status: RoundStatus = "committed"
    result: RoundResult | None = None

    @classmethod
    def start(
        cls,
        rules: GameRules,
        *,
        choose_index: Callable[[int], int] = secrets.randbelow,
        random_bytes: RandomBytes = secrets.token_bytes,
        keyed_hash: KeyedHash = hmac_sha256,
    ) -> "Round":
        computer_move = choose_index(rules.size()) + 1
        name = rules.name_of(computer_move)
        commitment = commit(canonical_bytes(name), random_bytes=random_bytes, keyed_hash=keyed_hash)
        logger.info("round started with %d moves, digest=%s", rules.size(), commitment.digest)
        return cls(rules=rules, computer_move=computer_move, commitment=commitment)

    @property
    def digest(self) -> str:
        return self.commitment.digest

    def play(self, user_move: int) -> RoundResult:
        if self.status != "committed":
            raise ProtocolError(f"round already {self.status}; a round is played once")

        outcome = self.rules.compare(user_move, self.computer_move)
        self.result = RoundResult(
            user_move=user_move,
            user_move_name=self.rules.name_of(user_move),
            computer_move=self.computer_move,
            computer_move_name=self.rules.name_of(self.computer_move),
            outcome=outcome,
        )
        self.status = "played"
        logger.info("round played: %s vs %s -> %s", self.result.user_move_name, self.result.computer_move_name, outcome)
        return self.result

    def disclose(self) -> bytes:
        if self.status == "committed":
            raise ProtocolError("key cannot be disclosed before the round is played")
        if self.status == "revealed":
            raise ProtocolError("key was already disclosed")

        self.status = "revealed"
        logger.info("key disclosed")
        return self.commitment.key

    def disclose_hex(self) -> str:
        """Disclose the key rendered the way the digest is: uppercase hex."""
        return format_key(self.disclose())


def verify_round(key: bytes, computer_move_name: str, digest: str) -> bool:
    return verify(key, canonical_bytes(computer_move_name), digest)
