from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final

from rps_errors import EntropyUnavailable

KEY_SIZE: Final[int] = 32
DIGEST_HEX_LENGTH: Final[int] = 64

RandomBytes = Callable[[int], bytes]
KeyedHash = Callable[[bytes, bytes], bytes]

logger = logging.getLogger(__name__)


def hmac_sha256(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, hashlib.sha256).digest()


@dataclass(frozen=True)
class Commitment:
    # The key stays out of repr so it never leaks into logs before disclosure.
    key: bytes = field(repr=False)
    digest: str

    @property
    def key_hex(self) -> str:
        return format_key(self.key)


def format_key(key: bytes) -> str:
    return key.hex().upper()


def canonical_bytes(move_name: str) -> bytes:
    return move_name.encode("utf-8")


def generate_key(*, random_bytes: RandomBytes = secrets.token_bytes) -> bytes:
    try:
        key = random_bytes(KEY_SIZE)
    except (OSError, NotImplementedError) as exc:
        raise EntropyUnavailable(f"secure random source failed: {exc}") from exc

    if not isinstance(key, bytes) or len(key) != KEY_SIZE:
        got = f"{len(key)} bytes" if isinstance(key, bytes) else type(key).__name__
        raise EntropyUnavailable(f"secure random source returned {got}, expected {KEY_SIZE} bytes")
    return key


def compute_hmac(key: bytes, data: bytes, *, keyed_hash: KeyedHash = hmac_sha256) -> str:
    return keyed_hash(key, data).hex().upper()


def commit(
    secret_value: bytes,
    *,
    random_bytes: RandomBytes = secrets.token_bytes,
    keyed_hash: KeyedHash = hmac_sha256,
) -> Commitment:
    """Bind to ``secret_value`` under a fresh key.

    The digest can be published right away; the key must be held back until the
    other party's choice has been acted upon. Every call draws a new key.
    """
    key = generate_key(random_bytes=random_bytes)
    digest = compute_hmac(key, secret_value, keyed_hash=keyed_hash)
    logger.debug("committed %d-byte value, digest=%s", len(secret_value), digest)
    return Commitment(key=key, digest=digest)


def verify(
    key: bytes,
    secret_value: bytes,
    digest: str,
    *,
    keyed_hash: KeyedHash = hmac_sha256,
) -> bool:
    computed = compute_hmac(key, secret_value, keyed_hash=keyed_hash)
    if not isinstance(digest, str) or len(digest) != len(computed) or not digest.isascii():
        return False
    return hmac.compare_digest(computed, digest.upper())
