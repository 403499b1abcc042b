from __future__ import annotations


class RpsError(Exception):
    """Base class for every error raised by the game core."""


class InvalidArgument(RpsError, ValueError):
    """An index, name or value outside its documented domain. Recoverable."""


class InvalidMoveSet(InvalidArgument):
    """The move list given on the command line cannot form a fair game."""


class InvariantViolation(RpsError, RuntimeError):
    """The cyclic dominance rule could not resolve a pairing."""


class EntropyUnavailable(RpsError, RuntimeError):
    """The secure random source could not supply a key."""


class ProtocolError(RpsError, RuntimeError):
    """A commit/reveal step was taken out of order."""
