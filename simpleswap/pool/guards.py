"""Validation shared by every mutating pool operation.

Guards run before any arithmetic with side effects. Each check either
returns normally or raises the matching LedgerError; none of them touch pool
state.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from simpleswap.clock import Clock
from simpleswap.errors import (
    Expired,
    InvalidPath,
    InvalidTokens,
    UnsupportedPathLength,
)
from simpleswap.models.types import normalize_address

logger = structlog.get_logger()


class GuardRails:
    """Token-membership, path-shape and deadline checks for one pool.

    Args:
        token_a: First registered token (normalized)
        token_b: Second registered token (normalized)
        clock: Source of the current logical time
    """

    def __init__(self, token_a: str, token_b: str, clock: Clock) -> None:
        self.token_a = token_a
        self.token_b = token_b
        self.clock = clock

    def require_known_tokens(
        self,
        token_x: str,
        token_y: str,
        error: type[InvalidTokens] = InvalidTokens,
    ) -> None:
        """Check that {token_x, token_y} is the pool's pair, in either order.

        Args:
            token_x: First token of the request
            token_y: Second token of the request
            error: InvalidTokens subclass to raise (price() uses InvalidTokenPair)

        Raises:
            InvalidTokens: If the pair does not match
        """
        x, y = normalize_address(token_x), normalize_address(token_y)
        if {x, y} == {self.token_a, self.token_b}:
            return
        logger.debug("invalid_tokens", token_x=x, token_y=y)
        raise error(f"Invalid Tokens: ({x}, {y}) is not ({self.token_a}, {self.token_b})")

    def require_not_expired(self, deadline: int) -> None:
        """Check that the current logical time has not passed deadline.

        Raises:
            Expired: If now > deadline
        """
        now = self.clock.now()
        if now > deadline:
            logger.debug("deadline_expired", deadline=deadline, now=now)
            raise Expired(f"Expired: deadline {deadline} is before {now}")

    def require_valid_path(self, path: Sequence[str]) -> tuple[str, str]:
        """Check a swap path and return it as (token_in, token_out).

        Raises:
            UnsupportedPathLength: If path does not hold exactly two tokens
            InvalidPath: If the tokens are not the pool's pair
        """
        if len(path) != 2:
            logger.debug("unsupported_path_length", length=len(path))
            raise UnsupportedPathLength(f"ONLY_PAIRS_SUPPORTED: path has {len(path)} tokens")
        token_in, token_out = normalize_address(path[0]), normalize_address(path[1])
        if {token_in, token_out} != {self.token_a, self.token_b}:
            logger.debug("invalid_path", token_in=token_in, token_out=token_out)
            raise InvalidPath(f"INVALID_PATH: ({token_in}, {token_out})")
        return token_in, token_out


def require_non_negative(**amounts: int) -> None:
    """Reject negative (or non-integer) amounts before any arithmetic.

    Raises:
        TypeError: If an amount is not an int
        ValueError: If an amount is negative
    """
    for name, value in amounts.items():
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"{name} cannot be negative: {value}")
