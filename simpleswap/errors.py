"""Ledger error classes.

Each error carries a stable ``code``. Where the on-chain pool reverted with
a reason string, the code reuses that string so clients that already match
on revert reasons keep working.
"""

from __future__ import annotations


class LedgerError(Exception):
    """Base error for pool ledger operations."""

    code = "LEDGER_ERROR"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code)
        self.message = message or self.code


class InvalidTokens(LedgerError):
    """Token pair is not the pool's registered pair."""

    code = "Invalid Tokens"


class InvalidTokenPair(InvalidTokens):
    """Price requested for a pair other than the pool's pair."""

    pass


class Expired(LedgerError):
    """Deadline is earlier than the current logical time."""

    code = "Expired"


class SlippageExceeded(LedgerError):
    """A resolved amount fell below the caller's minimum."""

    code = "SLIPPAGE_EXCEEDED"


class InsufficientShareBalance(LedgerError):
    """Holder does not own enough liquidity shares."""

    code = "INSUFFICIENT_BALANCE"


class ZeroInput(LedgerError):
    """Input amount is zero."""

    code = "Insufficient input amount"


class InsufficientLiquidity(LedgerError):
    """A reserve involved in the calculation is zero."""

    code = "Insufficient Liquidity"


class InsufficientLiquidityMinted(LedgerError):
    """A deposit would mint zero shares."""

    code = "INSUFFICIENT_LIQUIDITY_MINTED"


class UnsupportedPathLength(LedgerError):
    """Swap path does not contain exactly two tokens."""

    code = "ONLY_PAIRS_SUPPORTED"


class InvalidPath(LedgerError):
    """Swap path tokens are not the pool's two tokens."""

    code = "INVALID_PATH"


class EmptyPool(LedgerError):
    """Price requested while the input reserve is zero."""

    code = "EMPTY_POOL"


class InvariantViolation(LedgerError):
    """A pending state would break a pool invariant."""

    code = "INVARIANT_VIOLATION"


class CustodyError(LedgerError):
    """Base error for the token custody layer."""

    code = "CUSTODY_ERROR"


class InsufficientFunds(CustodyError):
    """Owner's token balance cannot cover a debit."""

    code = "INSUFFICIENT_FUNDS"


__all__ = [
    "LedgerError",
    "InvalidTokens",
    "InvalidTokenPair",
    "Expired",
    "SlippageExceeded",
    "InsufficientShareBalance",
    "ZeroInput",
    "InsufficientLiquidity",
    "InsufficientLiquidityMinted",
    "UnsupportedPathLength",
    "InvalidPath",
    "EmptyPool",
    "InvariantViolation",
    "CustodyError",
    "InsufficientFunds",
]
