"""Single-pair constant-product pool."""

from simpleswap.pool.guards import GuardRails, require_non_negative
from simpleswap.pool.ledger import LedgerTransaction, PoolLedger
from simpleswap.pool.swap import SwapEngine, get_amount_out
from simpleswap.pool.types import (
    LiquidityAdded,
    LiquidityRemoved,
    PoolEvent,
    PoolSnapshot,
    PoolState,
    SharesTransferred,
    SwapExecuted,
)

__all__ = [
    # Ledger
    "PoolLedger",
    "LedgerTransaction",
    "PoolState",
    "PoolSnapshot",
    # Swaps
    "SwapEngine",
    "get_amount_out",
    # Validation
    "GuardRails",
    "require_non_negative",
    # Events
    "PoolEvent",
    "LiquidityAdded",
    "LiquidityRemoved",
    "SwapExecuted",
    "SharesTransferred",
]
