"""SimpleSwap - single-pair constant-product pool ledger."""

from simpleswap.exchange import Exchange, get_default_exchange
from simpleswap.pool import PoolLedger, SwapEngine

__version__ = "0.1.0"
__all__ = ["Exchange", "PoolLedger", "SwapEngine", "get_default_exchange", "__version__"]
