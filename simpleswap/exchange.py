"""Exchange wiring: one pool ledger, its swap engine and their collaborators.

The Exchange is the object the API layer talks to. It owns nothing the
ledger does not already own; it only bundles the ledger with the swap
engine, custody and clock built from one LedgerConfig.
"""

from __future__ import annotations

from functools import lru_cache

import structlog

from simpleswap.clock import Clock, SystemClock
from simpleswap.config import LedgerConfig
from simpleswap.custody import InMemoryCustody
from simpleswap.pool import PoolLedger, SwapEngine

logger = structlog.get_logger()


class Exchange:
    """A deployed pool with in-memory custody.

    Args:
        config: Pool configuration. If None, read from the environment.
        clock: Time source for deadlines. If None, uses the wall clock.
    """

    def __init__(self, config: LedgerConfig | None = None, clock: Clock | None = None) -> None:
        self.config = config or LedgerConfig.from_env()
        self.clock = clock or SystemClock()
        self.custody = InMemoryCustody(pool_address=self.config.pool_address)
        self.ledger = PoolLedger.from_config(self.config, custody=self.custody, clock=self.clock)
        self.swaps = SwapEngine(self.ledger)
        logger.info(
            "exchange_created",
            token_a=self.config.token_a,
            token_b=self.config.token_b,
            pool_address=self.config.pool_address,
        )

    def default_deadline(self) -> int:
        """Deadline used when a request does not carry one."""
        return self.clock.now() + self.config.deadline_window

    def faucet(self, token: str, owner: str, amount: int) -> int:
        """Mint one of the pool's tokens to owner and return the new balance.

        Raises:
            InvalidTokens: If token is neither of the pool's tokens
        """
        other = self.ledger.token_b if token.lower() == self.ledger.token_a else self.ledger.token_a
        self.ledger.guards.require_known_tokens(token, other)
        self.custody.mint(token, owner, amount)
        return self.custody.balance_of(token, owner)


@lru_cache(maxsize=1)
def get_default_exchange() -> Exchange:
    """Process-wide exchange built from environment configuration."""
    return Exchange()
