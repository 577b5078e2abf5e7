"""Ledger configuration."""

import os
from dataclasses import dataclass

from simpleswap.constants import (
    DEFAULT_DEADLINE_WINDOW,
    DEFAULT_POOL_ADDRESS,
    DEFAULT_TOKEN_A,
    DEFAULT_TOKEN_B,
    PRICE_UNIT,
)
from simpleswap.models.types import normalize_address


@dataclass(frozen=True)
class LedgerConfig:
    """Deployment configuration for a single pool.

    Attributes:
        token_a: First registered token address
        token_b: Second registered token address
        pool_address: Account that holds the pool's reserves in custody
        price_unit: Fixed-point scale for price() (default: 1e18)
        deadline_window: Seconds added to "now" when a request has no deadline
    """

    token_a: str = DEFAULT_TOKEN_A
    token_b: str = DEFAULT_TOKEN_B
    pool_address: str = DEFAULT_POOL_ADDRESS
    price_unit: int = PRICE_UNIT
    deadline_window: int = DEFAULT_DEADLINE_WINDOW

    def __post_init__(self) -> None:
        for name in ("token_a", "token_b", "pool_address"):
            object.__setattr__(self, name, normalize_address(getattr(self, name), validate=True))
        if self.token_a == self.token_b:
            raise ValueError(f"Pool tokens must be distinct, got {self.token_a} twice")
        if self.pool_address in (self.token_a, self.token_b):
            raise ValueError("Pool address must differ from both token addresses")
        if self.price_unit <= 0:
            raise ValueError(f"price_unit must be positive, got {self.price_unit}")
        if self.deadline_window < 0:
            raise ValueError(f"deadline_window cannot be negative, got {self.deadline_window}")

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Build a config from environment variables.

        - SIMPLESWAP_TOKEN_A: First token address
        - SIMPLESWAP_TOKEN_B: Second token address
        - SIMPLESWAP_POOL_ADDRESS: Pool custody account
        - SIMPLESWAP_DEADLINE_WINDOW: Default deadline window in seconds
        """
        return cls(
            token_a=os.environ.get("SIMPLESWAP_TOKEN_A", DEFAULT_TOKEN_A),
            token_b=os.environ.get("SIMPLESWAP_TOKEN_B", DEFAULT_TOKEN_B),
            pool_address=os.environ.get("SIMPLESWAP_POOL_ADDRESS", DEFAULT_POOL_ADDRESS),
            deadline_window=int(
                os.environ.get("SIMPLESWAP_DEADLINE_WINDOW", str(DEFAULT_DEADLINE_WINDOW))
            ),
        )


# Default configuration instance
DEFAULT_LEDGER_CONFIG = LedgerConfig()
