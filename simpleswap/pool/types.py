"""Pool state, snapshots and committed events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias


@dataclass
class PoolState:
    """Mutable bookkeeping for one pool.

    Mutating operations work on a copy and the ledger swaps it in on commit,
    so a failed operation leaves the live state untouched.
    """

    reserve_a: int = 0
    reserve_b: int = 0
    total_shares: int = 0
    share_balances: dict[str, int] = field(default_factory=dict)

    def copy(self) -> PoolState:
        return PoolState(
            reserve_a=self.reserve_a,
            reserve_b=self.reserve_b,
            total_shares=self.total_shares,
            share_balances=dict(self.share_balances),
        )

    @property
    def is_empty(self) -> bool:
        return self.total_shares == 0


@dataclass(frozen=True)
class PoolSnapshot:
    """Consistent read-only view of the pool's reserves and share supply."""

    token_a: str
    token_b: str
    reserve_a: int
    reserve_b: int
    total_shares: int

    def get_reserves(self, token_in: str) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if token_in == self.token_a:
            return self.reserve_a, self.reserve_b
        elif token_in == self.token_b:
            return self.reserve_b, self.reserve_a
        else:
            raise ValueError(f"Token {token_in} not in pool")


@dataclass(frozen=True)
class LiquidityAdded:
    """Deposit committed to the pool.

    ``tokens`` and ``amounts`` follow the order the caller supplied.
    """

    provider: str
    recipient: str
    tokens: tuple[str, str]
    amounts: tuple[int, int]
    shares_minted: int


@dataclass(frozen=True)
class LiquidityRemoved:
    """Withdrawal committed to the pool.

    ``tokens`` and ``amounts`` follow the order the caller supplied.
    """

    provider: str
    recipient: str
    tokens: tuple[str, str]
    amounts: tuple[int, int]
    shares_burned: int


@dataclass(frozen=True)
class SwapExecuted:
    """Exact-input swap committed to the pool.

    ``amounts`` is (amount_in, amount_out), matching ``path`` order.
    """

    sender: str
    recipient: str
    path: tuple[str, str]
    amounts: tuple[int, int]

    @property
    def amount_in(self) -> int:
        return self.amounts[0]

    @property
    def amount_out(self) -> int:
        return self.amounts[1]


@dataclass(frozen=True)
class SharesTransferred:
    """Liquidity shares moved between holders."""

    sender: str
    recipient: str
    amount: int


PoolEvent: TypeAlias = LiquidityAdded | LiquidityRemoved | SwapExecuted | SharesTransferred
