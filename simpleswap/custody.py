"""Token custody layer consumed by the pool ledger.

The ledger never moves tokens itself. It asks a custody implementation to
debit a depositor (tokens move into the pool's account) or credit a
recipient (tokens move out of the pool's account). Approvals are a concern of
whatever custody backs a deployment and are not modelled here.
"""

from __future__ import annotations

import threading
from collections import defaultdict
from typing import Protocol, runtime_checkable

import structlog

from simpleswap.errors import InsufficientFunds
from simpleswap.models.types import normalize_address

logger = structlog.get_logger()


@runtime_checkable
class TokenCustody(Protocol):
    """Capabilities the ledger needs from a token custody layer."""

    def debit(self, token: str, owner: str, amount: int) -> None:
        """Move amount of token from owner into the pool.

        Raises:
            InsufficientFunds: If owner's balance cannot cover amount
        """
        ...

    def credit(self, token: str, owner: str, amount: int) -> None:
        """Move amount of token from the pool to owner."""
        ...


class InMemoryCustody:
    """Custody backed by in-process balance tables.

    Holds one balance per (token, account). The pool's own holdings are the
    balances of ``pool_address``, so after every committed ledger operation
    ``balance_of(token, pool_address)`` equals that token's reserve.

    Usage:
        custody = InMemoryCustody(pool_address="0x...5a5a")
        custody.mint(TOKEN_A, alice, 1_000 * 10**18)
    """

    def __init__(self, pool_address: str) -> None:
        self.pool_address = normalize_address(pool_address)
        self._balances: dict[str, dict[str, int]] = defaultdict(dict)
        self._lock = threading.Lock()

    def balance_of(self, token: str, owner: str) -> int:
        """Current balance of owner in token (0 for unknown accounts)."""
        token, owner = normalize_address(token), normalize_address(owner)
        with self._lock:
            return self._balances[token].get(owner, 0)

    def mint(self, token: str, owner: str, amount: int) -> None:
        """Create new token units for owner (faucet and test funding)."""
        _require_non_negative(amount)
        token, owner = normalize_address(token), normalize_address(owner)
        with self._lock:
            self._balances[token][owner] = self._balances[token].get(owner, 0) + amount
        logger.debug("tokens_minted", token=token, owner=owner, amount=amount)

    def debit(self, token: str, owner: str, amount: int) -> None:
        self._move(normalize_address(token), normalize_address(owner), self.pool_address, amount)

    def credit(self, token: str, owner: str, amount: int) -> None:
        self._move(normalize_address(token), self.pool_address, normalize_address(owner), amount)

    def _move(self, token: str, source: str, destination: str, amount: int) -> None:
        _require_non_negative(amount)
        with self._lock:
            table = self._balances[token]
            available = table.get(source, 0)
            if available < amount:
                raise InsufficientFunds(
                    f"{source} holds {available} of {token}, needs {amount}"
                )
            table[source] = available - amount
            table[destination] = table.get(destination, 0) + amount


def _require_non_negative(amount: int) -> None:
    if amount < 0:
        raise ValueError(f"Token amount cannot be negative: {amount}")
