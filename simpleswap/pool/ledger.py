"""Constant-product pool ledger.

PoolLedger owns the two reserves, the liquidity-share supply and every
holder's share balance. It is also the share issuer: minting on deposit and
burning on withdrawal happen in the same atomic unit as the reserve update.

Atomicity:
    Every mutating operation runs inside ``transaction()``, which holds the
    ledger lock, hands the operation a working copy of the state, and swaps
    the copy in only if the whole operation (including custody debits and
    credits) succeeds. On failure the copy is discarded and any custody
    steps already taken are compensated in reverse order.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from simpleswap.clock import Clock, SystemClock
from simpleswap.config import LedgerConfig
from simpleswap.constants import PRICE_UNIT
from simpleswap.custody import TokenCustody
from simpleswap.errors import (
    EmptyPool,
    InsufficientLiquidityMinted,
    InsufficientShareBalance,
    InvalidTokenPair,
    InvariantViolation,
    SlippageExceeded,
    ZeroInput,
)
from simpleswap.math import integer_sqrt, optimal_amount
from simpleswap.models.types import normalize_address
from simpleswap.pool.guards import GuardRails, require_non_negative
from simpleswap.pool.types import (
    LiquidityAdded,
    LiquidityRemoved,
    PoolEvent,
    PoolSnapshot,
    PoolState,
    SharesTransferred,
)
from simpleswap.math.uint import U, UintError, mul_div

logger = structlog.get_logger()


class LedgerTransaction:
    """Working state and custody journal for one mutating operation."""

    def __init__(self, state: PoolState, custody: TokenCustody) -> None:
        self.state = state
        self.events: list[PoolEvent] = []
        self._custody = custody
        self._journal: list[tuple[str, str, str, int]] = []

    def debit(self, token: str, owner: str, amount: int) -> None:
        """Pull amount of token from owner into the pool."""
        if amount == 0:
            return
        self._custody.debit(token, owner, amount)
        self._journal.append(("debit", token, owner, amount))

    def credit(self, token: str, owner: str, amount: int) -> None:
        """Pay amount of token from the pool to owner."""
        if amount == 0:
            return
        self._custody.credit(token, owner, amount)
        self._journal.append(("credit", token, owner, amount))

    def emit(self, event: PoolEvent) -> None:
        self.events.append(event)

    def rollback(self) -> None:
        """Undo completed custody steps, newest first."""
        while self._journal:
            kind, token, owner, amount = self._journal.pop()
            try:
                if kind == "debit":
                    self._custody.credit(token, owner, amount)
                else:
                    self._custody.debit(token, owner, amount)
            except Exception:
                logger.exception(
                    "custody_compensation_failed",
                    step=kind,
                    token=token,
                    owner=owner,
                    amount=amount,
                )


class PoolLedger:
    """Reserves and liquidity shares for a single token pair.

    Args:
        token_a: First registered token address
        token_b: Second registered token address
        custody: Token custody used to move deposits, withdrawals and swaps
        clock: Time source for deadline checks (default: wall clock)
        price_unit: Fixed-point scale of price() (default: 1e18)
    """

    def __init__(
        self,
        token_a: str,
        token_b: str,
        custody: TokenCustody,
        clock: Clock | None = None,
        price_unit: int = PRICE_UNIT,
    ) -> None:
        token_a, token_b = normalize_address(token_a), normalize_address(token_b)
        if token_a == token_b:
            raise ValueError(f"Pool tokens must be distinct, got {token_a} twice")
        self._token_a = token_a
        self._token_b = token_b
        self.custody = custody
        self.clock = clock or SystemClock()
        self.price_unit = price_unit
        self.guards = GuardRails(token_a, token_b, self.clock)
        self._state = PoolState()
        self._events: list[PoolEvent] = []
        self._lock = threading.RLock()

    @classmethod
    def from_config(
        cls, config: LedgerConfig, custody: TokenCustody, clock: Clock | None = None
    ) -> PoolLedger:
        """Create a ledger for the pair described by config."""
        return cls(
            token_a=config.token_a,
            token_b=config.token_b,
            custody=custody,
            clock=clock,
            price_unit=config.price_unit,
        )

    # --- Read-only views ---

    @property
    def token_a(self) -> str:
        return self._token_a

    @property
    def token_b(self) -> str:
        return self._token_b

    @property
    def total_shares(self) -> int:
        with self._lock:
            return self._state.total_shares

    @property
    def events(self) -> tuple[PoolEvent, ...]:
        """Committed events, oldest first."""
        with self._lock:
            return tuple(self._events)

    def share_balance(self, holder: str) -> int:
        """Liquidity shares held by holder."""
        with self._lock:
            return self._state.share_balances.get(normalize_address(holder), 0)

    def snapshot(self) -> PoolSnapshot:
        """Consistent view of reserves and share supply."""
        with self._lock:
            return PoolSnapshot(
                token_a=self._token_a,
                token_b=self._token_b,
                reserve_a=self._state.reserve_a,
                reserve_b=self._state.reserve_b,
                total_shares=self._state.total_shares,
            )

    def price(self, token_in: str, token_out: str) -> int:
        """Spot price of token_in in units of token_out, scaled by price_unit.

        Formula: price = reserve_out * price_unit / reserve_in

        Raises:
            InvalidTokenPair: If (token_in, token_out) is not the pool's pair
            EmptyPool: If reserve_in is zero
        """
        self.guards.require_known_tokens(token_in, token_out, error=InvalidTokenPair)
        reserve_in, reserve_out = self.snapshot().get_reserves(normalize_address(token_in))
        if reserve_in == 0:
            raise EmptyPool()
        return mul_div(reserve_out, self.price_unit, reserve_in)

    # --- Atomic unit ---

    @contextmanager
    def transaction(self) -> Iterator[LedgerTransaction]:
        """Run a mutating operation with exclusive access.

        Commits the transaction's working state only if the block completes
        and the result satisfies the pool invariants. Out-of-range arithmetic
        (a reserve or share supply above 2^256-1) surfaces as InvariantViolation.
        """
        with self._lock:
            tx = LedgerTransaction(self._state.copy(), self.custody)
            try:
                yield tx
                _check_invariants(tx.state)
            except UintError as err:
                tx.rollback()
                raise InvariantViolation(f"Arithmetic out of range: {err}") from err
            except Exception:
                tx.rollback()
                raise
            self._state = tx.state
            self._events.extend(tx.events)

    # --- Mutations ---

    def add_liquidity(
        self,
        sender: str,
        token_x: str,
        token_y: str,
        amount_a_desired: int,
        amount_b_desired: int,
        amount_a_min: int,
        amount_b_min: int,
        recipient: str,
        deadline: int,
    ) -> LiquidityAdded:
        """Deposit both tokens and mint liquidity shares to recipient.

        The pair may be named in either order; amounts and minimums always
        refer to (token_a, token_b), so a request for (token_b, token_a) is the
        mirror of one for (token_a, token_b) with the same economic meaning.

        Empty pool: the desired amounts are taken as-is and
        ``integer_sqrt(amount_a * amount_b)`` shares are minted.

        Funded pool: one side is re-derived from the reserve ratio with
        optimal_amount(); shares minted are
        ``min(amount_a * total / reserve_a, amount_b * total / reserve_b)``.

        Returns:
            LiquidityAdded with amounts in (token_a, token_b) order

        Raises:
            InvalidTokens: If the pair is not the pool's pair
            Expired: If the deadline has passed
            SlippageExceeded: If a resolved amount is below its minimum
            InsufficientLiquidityMinted: If the deposit would mint no shares
        """
        require_non_negative(
            amount_a_desired=amount_a_desired,
            amount_b_desired=amount_b_desired,
            amount_a_min=amount_a_min,
            amount_b_min=amount_b_min,
        )
        self.guards.require_known_tokens(token_x, token_y)
        self.guards.require_not_expired(deadline)
        sender, recipient = normalize_address(sender), normalize_address(recipient)

        with self.transaction() as tx:
            state = tx.state
            amount_a, amount_b = _resolve_deposit(state, amount_a_desired, amount_b_desired)
            if amount_a < amount_a_min or amount_b < amount_b_min:
                raise SlippageExceeded(
                    f"Resolved deposit ({amount_a}, {amount_b}) below minimum "
                    f"({amount_a_min}, {amount_b_min})"
                )

            shares = _shares_for_deposit(state, amount_a, amount_b)
            if shares == 0:
                raise InsufficientLiquidityMinted(
                    f"Deposit ({amount_a}, {amount_b}) mints no shares"
                )

            tx.debit(self._token_a, sender, amount_a)
            tx.debit(self._token_b, sender, amount_b)

            state.reserve_a = (U(state.reserve_a) + amount_a).bounded()
            state.reserve_b = (U(state.reserve_b) + amount_b).bounded()
            state.total_shares = (U(state.total_shares) + shares).bounded()
            state.share_balances[recipient] = state.share_balances.get(recipient, 0) + shares

            event = LiquidityAdded(
                provider=sender,
                recipient=recipient,
                tokens=(self._token_a, self._token_b),
                amounts=(amount_a, amount_b),
                shares_minted=shares,
            )
            tx.emit(event)

        logger.info(
            "liquidity_added",
            provider=sender,
            recipient=recipient,
            amount_a=amount_a,
            amount_b=amount_b,
            shares_minted=shares,
        )
        return event

    def remove_liquidity(
        self,
        sender: str,
        token_x: str,
        token_y: str,
        shares: int,
        amount_a_min: int,
        amount_b_min: int,
        recipient: str,
        deadline: int,
    ) -> LiquidityRemoved:
        """Burn sender's shares and pay the proportional reserves to recipient.

        Formula: amount_i = shares * reserve_i / total_shares

        Returns:
            LiquidityRemoved with amounts in (token_a, token_b) order

        Raises:
            InvalidTokens: If the pair is not the pool's pair
            Expired: If the deadline has passed
            InsufficientShareBalance: If sender holds no shares or fewer than requested
            ZeroInput: If shares is zero
            SlippageExceeded: If an amount is below its minimum
        """
        require_non_negative(shares=shares, amount_a_min=amount_a_min, amount_b_min=amount_b_min)
        self.guards.require_known_tokens(token_x, token_y)
        self.guards.require_not_expired(deadline)
        sender, recipient = normalize_address(sender), normalize_address(recipient)

        with self.transaction() as tx:
            state = tx.state
            balance = state.share_balances.get(sender, 0)
            if balance == 0 or balance < shares:
                raise InsufficientShareBalance(
                    f"INSUFFICIENT_BALANCE: {sender} holds {balance} shares, needs {shares}"
                )
            if shares == 0:
                raise ZeroInput("Insufficient input amount: cannot burn zero shares")

            amount_a = mul_div(shares, state.reserve_a, state.total_shares)
            amount_b = mul_div(shares, state.reserve_b, state.total_shares)
            if amount_a < amount_a_min or amount_b < amount_b_min:
                raise SlippageExceeded(
                    f"Withdrawal ({amount_a}, {amount_b}) below minimum "
                    f"({amount_a_min}, {amount_b_min})"
                )

            _set_share_balance(state, sender, (U(balance) - shares).value)
            state.total_shares = (U(state.total_shares) - shares).value
            state.reserve_a = (U(state.reserve_a) - amount_a).value
            state.reserve_b = (U(state.reserve_b) - amount_b).value

            tx.credit(self._token_a, recipient, amount_a)
            tx.credit(self._token_b, recipient, amount_b)

            event = LiquidityRemoved(
                provider=sender,
                recipient=recipient,
                tokens=(self._token_a, self._token_b),
                amounts=(amount_a, amount_b),
                shares_burned=shares,
            )
            tx.emit(event)

        logger.info(
            "liquidity_removed",
            provider=sender,
            recipient=recipient,
            amount_a=amount_a,
            amount_b=amount_b,
            shares_burned=shares,
        )
        return event

    def transfer_shares(self, sender: str, recipient: str, amount: int) -> SharesTransferred:
        """Move liquidity shares between holders.

        Raises:
            InsufficientShareBalance: If sender holds fewer than amount shares
        """
        require_non_negative(amount=amount)
        sender, recipient = normalize_address(sender), normalize_address(recipient)

        with self.transaction() as tx:
            balances = tx.state.share_balances
            balance = balances.get(sender, 0)
            if balance < amount:
                raise InsufficientShareBalance(
                    f"INSUFFICIENT_BALANCE: {sender} holds {balance} shares, needs {amount}"
                )
            _set_share_balance(tx.state, sender, balance - amount)
            _set_share_balance(tx.state, recipient, balances.get(recipient, 0) + amount)
            event = SharesTransferred(sender=sender, recipient=recipient, amount=amount)
            tx.emit(event)

        logger.info("shares_transferred", sender=sender, recipient=recipient, amount=amount)
        return event


def _resolve_deposit(state: PoolState, a_desired: int, b_desired: int) -> tuple[int, int]:
    """Pick the deposit that matches the current reserve ratio."""
    if state.is_empty:
        return a_desired, b_desired

    optimal_b = optimal_amount(a_desired, state.reserve_b, state.reserve_a)
    if optimal_b <= b_desired:
        return a_desired, optimal_b
    optimal_a = optimal_amount(b_desired, state.reserve_a, state.reserve_b)
    return optimal_a, b_desired


def _shares_for_deposit(state: PoolState, amount_a: int, amount_b: int) -> int:
    """Shares minted for a resolved deposit (floors each side, then takes the min)."""
    if state.is_empty:
        return integer_sqrt(amount_a * amount_b)
    share_a = mul_div(amount_a, state.total_shares, state.reserve_a)
    share_b = mul_div(amount_b, state.total_shares, state.reserve_b)
    return min(share_a, share_b)


def _set_share_balance(state: PoolState, holder: str, balance: int) -> None:
    if balance == 0:
        state.share_balances.pop(holder, None)
    else:
        state.share_balances[holder] = balance


def _check_invariants(state: PoolState) -> None:
    """Raise InvariantViolation if state is not a valid pool state."""
    try:
        U(state.reserve_a).bounded()
        U(state.reserve_b).bounded()
    except UintError as err:
        raise InvariantViolation(str(err)) from err
    if (state.reserve_a == 0) != (state.reserve_b == 0):
        raise InvariantViolation(
            f"One-sided reserves: ({state.reserve_a}, {state.reserve_b})"
        )
    if (state.total_shares == 0) != (state.reserve_a == 0):
        raise InvariantViolation(
            f"Share supply {state.total_shares} inconsistent with reserves "
            f"({state.reserve_a}, {state.reserve_b})"
        )
    if sum(state.share_balances.values()) != state.total_shares:
        raise InvariantViolation("Share balances do not sum to total supply")
