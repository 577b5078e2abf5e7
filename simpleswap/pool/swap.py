"""Exact-input swaps against the pool ledger.

Formula: amount_out = (amount_in * reserve_out) / (reserve_in + amount_in)

No fee is retained; flooring the output keeps the reserve product from
decreasing across a swap.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from simpleswap.errors import (
    InsufficientLiquidity,
    InvariantViolation,
    SlippageExceeded,
    ZeroInput,
)
from simpleswap.models.types import normalize_address
from simpleswap.pool.guards import require_non_negative
from simpleswap.pool.ledger import PoolLedger
from simpleswap.pool.types import SwapExecuted
from simpleswap.math.uint import U, mul_div

logger = structlog.get_logger()


class SwapEngine:
    """Computes and applies exact-input swaps for one PoolLedger."""

    def __init__(self, ledger: PoolLedger) -> None:
        self.ledger = ledger

    @staticmethod
    def get_amount_out(amount_in: int, reserve_in: int, reserve_out: int) -> int:
        """Calculate output amount using the fee-less constant product formula.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Output token amount (floored, always below reserve_out)

        Raises:
            ZeroInput: If amount_in is zero
            InsufficientLiquidity: If either reserve is zero
        """
        require_non_negative(amount_in=amount_in, reserve_in=reserve_in, reserve_out=reserve_out)
        if amount_in == 0:
            raise ZeroInput()
        if reserve_in == 0 or reserve_out == 0:
            raise InsufficientLiquidity()

        return mul_div(amount_in, reserve_out, reserve_in + amount_in)

    def quote(self, token_in: str, token_out: str, amount_in: int) -> int:
        """Preview the output of a swap against the current reserves.

        Raises:
            InvalidTokens: If (token_in, token_out) is not the pool's pair
            ZeroInput: If amount_in is zero
            InsufficientLiquidity: If the pool is empty
        """
        self.ledger.guards.require_known_tokens(token_in, token_out)
        reserve_in, reserve_out = self.ledger.snapshot().get_reserves(normalize_address(token_in))
        return self.get_amount_out(amount_in, reserve_in, reserve_out)

    def swap_exact_in(
        self,
        sender: str,
        amount_in: int,
        amount_out_min: int,
        path: Sequence[str],
        recipient: str,
        deadline: int,
    ) -> SwapExecuted:
        """Swap exactly amount_in of path[0] for as much path[1] as the curve gives.

        Args:
            sender: Account debited amount_in of path[0]
            amount_in: Exact input amount
            amount_out_min: Minimum acceptable output
            path: [token_in, token_out]; must be the pool's pair in either order
            recipient: Account credited amount_out of path[1]
            deadline: Latest logical time at which the swap may execute

        Returns:
            SwapExecuted with amounts == (amount_in, amount_out)

        Raises:
            Expired: If the deadline has passed
            UnsupportedPathLength: If path does not hold exactly two tokens
            InvalidPath: If path tokens are not the pool's pair
            ZeroInput: If amount_in is zero
            InsufficientLiquidity: If the pool is empty
            SlippageExceeded: If amount_out < amount_out_min
        """
        require_non_negative(amount_in=amount_in, amount_out_min=amount_out_min)
        guards = self.ledger.guards
        guards.require_not_expired(deadline)
        token_in, token_out = guards.require_valid_path(path)
        sender, recipient = normalize_address(sender), normalize_address(recipient)
        input_is_a = token_in == self.ledger.token_a

        with self.ledger.transaction() as tx:
            state = tx.state
            if input_is_a:
                reserve_in, reserve_out = state.reserve_a, state.reserve_b
            else:
                reserve_in, reserve_out = state.reserve_b, state.reserve_a

            amount_out = self.get_amount_out(amount_in, reserve_in, reserve_out)
            if amount_out < amount_out_min:
                raise SlippageExceeded(
                    f"Swap output {amount_out} below minimum {amount_out_min}"
                )

            new_reserve_in = (U(reserve_in) + amount_in).bounded()
            new_reserve_out = (U(reserve_out) - amount_out).value
            if U(new_reserve_in) * new_reserve_out < U(reserve_in) * reserve_out:
                raise InvariantViolation("Swap would decrease the reserve product")

            tx.debit(token_in, sender, amount_in)
            tx.credit(token_out, recipient, amount_out)

            if input_is_a:
                state.reserve_a, state.reserve_b = new_reserve_in, new_reserve_out
            else:
                state.reserve_b, state.reserve_a = new_reserve_in, new_reserve_out

            event = SwapExecuted(
                sender=sender,
                recipient=recipient,
                path=(token_in, token_out),
                amounts=(amount_in, amount_out),
            )
            tx.emit(event)

        logger.info(
            "swap_executed",
            sender=sender,
            recipient=recipient,
            token_in=token_in,
            token_out=token_out,
            amount_in=amount_in,
            amount_out=amount_out,
        )
        return event


# Pure formula, usable without a ledger
get_amount_out = SwapEngine.get_amount_out
