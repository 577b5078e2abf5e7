"""Integer math for liquidity issuance.

Both helpers operate on unbounded Python integers, so products of two
uint256 amounts (512-bit intermediates) never overflow. Results are floored
exactly as the on-chain pool floors them.
"""

from __future__ import annotations

from simpleswap.errors import InsufficientLiquidity
from simpleswap.math.uint import U, mul_div

__all__ = [
    "integer_sqrt",
    "optimal_amount",
]


def integer_sqrt(y: int) -> int:
    """Floor square root using the Babylonian method.

    Starts from ``y // 2 + 1`` and iterates ``x = (y // x + x) // 2`` while the
    candidate strictly decreases. Values 1 to 3 map to 1, 0 maps to 0.

    Args:
        y: Non-negative integer

    Returns:
        floor(sqrt(y))

    Raises:
        ValueError: If y is negative
    """
    if y < 0:
        raise ValueError(f"integer_sqrt requires a non-negative value, got {y}")
    if y > 3:
        z = U(y)
        x = z // 2 + 1
        while x < z:
            z = x
            x = (U(y) // x + x) // 2
        return z.value
    if y != 0:
        return 1
    return 0


def optimal_amount(amount_desired_other: int, reserve_self: int, reserve_other: int) -> int:
    """Amount of one token that matches the reserve ratio for the other.

    Formula: amount_self = amount_desired_other * reserve_self / reserve_other

    Args:
        amount_desired_other: Amount fixed on the other side
        reserve_self: Reserve of the token being resolved
        reserve_other: Reserve of the token whose amount is fixed

    Returns:
        Floored optimal amount

    Raises:
        InsufficientLiquidity: If reserve_other is zero
    """
    if reserve_other == 0:
        raise InsufficientLiquidity()
    return mul_div(amount_desired_other, reserve_self, reserve_other)
