"""Mathematical utilities for the pool ledger.

This package provides the integer primitives used by deposits, withdrawals
and swaps:
- Uint / mul_div: checked unsigned arithmetic with uint256 bounds
- integer_sqrt: Babylonian floor square root
- optimal_amount: reserve-ratio matching for deposits
"""

from simpleswap.math.fixed_point import integer_sqrt, optimal_amount
from simpleswap.math.uint import UINT256_MAX, U, Uint, UintError, mul_div

__all__ = [
    "UINT256_MAX",
    "U",
    "Uint",
    "UintError",
    "integer_sqrt",
    "mul_div",
    "optimal_amount",
]
