"""Checked unsigned integers for reserve and share bookkeeping.

Every quantity the ledger stores (reserves, share supply, share balances)
is an unsigned integer that must fit in 256 bits. ``Uint`` wraps a Python
int and refuses to leave that domain:
- a negative value (from construction or subtraction) raises Underflow
- division by zero raises DivisionByZero
- ``bounded()`` raises Uint256Overflow above 2^256-1

Intermediate products are unbounded, so ``mul_div`` may multiply two
uint256 values before flooring back down.

Usage:
    from simpleswap.math.uint import U, mul_div

    withdrawn = mul_div(shares, reserve, total_shares)
    new_reserve = (U(reserve) + amount_in).bounded()
"""

from __future__ import annotations

from functools import total_ordering

UINT256_MAX = 2**256 - 1


class UintError(ArithmeticError):
    """Base class for checked unsigned arithmetic errors."""


class Underflow(UintError):
    """A result would be negative."""


class DivisionByZero(UintError):
    """Floor division by zero."""


class Uint256Overflow(UintError):
    """A stored value exceeds 2^256-1."""


@total_ordering
class Uint:
    """Non-negative integer whose arithmetic never goes below zero."""

    __slots__ = ("value",)

    def __init__(self, value: int | Uint) -> None:
        if isinstance(value, Uint):
            value = value.value
        elif not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Uint requires int, got {type(value).__name__}")
        if value < 0:
            raise Underflow(f"Unsigned value cannot be negative: {value}")
        self.value = value

    def __repr__(self) -> str:
        return f"Uint({self.value})"

    def __add__(self, other: Uint | int) -> Uint:
        return Uint(self.value + _raw(other))

    def __sub__(self, other: Uint | int) -> Uint:
        rhs = _raw(other)
        if rhs > self.value:
            raise Underflow(f"Underflow: {self.value} - {rhs}")
        return Uint(self.value - rhs)

    def __mul__(self, other: Uint | int) -> Uint:
        return Uint(self.value * _raw(other))

    def __floordiv__(self, other: Uint | int) -> Uint:
        rhs = _raw(other)
        if rhs == 0:
            raise DivisionByZero(f"Division by zero: {self.value} // 0")
        return Uint(self.value // rhs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Uint, int)):
            return self.value == _raw(other)
        return NotImplemented

    def __lt__(self, other: Uint | int) -> bool:
        return self.value < _raw(other)

    def __hash__(self) -> int:
        return hash(self.value)

    def min(self, other: Uint | int) -> Uint:
        return self if self.value <= _raw(other) else Uint(other)

    def bounded(self) -> int:
        """Unwrap, checking the value fits in a uint256 slot.

        Raises:
            Uint256Overflow: If the value exceeds 2^256-1
        """
        if self.value > UINT256_MAX:
            raise Uint256Overflow(f"Value exceeds uint256 max: {self.value}")
        return self.value


def mul_div(a: int, b: int, denominator: int) -> int:
    """floor(a * b / denominator) over unsigned integers.

    Raises:
        DivisionByZero: If denominator is zero
        Underflow: If any operand is negative
    """
    return (U(a) * U(b) // U(denominator)).value


def _raw(x: Uint | int) -> int:
    return x.value if isinstance(x, Uint) else x


# Short alias for arithmetic-heavy expressions
U = Uint
