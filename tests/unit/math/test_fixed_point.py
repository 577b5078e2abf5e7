"""Tests for integer square root and optimal-amount math."""

import math

import pytest

from simpleswap.errors import InsufficientLiquidity
from simpleswap.math import integer_sqrt, optimal_amount


class TestIntegerSqrt:
    """Tests for the Babylonian floor square root."""

    def test_zero(self):
        """sqrt(0) is 0."""
        assert integer_sqrt(0) == 0

    @pytest.mark.parametrize("y", [1, 2, 3])
    def test_small_values_map_to_one(self, y):
        """1, 2 and 3 all floor to 1, including y=1."""
        assert integer_sqrt(y) == 1

    def test_perfect_squares(self):
        """Perfect squares return their exact root."""
        for root in (2, 3, 10, 141, 10**9, 10**18):
            assert integer_sqrt(root * root) == root

    def test_just_below_perfect_square(self):
        """One less than a perfect square floors down."""
        assert integer_sqrt(15) == 3
        assert integer_sqrt(10**36 - 1) == 10**18 - 1

    def test_floor_bounds(self):
        """sqrt(y)^2 <= y < (sqrt(y)+1)^2 across a spread of magnitudes."""
        for y in [4, 5, 8, 9, 99, 20000, 12345678901234567890, 2**255 + 12345]:
            s = integer_sqrt(y)
            assert s * s <= y < (s + 1) * (s + 1)

    def test_matches_stdlib_isqrt(self):
        """Agrees with math.isqrt on a deterministic sample."""
        for y in list(range(0, 2000)) + [2**128 - 1, 2**200 + 7]:
            assert integer_sqrt(y) == math.isqrt(y)

    def test_product_of_two_uint256_amounts(self):
        """512-bit products of uint256 amounts are handled exactly."""
        max_uint = 2**256 - 1
        assert integer_sqrt(max_uint * max_uint) == max_uint

    def test_initial_issuance_example(self):
        """sqrt(100e18 * 200e18) floors to 141421356237309504880."""
        assert integer_sqrt(100 * 10**18 * 200 * 10**18) == 141421356237309504880

    def test_negative_raises(self):
        """Negative input is rejected."""
        with pytest.raises(ValueError):
            integer_sqrt(-1)


class TestOptimalAmount:
    """Tests for reserve-ratio matching."""

    def test_basic_ratio(self):
        """50 B against reserves (100 A, 200 B) needs 25 A."""
        assert optimal_amount(50, 100, 200) == 25

    def test_floors(self):
        """Result is floor division."""
        assert optimal_amount(10, 1, 3) == 3
        assert optimal_amount(1, 1, 3) == 0

    def test_zero_amount(self):
        """Zero desired amount gives zero."""
        assert optimal_amount(0, 100, 200) == 0

    def test_zero_other_reserve_raises(self):
        """Dividing by an empty reserve is rejected."""
        with pytest.raises(InsufficientLiquidity):
            optimal_amount(10, 100, 0)
