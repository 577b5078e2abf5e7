"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Token and account addresses, amounts, logical time
- factories: Ledger, custody and deposit helpers
"""

from tests.helpers.constants import (
    ALICE,
    BOB,
    CAROL,
    DEADLINE,
    E18,
    NOW,
    POOL,
    STRANGER_TOKEN,
    TOKEN_A,
    TOKEN_B,
)
from tests.helpers.factories import FlakyCustody, deposit, make_custody, make_ledger

__all__ = [
    # Constants
    "TOKEN_A",
    "TOKEN_B",
    "POOL",
    "STRANGER_TOKEN",
    "ALICE",
    "BOB",
    "CAROL",
    "E18",
    "NOW",
    "DEADLINE",
    # Factories
    "make_custody",
    "make_ledger",
    "deposit",
    "FlakyCustody",
]
