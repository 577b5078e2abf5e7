"""Ledger constants.

Centralizes fixed-point scales and the default deployment addresses.
"""

from simpleswap.models.types import is_valid_address

# Price scaling factor (1e18): price() returns reserve_out * PRICE_UNIT // reserve_in
PRICE_UNIT = 10**18

# Default window (seconds) added to "now" when a caller omits a deadline
DEFAULT_DEADLINE_WINDOW = 1000


def _validate_address(name: str, address: str) -> str:
    """Validate and return an address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Default token pair and pool address for a local deployment (lowercase).
# Validated at import time to catch typos early.
DEFAULT_TOKEN_A = _validate_address("token A", "0x00000000000000000000000000000000000000a1")
DEFAULT_TOKEN_B = _validate_address("token B", "0x00000000000000000000000000000000000000b2")
DEFAULT_POOL_ADDRESS = _validate_address("pool", "0x0000000000000000000000000000000000005a5a")
