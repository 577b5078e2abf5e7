"""Wire types shared by the request and response models.

Token amounts cross the HTTP boundary as decimal strings so that values up
to 2^256-1 survive JSON clients that parse numbers as doubles. Addresses are
20-byte hex strings; the ledger compares them case-insensitively.
"""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from simpleswap.math.uint import UINT256_MAX

ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"
_ADDRESS_RE = re.compile(ADDRESS_PATTERN)
_DECIMAL_RE = re.compile(r"^[0-9]+$")


def validate_uint256(value: Any) -> str:
    """Coerce an int or decimal string to a canonical uint256 string.

    Raises:
        ValueError: On bools, floats, signs, non-digits or values above 2^256-1
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("-") and _DECIMAL_RE.match(text[1:]):
            raise ValueError(f"Uint256 cannot be negative: {value}")
        if not _DECIMAL_RE.match(text):
            raise ValueError(f"Uint256 must be a decimal integer string: '{value}'")
        value = int(text)
    if value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")
    return str(value)


Address = Annotated[str, Field(pattern=ADDRESS_PATTERN)]

Uint256 = Annotated[
    str,
    BeforeValidator(validate_uint256),
    Field(description="256-bit unsigned integer as decimal string"),
]


def is_valid_address(address: object) -> bool:
    """True for a 0x-prefixed, 40-hex-digit string."""
    return isinstance(address, str) and _ADDRESS_RE.match(address) is not None


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Lowercase an address and make sure it carries the 0x prefix.

    Raises:
        ValueError: If validate=True and the result is not a valid address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = f"0x{addr}"
    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")
    return addr
