"""Pydantic models for the ledger API."""

from simpleswap.models.api import (
    AddLiquidityRequest,
    AddLiquidityResponse,
    BalanceResponse,
    ErrorResponse,
    FaucetRequest,
    PoolResponse,
    PriceResponse,
    QuoteResponse,
    RemoveLiquidityRequest,
    RemoveLiquidityResponse,
    SwapRequest,
    SwapResponse,
    TransferSharesRequest,
)
from simpleswap.models.types import Address, Uint256, normalize_address

__all__ = [
    # Requests
    "AddLiquidityRequest",
    "RemoveLiquidityRequest",
    "SwapRequest",
    "TransferSharesRequest",
    "FaucetRequest",
    # Responses
    "AddLiquidityResponse",
    "RemoveLiquidityResponse",
    "SwapResponse",
    "BalanceResponse",
    "PoolResponse",
    "PriceResponse",
    "QuoteResponse",
    "ErrorResponse",
    # Types
    "Address",
    "Uint256",
    "normalize_address",
]
