"""Pydantic models for the ledger HTTP API.

Amounts travel as uint256 decimal strings, field names as camelCase aliases.
"""

from pydantic import BaseModel, Field

from simpleswap.models.types import Address, Uint256


class AddLiquidityRequest(BaseModel):
    """Deposit both pool tokens; the pair may be named in either order.

    Amounts and minimums always refer to (tokenA, tokenB) of the pool.
    """

    sender: Address = Field(description="Account debited the deposit.")
    token_x: Address = Field(alias="tokenX")
    token_y: Address = Field(alias="tokenY")
    amount_a_desired: Uint256 = Field(alias="amountADesired")
    amount_b_desired: Uint256 = Field(alias="amountBDesired")
    amount_a_min: Uint256 = Field(default="0", alias="amountAMin")
    amount_b_min: Uint256 = Field(default="0", alias="amountBMin")
    recipient: Address = Field(alias="to", description="Account credited the minted shares.")
    deadline: int | None = Field(default=None, ge=0, description="Unix seconds.")

    model_config = {"populate_by_name": True}


class AddLiquidityResponse(BaseModel):
    amount_a: Uint256 = Field(alias="amountA")
    amount_b: Uint256 = Field(alias="amountB")
    liquidity: Uint256 = Field(description="Shares minted.")

    model_config = {"populate_by_name": True}


class RemoveLiquidityRequest(BaseModel):
    """Burn shares for the proportional reserves."""

    sender: Address = Field(description="Share holder burning liquidity.")
    token_x: Address = Field(alias="tokenX")
    token_y: Address = Field(alias="tokenY")
    liquidity: Uint256 = Field(description="Shares to burn.")
    amount_a_min: Uint256 = Field(default="0", alias="amountAMin")
    amount_b_min: Uint256 = Field(default="0", alias="amountBMin")
    recipient: Address = Field(alias="to", description="Account credited the withdrawn tokens.")
    deadline: int | None = Field(default=None, ge=0)

    model_config = {"populate_by_name": True}


class RemoveLiquidityResponse(BaseModel):
    amount_a: Uint256 = Field(alias="amountA")
    amount_b: Uint256 = Field(alias="amountB")

    model_config = {"populate_by_name": True}


class SwapRequest(BaseModel):
    """Exact-input swap along a two-token path."""

    sender: Address
    amount_in: Uint256 = Field(alias="amountIn")
    amount_out_min: Uint256 = Field(default="0", alias="amountOutMin")
    # Length is checked by the ledger so a bad path maps to ONLY_PAIRS_SUPPORTED
    path: list[Address]
    recipient: Address = Field(alias="to")
    deadline: int | None = Field(default=None, ge=0)

    model_config = {"populate_by_name": True}


class SwapResponse(BaseModel):
    amounts: list[Uint256] = Field(description="[amountIn, amountOut]")


class TransferSharesRequest(BaseModel):
    sender: Address
    recipient: Address = Field(alias="to")
    amount: Uint256

    model_config = {"populate_by_name": True}


class FaucetRequest(BaseModel):
    """Mint test tokens to an account."""

    token: Address
    owner: Address = Field(alias="to")
    amount: Uint256

    model_config = {"populate_by_name": True}


class BalanceResponse(BaseModel):
    owner: Address
    token_a: Uint256 = Field(alias="tokenA")
    token_b: Uint256 = Field(alias="tokenB")
    liquidity: Uint256

    model_config = {"populate_by_name": True}


class PoolResponse(BaseModel):
    token_a: Address = Field(alias="tokenA")
    token_b: Address = Field(alias="tokenB")
    reserve_a: Uint256 = Field(alias="reserveA")
    reserve_b: Uint256 = Field(alias="reserveB")
    total_liquidity: Uint256 = Field(alias="totalLiquidity")

    model_config = {"populate_by_name": True}


class PriceResponse(BaseModel):
    price: Uint256 = Field(description="reserveOut * 1e18 / reserveIn")


class QuoteResponse(BaseModel):
    amount_out: Uint256 = Field(alias="amountOut")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    detail: str
    code: str
