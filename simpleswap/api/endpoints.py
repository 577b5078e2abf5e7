"""API endpoints for the pool ledger."""

import structlog
from fastapi import APIRouter, Depends, Path, Query

from simpleswap.exchange import Exchange, get_default_exchange
from simpleswap.models.api import (
    AddLiquidityRequest,
    AddLiquidityResponse,
    BalanceResponse,
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
from simpleswap.models.types import ADDRESS_PATTERN

logger = structlog.get_logger()

router = APIRouter()


def get_exchange() -> Exchange:
    """Dependency provider for the exchange instance.

    Override this in tests to inject an exchange with a manual clock:
        app.dependency_overrides[get_exchange] = lambda: exchange

    Returns:
        The exchange whose ledger serves requests.
    """
    return get_default_exchange()


@router.get("/pool", response_model=PoolResponse)
def pool(exchange: Exchange = Depends(get_exchange)) -> PoolResponse:
    """Current reserves and share supply."""
    snapshot = exchange.ledger.snapshot()
    return PoolResponse(
        token_a=snapshot.token_a,
        token_b=snapshot.token_b,
        reserve_a=snapshot.reserve_a,
        reserve_b=snapshot.reserve_b,
        total_liquidity=snapshot.total_shares,
    )


@router.get("/price", response_model=PriceResponse)
def price(
    token_in: str = Query(alias="tokenIn", pattern=ADDRESS_PATTERN),
    token_out: str = Query(alias="tokenOut", pattern=ADDRESS_PATTERN),
    exchange: Exchange = Depends(get_exchange),
) -> PriceResponse:
    """Spot price of tokenIn in tokenOut, scaled by 1e18."""
    return PriceResponse(price=exchange.ledger.price(token_in, token_out))


@router.get("/quote", response_model=QuoteResponse)
def quote(
    token_in: str = Query(alias="tokenIn", pattern=ADDRESS_PATTERN),
    token_out: str = Query(alias="tokenOut", pattern=ADDRESS_PATTERN),
    amount_in: str = Query(alias="amountIn", pattern=r"^[0-9]+$"),
    exchange: Exchange = Depends(get_exchange),
) -> QuoteResponse:
    """Output a swap of amountIn would receive right now."""
    amount_out = exchange.swaps.quote(token_in, token_out, int(amount_in))
    return QuoteResponse(amount_out=amount_out)


@router.get("/balances/{owner}", response_model=BalanceResponse)
def balances(
    owner: str = Path(pattern=ADDRESS_PATTERN),
    exchange: Exchange = Depends(get_exchange),
) -> BalanceResponse:
    """Token and share balances of owner."""
    return _balance_response(exchange, owner)


@router.post("/liquidity/add", response_model=AddLiquidityResponse)
def add_liquidity(
    request: AddLiquidityRequest,
    exchange: Exchange = Depends(get_exchange),
) -> AddLiquidityResponse:
    """Deposit both tokens and mint shares to `to`.

    Error Handling:
        - Invalid request schema: 422 (Pydantic)
        - Ledger rejection (tokens, deadline, slippage, funds): 400 with code
    """
    logger.info("received_add_liquidity", sender=request.sender, to=request.recipient)
    result = exchange.ledger.add_liquidity(
        sender=request.sender,
        token_x=request.token_x,
        token_y=request.token_y,
        amount_a_desired=int(request.amount_a_desired),
        amount_b_desired=int(request.amount_b_desired),
        amount_a_min=int(request.amount_a_min),
        amount_b_min=int(request.amount_b_min),
        recipient=request.recipient,
        deadline=_deadline(request.deadline, exchange),
    )
    amount_a, amount_b = result.amounts
    return AddLiquidityResponse(amount_a=amount_a, amount_b=amount_b, liquidity=result.shares_minted)


@router.post("/liquidity/remove", response_model=RemoveLiquidityResponse)
def remove_liquidity(
    request: RemoveLiquidityRequest,
    exchange: Exchange = Depends(get_exchange),
) -> RemoveLiquidityResponse:
    """Burn shares and pay the proportional reserves to `to`."""
    logger.info("received_remove_liquidity", sender=request.sender, to=request.recipient)
    result = exchange.ledger.remove_liquidity(
        sender=request.sender,
        token_x=request.token_x,
        token_y=request.token_y,
        shares=int(request.liquidity),
        amount_a_min=int(request.amount_a_min),
        amount_b_min=int(request.amount_b_min),
        recipient=request.recipient,
        deadline=_deadline(request.deadline, exchange),
    )
    amount_a, amount_b = result.amounts
    return RemoveLiquidityResponse(amount_a=amount_a, amount_b=amount_b)


@router.post("/swap", response_model=SwapResponse)
def swap(request: SwapRequest, exchange: Exchange = Depends(get_exchange)) -> SwapResponse:
    """Exact-input swap along `path`."""
    logger.info("received_swap", sender=request.sender, path=request.path)
    result = exchange.swaps.swap_exact_in(
        sender=request.sender,
        amount_in=int(request.amount_in),
        amount_out_min=int(request.amount_out_min),
        path=request.path,
        recipient=request.recipient,
        deadline=_deadline(request.deadline, exchange),
    )
    return SwapResponse(amounts=list(result.amounts))


@router.post("/shares/transfer", response_model=BalanceResponse)
def transfer_shares(
    request: TransferSharesRequest,
    exchange: Exchange = Depends(get_exchange),
) -> BalanceResponse:
    """Move liquidity shares to `to`; returns the sender's balances."""
    exchange.ledger.transfer_shares(request.sender, request.recipient, int(request.amount))
    return _balance_response(exchange, request.sender)


@router.post("/faucet", response_model=BalanceResponse)
def faucet(request: FaucetRequest, exchange: Exchange = Depends(get_exchange)) -> BalanceResponse:
    """Mint test tokens of either pool token to `to`."""
    exchange.faucet(request.token, request.owner, int(request.amount))
    logger.info("faucet_minted", token=request.token, to=request.owner, amount=request.amount)
    return _balance_response(exchange, request.owner)


def _deadline(deadline: int | None, exchange: Exchange) -> int:
    return deadline if deadline is not None else exchange.default_deadline()


def _balance_response(exchange: Exchange, owner: str) -> BalanceResponse:
    ledger = exchange.ledger
    return BalanceResponse(
        owner=owner,
        token_a=exchange.custody.balance_of(ledger.token_a, owner),
        token_b=exchange.custody.balance_of(ledger.token_b, owner),
        liquidity=ledger.share_balance(owner),
    )
