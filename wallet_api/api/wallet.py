import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response

from ..config import settings
from ..services import CHAIN_REGISTRY, get_chain_name
from ..services.wallet_views import build_balance, build_wallet_info
from ..types import (
    BalanceResponse,
    EndpointIndexResponse,
    HealthResponse,
    PortfolioResponse,
    WalletInfoResponse,
    WalletRequest,
)
from .deps import load_portfolio, mark_cacheable, wallet_request
from .portfolio import get_portfolio

router = APIRouter(prefix="/wallet")
_logger = logging.getLogger(__name__)

ENDPOINTS = [
    "POST /portfolio - Get portfolio tokens",
    "POST /wallet/portfolio - Get portfolio tokens",
    "POST /wallet/balance - Get total portfolio balance",
    "POST /wallet/info - Get wallet information",
    "GET /wallet/health - Health check",
]


@router.api_route(
    "",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    response_model=EndpointIndexResponse,
)
async def list_endpoints() -> EndpointIndexResponse:
    """List the available wallet endpoints"""
    return EndpointIndexResponse(message="Wallet API", endpoints=ENDPOINTS)


router.add_api_route(
    "/portfolio",
    get_portfolio,
    methods=["POST"],
    response_model=PortfolioResponse,
    name="wallet_portfolio",
)


@router.post("/balance", response_model=BalanceResponse)
async def wallet_balance(
    response: Response,
    wallet: WalletRequest = Depends(wallet_request),
) -> BalanceResponse:
    """Total USD balance and token count"""
    _logger.info(
        "Processing balance request for %s on %s",
        wallet.address,
        get_chain_name(wallet.chain_id),
    )
    tokens = await load_portfolio(wallet)

    mark_cacheable(response)
    return BalanceResponse(data=build_balance(wallet.address, wallet.chain_id, tokens))


@router.post("/info", response_model=WalletInfoResponse)
async def wallet_info(
    response: Response,
    wallet: WalletRequest = Depends(wallet_request),
) -> WalletInfoResponse:
    """Balance summary, top holding and per-token share of the wallet"""
    _logger.info(
        "Processing wallet info request for %s on %s",
        wallet.address,
        get_chain_name(wallet.chain_id),
    )
    tokens = await load_portfolio(wallet)

    mark_cacheable(response)
    return WalletInfoResponse(data=build_wallet_info(wallet.address, wallet.chain_id, tokens))


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return HealthResponse(
        timestamp=timestamp,
        version=settings.api_version,
        supported_chains=CHAIN_REGISTRY.labels(),
    )
