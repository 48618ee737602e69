import logging

from fastapi import APIRouter, Depends, Response

from ..services import get_chain_name
from ..types import PortfolioResponse, WalletRequest
from .deps import load_portfolio, mark_cacheable, wallet_request

router = APIRouter()
_logger = logging.getLogger(__name__)


@router.post("/portfolio", response_model=PortfolioResponse)
async def get_portfolio(
    response: Response,
    wallet: WalletRequest = Depends(wallet_request),
) -> PortfolioResponse:
    """Token holdings with logos for a wallet address"""

    _logger.info(
        "Processing portfolio request for %s on %s",
        wallet.address,
        get_chain_name(wallet.chain_id),
    )
    tokens = await load_portfolio(wallet)
    _logger.info("Processed portfolio for %s: %d tokens", wallet.address, len(tokens))

    mark_cacheable(response)
    return PortfolioResponse(data=tokens)
