"""Request parsing and pipeline plumbing shared by the portfolio routes."""

import logging
from typing import List

from fastapi import Request, Response

from ..config import settings
from ..errors import InvalidInput, UnsupportedChain, UpstreamFailure, WalletApiError
from ..services import is_supported_chain, is_valid_evm_address, normalize_chain_id
from ..services.portfolio import fetch_processed_portfolio
from ..types import PortfolioToken, WalletRequest

_logger = logging.getLogger(__name__)


async def wallet_request(request: Request) -> WalletRequest:
    """Validate the ``{address, chainId?}`` JSON body of a wallet request."""
    try:
        payload = await request.json()
    except ValueError as exc:
        raise InvalidInput("Invalid JSON body") from exc

    if not isinstance(payload, dict):
        raise InvalidInput("Request body must be a JSON object")

    address = payload.get("address")
    if not address or not isinstance(address, str):
        raise InvalidInput("Invalid or missing address parameter")
    if not is_valid_evm_address(address):
        raise InvalidInput("Invalid Ethereum address format")

    chain_id = normalize_chain_id(payload.get("chainId"), settings.default_chain_id)
    if not is_supported_chain(chain_id):
        raise UnsupportedChain(chain_id)

    wallet = WalletRequest(address=address, chain_id=chain_id)
    request.state.wallet = wallet
    return wallet


async def load_portfolio(wallet: WalletRequest) -> List[PortfolioToken]:
    """Run the portfolio pipeline, reporting anything unexpected as an upstream failure."""
    try:
        return await fetch_processed_portfolio(wallet.address, wallet.chain_id)
    except WalletApiError:
        raise
    except Exception as exc:
        _logger.exception("Portfolio pipeline failed for %s", wallet.address)
        raise UpstreamFailure(str(exc) or "Internal server error") from exc


def mark_cacheable(response: Response) -> None:
    response.headers["Cache-Control"] = f"public, max-age={settings.cache_max_age_seconds}"
