"""
Portfolio assembly.

Turns one (address, chain) pair into the list of ``PortfolioToken`` returned by
the API: fetch holdings, fetch logos for the holdings that have an underlying
asset, join the two and drop positions without USD value.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional

from ..config import settings
from ..errors import MalformedAmount, UnsupportedChain
from ..providers import (
    OneInchPortfolioProvider,
    OneInchTokenProvider,
    PortfolioSnapshotProvider,
    TokenMetadataProvider,
)
from ..types import HoldingRecord, PortfolioToken, TokenMetadataEntry
from .chains import get_chain_name, is_supported_chain

logger = logging.getLogger(__name__)


def parse_amount(holding: HoldingRecord, raw: str) -> float:
    try:
        amount = float(raw)
    except (TypeError, ValueError):
        raise MalformedAmount(holding.contract_address, raw) from None
    if not math.isfinite(amount):
        raise MalformedAmount(holding.contract_address, raw)
    return amount


def metadata_addresses(holdings: List[HoldingRecord]) -> List[str]:
    """Contract addresses worth a metadata lookup, in holding order."""
    return [h.contract_address for h in holdings if h.underlying_tokens]


def build_tokens(
    holdings: List[HoldingRecord],
    metadata: Dict[str, TokenMetadataEntry],
) -> List[PortfolioToken]:
    """Join holdings with logo metadata and keep positions with positive value.

    Only the first underlying token of a holding is reported; pooled positions
    with several underlying assets lose the rest.
    """

    tokens: List[PortfolioToken] = []
    for holding in holdings:
        if not holding.underlying_tokens:
            logger.debug("Skipping %s - no underlying tokens", holding.contract_name)
            continue

        underlying = holding.underlying_tokens[0]
        entry = metadata.get(holding.contract_address.lower())

        tokens.append(PortfolioToken(
            name=holding.contract_name,
            address=holding.contract_address,
            symbol=holding.contract_symbol,
            decimals=underlying.decimals,
            value_usd=underlying.value_usd,
            amount=parse_amount(holding, underlying.amount),
            logo_uri=(entry.logo_uri or None) if entry else None,
        ))

    return [token for token in tokens if token.value_usd > 0]


async def fetch_processed_portfolio(
    address: str,
    chain_id: Optional[str] = None,
    *,
    portfolio_provider: Optional[PortfolioSnapshotProvider] = None,
    metadata_provider: Optional[TokenMetadataProvider] = None,
) -> List[PortfolioToken]:
    """Fetch, enrich and filter the token holdings of ``address`` on ``chain_id``."""

    chain_id = chain_id or settings.default_chain_id
    if not is_supported_chain(chain_id):
        raise UnsupportedChain(chain_id)

    portfolio_provider = portfolio_provider or OneInchPortfolioProvider()
    metadata_provider = metadata_provider or OneInchTokenProvider()

    logger.info("Fetching portfolio for %s on %s", address, get_chain_name(chain_id))

    holdings = await portfolio_provider.get_holdings(address, chain_id)
    logger.info("Portfolio API returned %d holdings", len(holdings))

    addresses = metadata_addresses(holdings)
    logger.debug("Fetching metadata for %d tokens: %s", len(addresses), addresses)
    metadata = await metadata_provider.get_token_metadata(addresses, chain_id)
    logger.debug("Token metadata received for %d tokens", len(metadata))

    tokens = build_tokens(holdings, metadata)
    logger.info(
        "Portfolio processing complete: %d tokens, %.2f USD",
        len(tokens),
        sum(token.value_usd for token in tokens),
    )
    return tokens


__all__ = [
    "build_tokens",
    "fetch_processed_portfolio",
    "metadata_addresses",
    "parse_amount",
]
