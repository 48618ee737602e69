from typing import Any, Dict, List, Optional

import pytest

from wallet_api.providers import PortfolioSnapshotProvider, TokenMetadataProvider
from wallet_api.services import portfolio as portfolio_service
from wallet_api.types import HoldingRecord, TokenMetadataEntry

WALLET = "0xe7995A5b1B41779DeA900E2204dc08110de363d5"


class StubPortfolioProvider(PortfolioSnapshotProvider):
    name = "stub_portfolio"

    def __init__(self, holdings: Optional[List[Dict[str, Any]]] = None, error: Optional[Exception] = None):
        self.holdings = holdings or []
        self.error = error
        self.calls: List[tuple] = []

    async def ready(self) -> bool:
        return True

    async def health_check(self) -> Dict[str, Any]:
        return {"status": "healthy"}

    async def get_holdings(self, address: str, chain_id: str) -> List[HoldingRecord]:
        self.calls.append((address, chain_id))
        if self.error:
            raise self.error
        return [HoldingRecord.model_validate(h) for h in self.holdings]


class StubTokenProvider(TokenMetadataProvider):
    name = "stub_token"

    def __init__(self, metadata: Optional[Dict[str, Dict[str, Any]]] = None, error: Optional[Exception] = None):
        self.metadata = metadata or {}
        self.error = error
        self.calls: List[tuple] = []

    async def ready(self) -> bool:
        return True

    async def health_check(self) -> Dict[str, Any]:
        return {"status": "healthy"}

    async def get_token_metadata(self, addresses: List[str], chain_id: str) -> Dict[str, TokenMetadataEntry]:
        self.calls.append((list(addresses), chain_id))
        if self.error:
            raise self.error
        return {k.lower(): TokenMetadataEntry.model_validate(v) for k, v in self.metadata.items()}


def make_holding(name: str, address: str, symbol: str, *underlying: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "contract_name": name,
        "contract_address": address,
        "contract_symbol": symbol,
        "underlying_tokens": list(underlying),
    }


def underlying(value_usd: float, amount: str = "1", decimals: int = 18) -> Dict[str, Any]:
    return {"decimals": decimals, "value_usd": value_usd, "amount": amount}


@pytest.fixture
def holding():
    return make_holding


@pytest.fixture
def asset():
    return underlying


@pytest.fixture
def stub_upstream(monkeypatch):
    """Route the pipeline's default providers to in-memory stubs."""

    portfolio = StubPortfolioProvider()
    tokens = StubTokenProvider()
    monkeypatch.setattr(portfolio_service, "OneInchPortfolioProvider", lambda: portfolio)
    monkeypatch.setattr(portfolio_service, "OneInchTokenProvider", lambda: tokens)
    return portfolio, tokens
