"""
1inch portfolio and token API providers.

Both endpoints are reached through the public 1inch proxy. Responses are
validated with pydantic before they leave this module; anything unexpected is
reported as ``UpstreamFailure``.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from ..config import settings
from ..errors import UpstreamFailure
from ..types import HoldingRecord, PortfolioSnapshot, TokenMetadataEntry
from .base import PortfolioSnapshotProvider, TokenMetadataProvider

logger = logging.getLogger(__name__)

SNAPSHOT_PATH = "/portfolio/portfolio/v5.0/tokens/snapshot"
TOKEN_METADATA_PATH = "/token/v1.3/{chain_id}/custom"

_METADATA_ADAPTER = TypeAdapter(Dict[str, TokenMetadataEntry])


def _error_text(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


class _OneInchClient:
    name = "oneinch"
    base_url: str
    timeout_s: float

    async def ready(self) -> bool:
        return bool(self.base_url)

    async def health_check(self) -> Dict[str, Any]:
        if not await self.ready():
            return {"status": "unavailable", "reason": "Base URL not configured"}

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(self.base_url, timeout=self.timeout_s)
                response.raise_for_status()
                return {"status": "healthy", "latency_ms": int(response.elapsed.total_seconds() * 1000)}
        except Exception as e:
            return {"status": "error", "reason": _error_text(e)}

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        url = f"{self.base_url.rstrip('/')}{path}"
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(url, params=params, timeout=self.timeout_s)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as exc:
            logger.warning("%s request to %s failed: %s", self.name, url, _error_text(exc))
            raise UpstreamFailure(_error_text(exc)) from exc
        except ValueError as exc:
            logger.warning("%s returned a non-JSON body from %s", self.name, url)
            raise UpstreamFailure(f"Invalid JSON from upstream API: {exc}") from exc


class OneInchPortfolioProvider(_OneInchClient, PortfolioSnapshotProvider):
    """Token holdings from the 1inch portfolio snapshot endpoint"""

    name = "oneinch_portfolio"

    def __init__(self, base_url: Optional[str] = None, timeout_s: Optional[float] = None):
        self.base_url = base_url or settings.portfolio_api_base_url
        self.timeout_s = timeout_s or settings.request_timeout_seconds

    async def get_holdings(self, address: str, chain_id: str) -> List[HoldingRecord]:
        payload = await self._get_json(
            SNAPSHOT_PATH,
            params={"addresses": [address], "chain_id": chain_id},
        )
        try:
            snapshot = PortfolioSnapshot.model_validate(payload)
        except ValidationError as exc:
            logger.warning("Portfolio snapshot failed validation: %s", exc)
            raise UpstreamFailure(f"Unexpected portfolio API response: {exc}") from exc
        return snapshot.result


class OneInchTokenProvider(_OneInchClient, TokenMetadataProvider):
    """Token logos from the 1inch token custom-list endpoint"""

    name = "oneinch_token"

    def __init__(self, base_url: Optional[str] = None, timeout_s: Optional[float] = None):
        self.base_url = base_url or settings.token_api_base_url
        self.timeout_s = timeout_s or settings.request_timeout_seconds

    async def get_token_metadata(self, addresses: List[str], chain_id: str) -> Dict[str, TokenMetadataEntry]:
        if not addresses:
            return {}

        payload = await self._get_json(
            TOKEN_METADATA_PATH.format(chain_id=chain_id),
            params={"addresses": list(addresses)},
        )
        try:
            entries = _METADATA_ADAPTER.validate_python(payload)
        except ValidationError as exc:
            logger.warning("Token metadata failed validation: %s", exc)
            raise UpstreamFailure(f"Unexpected token API response: {exc}") from exc
        return {address.lower(): entry for address, entry in entries.items()}
