from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..types import HoldingRecord, TokenMetadataEntry


class Provider(ABC):
    """Base provider interface"""

    name: str
    timeout_s: float = 10

    @abstractmethod
    async def ready(self) -> bool:
        """Check if provider is ready to serve requests"""
        pass

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """Return provider health status"""
        pass


class PortfolioSnapshotProvider(Provider):
    """Provider for per-address token holdings"""

    @abstractmethod
    async def get_holdings(self, address: str, chain_id: str) -> List[HoldingRecord]:
        """Get all holdings for an address on one chain, in upstream order"""
        pass


class TokenMetadataProvider(Provider):
    """Provider for token display metadata (logos)"""

    @abstractmethod
    async def get_token_metadata(self, addresses: List[str], chain_id: str) -> Dict[str, TokenMetadataEntry]:
        """Get metadata keyed by lowercase contract address"""
        pass
