from .base import PortfolioSnapshotProvider, Provider, TokenMetadataProvider
from .oneinch import OneInchPortfolioProvider, OneInchTokenProvider

__all__ = [
    "Provider",
    "PortfolioSnapshotProvider",
    "TokenMetadataProvider",
    "OneInchPortfolioProvider",
    "OneInchTokenProvider",
]
