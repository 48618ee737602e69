from .portfolio import (
    HoldingRecord,
    PortfolioSnapshot,
    PortfolioToken,
    TokenMetadataEntry,
    UnderlyingToken,
)
from .requests import WalletRequest
from .responses import (
    BalanceData,
    BalanceResponse,
    EndpointIndexResponse,
    ErrorResponse,
    HealthResponse,
    PortfolioResponse,
    TokenShare,
    WalletInfoData,
    WalletInfoResponse,
    WalletSummary,
)

__all__ = [
    "HoldingRecord",
    "PortfolioSnapshot",
    "PortfolioToken",
    "TokenMetadataEntry",
    "UnderlyingToken",
    "WalletRequest",
    "BalanceData",
    "BalanceResponse",
    "EndpointIndexResponse",
    "ErrorResponse",
    "HealthResponse",
    "PortfolioResponse",
    "TokenShare",
    "WalletInfoData",
    "WalletInfoResponse",
    "WalletSummary",
]
