from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from .portfolio import PortfolioToken


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    success: bool = Field(default=False)
    error: str = Field(description="Error message")


class PortfolioResponse(BaseModel):
    success: bool = Field(default=True, description="Whether request was successful")
    data: List[PortfolioToken] = Field(default_factory=list, description="Portfolio tokens")


class BalanceData(_CamelModel):
    address: str = Field(description="Wallet address")
    chain_id: str = Field(alias="chainId")
    chain_name: str = Field(alias="chainName")
    total_balance_usd: float = Field(alias="totalBalanceUSD")
    token_count: int = Field(alias="tokenCount")


class BalanceResponse(BaseModel):
    success: bool = Field(default=True)
    data: BalanceData


class TokenShare(_CamelModel):
    symbol: str
    name: str
    value_usd: float = Field(alias="valueUSD")
    percentage: str = Field(description="Share of total balance, two decimals")


class WalletSummary(_CamelModel):
    total_balance_usd: float = Field(alias="totalBalanceUSD")
    token_count: int = Field(alias="tokenCount")
    top_token: Optional[TokenShare] = Field(default=None, alias="topToken")


class WalletInfoData(_CamelModel):
    address: str
    chain_id: str = Field(alias="chainId")
    chain_name: str = Field(alias="chainName")
    summary: WalletSummary
    tokens: List[TokenShare] = Field(default_factory=list)


class WalletInfoResponse(BaseModel):
    success: bool = Field(default=True)
    data: WalletInfoData


class HealthResponse(_CamelModel):
    success: bool = Field(default=True)
    status: str = Field(default="healthy")
    timestamp: str = Field(description="ISO-8601 UTC timestamp")
    version: str
    supported_chains: List[str] = Field(alias="supportedChains")


class EndpointIndexResponse(BaseModel):
    success: bool = Field(default=True)
    message: str
    endpoints: List[str]
