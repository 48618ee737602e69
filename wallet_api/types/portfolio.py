from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class UnderlyingToken(BaseModel):
    decimals: int = Field(description="Token decimal places")
    value_usd: float = Field(allow_inf_nan=False, description="Position value in USD")
    amount: str = Field(description="Human readable amount as decimal text")


class HoldingRecord(BaseModel):
    contract_name: str = Field(description="Token or position name")
    contract_address: str = Field(description="Token contract address")
    contract_symbol: str = Field(description="Token symbol")
    underlying_tokens: List[UnderlyingToken] = Field(
        default_factory=list,
        description="Assets backing the position; only the first one is reported",
    )

    @field_validator("underlying_tokens", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value


class PortfolioSnapshot(BaseModel):
    """Body of the upstream portfolio snapshot response."""
    result: List[HoldingRecord] = Field(description="Holdings for the requested address")


class TokenMetadataEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    logo_uri: Optional[str] = Field(default=None, alias="logoURI", description="Token logo URL")


class PortfolioToken(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="Full token name")
    address: str = Field(description="Token contract address")
    symbol: str = Field(description="Token symbol (e.g. ETH, USDC)")
    decimals: int = Field(description="Token decimal places")
    value_usd: float = Field(description="Total value in USD")
    amount: float = Field(description="Token amount")
    logo_uri: Optional[str] = Field(default=None, alias="logoURI", description="Token logo URL")
