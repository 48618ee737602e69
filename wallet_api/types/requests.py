from pydantic import BaseModel, Field


class WalletRequest(BaseModel):
    address: str = Field(description="EVM wallet address")
    chain_id: str = Field(description="Chain id the request resolved to")
