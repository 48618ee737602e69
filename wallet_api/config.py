from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .services.chains import CHAIN_REGISTRY


BASE_DIR = Path(__file__).resolve().parents[1]

ONEINCH_PROXY_URL = "https://1inch-proxy-prtfl.vercel.app"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Server Settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: Optional[bool] = Field(
        default=None,
        description="Render logs as JSON; unset means JSON unless log_level is DEBUG",
    )
    api_version: str = Field(default="1.0.0", description="Version reported by the health endpoint")

    # Upstream APIs
    portfolio_api_base_url: str = Field(
        default=ONEINCH_PROXY_URL,
        description="Base URL for the portfolio snapshot API",
    )
    token_api_base_url: str = Field(
        default=ONEINCH_PROXY_URL,
        description="Base URL for the token metadata API",
    )
    request_timeout_seconds: float = Field(default=30, description="Upstream request timeout")

    # Chains
    default_chain_id: str = Field(default="8453", description="Chain used when a request omits chainId")

    # Responses
    cache_max_age_seconds: int = Field(default=60, description="max-age for cacheable data responses")

    @field_validator("default_chain_id", mode="before")
    @classmethod
    def _known_default_chain(cls, value):
        chain_id = str(value).strip()
        if not CHAIN_REGISTRY.is_supported(chain_id):
            raise ValueError(f"default_chain_id {chain_id!r} is not a supported chain")
        return chain_id


settings = Settings()
