"""
Error types for the wallet API.

Every error carries the HTTP status it maps to. Handlers raise these and the
application-level exception handler renders them as
``{"success": false, "error": <message>}``.
"""

from typing import Optional

from .services.chains import get_chain_name


class WalletApiError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInput(WalletApiError):
    """Missing or malformed request data."""

    status_code = 400


class UnsupportedChain(WalletApiError):
    """Chain id outside the registry."""

    status_code = 400

    def __init__(self, chain_id: str):
        self.chain_id = chain_id
        self.chain_name = get_chain_name(chain_id)
        super().__init__(
            f"Unsupported chain ID: {chain_id}. "
            f"Chain {self.chain_name} is not supported by the portfolio API."
        )


class UpstreamFailure(WalletApiError):
    """Portfolio or metadata API call failed, or returned an unusable body."""

    status_code = 500


class MalformedAmount(UpstreamFailure):
    """An underlying token amount could not be parsed as a number."""

    def __init__(self, contract_address: str, amount: str):
        self.contract_address = contract_address
        self.amount = amount
        super().__init__(f"Malformed amount {amount!r} for token {contract_address}")


__all__ = [
    "WalletApiError",
    "InvalidInput",
    "UnsupportedChain",
    "UpstreamFailure",
    "MalformedAmount",
]
