"""Chain and address helpers shared across the API."""

from .address import is_valid_evm_address, normalize_chain_id
from .chains import CHAIN_REGISTRY, get_chain_name, is_supported_chain

__all__ = [
    "CHAIN_REGISTRY",
    "get_chain_name",
    "is_supported_chain",
    "is_valid_evm_address",
    "normalize_chain_id",
]
