"""Helpers for normalizing chain identifiers and validating wallet addresses."""

from __future__ import annotations

import re
from typing import Any

_EVM_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")


def is_valid_evm_address(address: Any) -> bool:
    if not address or not isinstance(address, str):
        return False
    return bool(_EVM_ADDRESS_RE.fullmatch(address))


def normalize_chain_id(chain_id: Any, default: str) -> str:
    """Coerce a user-provided chain id (string or integer) to its string key.

    Missing, blank or falsy values (``0``, ``false``) fall back to ``default``.
    """

    if not chain_id:
        return default
    text = str(chain_id).strip()
    return text or default


__all__ = [
    "is_valid_evm_address",
    "normalize_chain_id",
]
