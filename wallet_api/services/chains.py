"""
Chain registry for the portfolio API.

Closed set of chains the upstream portfolio service can answer for. The
registry is built once at import time and never mutated afterwards.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Chain:
    """A supported chain."""
    chain_id: str
    name: str

    @property
    def label(self) -> str:
        return f"{self.name} ({self.chain_id})"


SUPPORTED_CHAINS: Tuple[Chain, ...] = (
    Chain("1", "Ethereum"),
    Chain("56", "BNB Chain"),
    Chain("137", "Polygon"),
    Chain("42161", "Arbitrum"),
    Chain("10", "Optimism"),
    Chain("43114", "Avalanche"),
    Chain("8453", "Base"),
    Chain("100", "Gnosis"),
    Chain("324", "zkSync Era"),
    Chain("59144", "Linea"),
    Chain("146", "Sonic"),
)


class ChainRegistry:
    """Read-only lookup of supported chains by id."""

    def __init__(self, chains: Tuple[Chain, ...]):
        self._chains = chains
        self._by_id: Mapping[str, Chain] = MappingProxyType(
            {chain.chain_id: chain for chain in chains}
        )

    def __iter__(self) -> Iterator[Chain]:
        return iter(self._chains)

    def __len__(self) -> int:
        return len(self._chains)

    def get(self, chain_id: str) -> Optional[Chain]:
        return self._by_id.get(chain_id)

    def is_supported(self, chain_id: str) -> bool:
        return chain_id in self._by_id

    def name_of(self, chain_id: str) -> str:
        """Display name for a chain id; unknown ids get a placeholder label."""
        chain = self._by_id.get(chain_id)
        if chain is None:
            return f"Unknown Chain ({chain_id})"
        return chain.name

    def labels(self) -> List[str]:
        return [chain.label for chain in self._chains]


CHAIN_REGISTRY = ChainRegistry(SUPPORTED_CHAINS)


def is_supported_chain(chain_id: str) -> bool:
    return CHAIN_REGISTRY.is_supported(chain_id)


def get_chain_name(chain_id: str) -> str:
    return CHAIN_REGISTRY.name_of(chain_id)


__all__ = [
    "Chain",
    "ChainRegistry",
    "CHAIN_REGISTRY",
    "SUPPORTED_CHAINS",
    "is_supported_chain",
    "get_chain_name",
]
