"""Derived views over an assembled portfolio: balance totals and the wallet summary."""

from __future__ import annotations

from typing import List, Optional

from ..types import (
    BalanceData,
    PortfolioToken,
    TokenShare,
    WalletInfoData,
    WalletSummary,
)
from .chains import get_chain_name


def total_balance(tokens: List[PortfolioToken]) -> float:
    return sum((token.value_usd for token in tokens), 0.0)


def format_percentage(value_usd: float, total: float) -> str:
    """Share of ``total`` as a two-decimal string; an empty portfolio reports 0.00."""
    if total == 0:
        return "0.00"
    return f"{value_usd / total * 100:.2f}"


def top_token(tokens: List[PortfolioToken]) -> Optional[PortfolioToken]:
    """Highest-value token. On a tie the later token wins."""
    best: Optional[PortfolioToken] = None
    for token in tokens:
        if best is None or not best.value_usd > token.value_usd:
            best = token
    return best


def _share(token: PortfolioToken, total: float) -> TokenShare:
    return TokenShare(
        symbol=token.symbol,
        name=token.name,
        value_usd=token.value_usd,
        percentage=format_percentage(token.value_usd, total),
    )


def build_balance(address: str, chain_id: str, tokens: List[PortfolioToken]) -> BalanceData:
    return BalanceData(
        address=address,
        chain_id=chain_id,
        chain_name=get_chain_name(chain_id),
        total_balance_usd=total_balance(tokens),
        token_count=len(tokens),
    )


def build_wallet_info(address: str, chain_id: str, tokens: List[PortfolioToken]) -> WalletInfoData:
    total = total_balance(tokens)
    top = top_token(tokens)

    return WalletInfoData(
        address=address,
        chain_id=chain_id,
        chain_name=get_chain_name(chain_id),
        summary=WalletSummary(
            total_balance_usd=total,
            token_count=len(tokens),
            top_token=_share(top, total) if top else None,
        ),
        tokens=[_share(token, total) for token in tokens],
    )


__all__ = [
    "build_balance",
    "build_wallet_info",
    "format_percentage",
    "top_token",
    "total_balance",
]
