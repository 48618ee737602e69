#!/usr/bin/env python3
"""Simple CLI for checking the wallet portfolio API locally"""

import argparse
import asyncio
from typing import Any, Dict, List, Optional

import httpx

from wallet_api.config import settings
from wallet_api.errors import WalletApiError
from wallet_api.providers import OneInchPortfolioProvider, OneInchTokenProvider
from wallet_api.services import CHAIN_REGISTRY, get_chain_name, is_supported_chain
from wallet_api.services.portfolio import fetch_processed_portfolio
from wallet_api.services.wallet_views import build_balance, build_wallet_info

DEFAULT_TEST_ADDRESS = "0xe7995A5b1B41779DeA900E2204dc08110de363d5"
DEFAULT_BASE_URL = "http://localhost:8000"


def print_tokens(tokens):
    """Pretty print portfolio tokens"""
    if not tokens:
        print("❌ No tokens with a USD value")
        return

    print("\nTokens:")
    print("-" * 60)
    for i, token in enumerate(tokens, 1):
        logo = "🖼️ " if token.logo_uri else "  "
        print(f"{i:2d}. {logo}{token.amount:>16.6f} {token.symbol:<10} ${token.value_usd:>12,.2f}")
        if token.name != token.symbol:
            print(f"      {token.name}")


async def cli_portfolio(address: str, chain_id: str):
    """CLI command to get portfolio"""
    print(f"🔍 Fetching portfolio for {address} on {get_chain_name(chain_id)}...")

    try:
        tokens = await fetch_processed_portfolio(address, chain_id)
    except WalletApiError as e:
        print(f"❌ Error: {e}")
        return False

    print_tokens(tokens)
    return True


async def cli_balance(address: str, chain_id: str):
    try:
        tokens = await fetch_processed_portfolio(address, chain_id)
    except WalletApiError as e:
        print(f"❌ Error: {e}")
        return False

    balance = build_balance(address, chain_id, tokens)
    print(f"\n💰 Balance on {balance.chain_name} ({balance.chain_id})")
    print("=" * 50)
    print(f"Address: {balance.address}")
    print(f"Total Value: ${balance.total_balance_usd:,.2f} USD")
    print(f"Token Count: {balance.token_count}")
    return True


async def cli_info(address: str, chain_id: str):
    try:
        tokens = await fetch_processed_portfolio(address, chain_id)
    except WalletApiError as e:
        print(f"❌ Error: {e}")
        return False

    info = build_wallet_info(address, chain_id, tokens)
    summary = info.summary
    print(f"\nℹ️  Wallet on {info.chain_name} ({info.chain_id})")
    print("=" * 50)
    print(f"Total Value: ${summary.total_balance_usd:,.2f} USD")
    print(f"Token Count: {summary.token_count}")
    if summary.top_token:
        top = summary.top_token
        print(f"Top Token: {top.symbol} ${top.value_usd:,.2f} ({top.percentage}%)")

    for share in info.tokens:
        print(f"  {share.symbol:<10} {share.percentage:>6}%  ${share.value_usd:,.2f}")
    return True


async def cli_chains(address: str):
    """Probe every registered chain against the upstream portfolio API"""
    provider = OneInchPortfolioProvider()
    print(f"🧪 Checking portfolio API chain support for {address}\n")

    for chain in CHAIN_REGISTRY:
        try:
            holdings = await provider.get_holdings(address, chain.chain_id)
            print(f"✅ {chain.label}: SUPPORTED - {len(holdings)} holdings")
        except WalletApiError as e:
            cause = e.__cause__
            if isinstance(cause, httpx.HTTPStatusError) and cause.response.status_code == 400:
                print(f"❌ {chain.label}: NOT SUPPORTED - {e}")
            else:
                print(f"⚠️  {chain.label}: ERROR - {e}")
        # Stay under the proxy's rate limit
        await asyncio.sleep(0.5)


async def cli_providers():
    for provider in (OneInchPortfolioProvider(), OneInchTokenProvider()):
        status = await provider.health_check()
        details = ", ".join(f"{k}={v}" for k, v in status.items() if k != "status")
        print(f"{provider.name}: {status['status']} {details}")


def _smoke_summary(name: str, body: Dict[str, Any]) -> str:
    data = body.get("data") or {}
    if name == "health":
        return f"status={body.get('status')} chains={len(body.get('supportedChains', []))}"
    if name == "portfolio":
        return f"tokens={len(data)}"
    if name == "balance":
        return f"total=${data.get('totalBalanceUSD', 0):,.2f} tokens={data.get('tokenCount', 0)}"
    if name == "info":
        top = (data.get("summary") or {}).get("topToken") or {}
        return f"top={top.get('symbol', 'None')}"
    return f"endpoints={len(body.get('endpoints', []))}"


async def cli_smoke(base_url: str, address: str):
    """Call each endpoint of a running server"""
    base_url = base_url.rstrip("/")
    checks: List[tuple] = [
        ("health", "GET", "/wallet/health", None),
        ("portfolio", "POST", "/wallet/portfolio", {"address": address}),
        ("balance", "POST", "/wallet/balance", {"address": address}),
        ("info", "POST", "/wallet/info", {"address": address}),
        ("root", "GET", "/wallet", None),
    ]

    failed = 0
    async with httpx.AsyncClient(base_url=base_url, timeout=settings.request_timeout_seconds) as client:
        for name, method, path, payload in checks:
            try:
                response = await client.request(method, path, json=payload)
                body = response.json()
            except (httpx.HTTPError, ValueError) as e:
                failed += 1
                print(f"❌ {name}: {e}")
                continue

            if response.status_code == 200 and body.get("success"):
                print(f"✅ {name} ({response.status_code}): {_smoke_summary(name, body)}")
            else:
                failed += 1
                print(f"❌ {name} ({response.status_code}): {body.get('error', 'Unknown error')}")

    print(f"\n{len(checks) - failed}/{len(checks)} endpoints OK")
    return failed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Wallet Portfolio API CLI")
    subparsers = parser.add_subparsers(dest="command")

    for name, help_text in (
        ("portfolio", "Get portfolio tokens"),
        ("balance", "Get total portfolio balance"),
        ("info", "Get wallet summary"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("address", help="Wallet address")
        sub.add_argument("--chain", default=settings.default_chain_id, help="Chain id (default: %(default)s)")

    chains_parser = subparsers.add_parser("chains", help="Probe upstream support for each chain")
    chains_parser.add_argument("--address", default=DEFAULT_TEST_ADDRESS, help="Wallet address to query")

    subparsers.add_parser("providers", help="Check upstream provider health")

    smoke_parser = subparsers.add_parser("smoke", help="Call every endpoint of a running server")
    smoke_parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Server URL (default: %(default)s)")
    smoke_parser.add_argument("--address", default=DEFAULT_TEST_ADDRESS, help="Wallet address to query")

    return parser


async def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    command = args.command.lower()

    if command in ("portfolio", "balance", "info") and not is_supported_chain(args.chain):
        print(f"❌ Unsupported chain: {get_chain_name(args.chain)}")
        return 1

    if command == "portfolio":
        return 0 if await cli_portfolio(args.address, args.chain) else 1

    elif command == "balance":
        return 0 if await cli_balance(args.address, args.chain) else 1

    elif command == "info":
        return 0 if await cli_info(args.address, args.chain) else 1

    elif command == "chains":
        await cli_chains(args.address)

    elif command == "providers":
        await cli_providers()

    elif command == "smoke":
        failed = await cli_smoke(args.base_url, args.address)
        return 1 if failed else 0

    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
