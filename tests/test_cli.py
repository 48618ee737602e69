import functools

import httpx
import pytest

import cli
from wallet_api.errors import UpstreamFailure
from wallet_api.main import app

WALLET = "0xe7995A5b1B41779DeA900E2204dc08110de363d5"


def test_parser_defaults_to_configured_chain():
    args = cli.build_parser().parse_args(["balance", WALLET])

    assert args.command == "balance"
    assert args.chain == "8453"


def test_parser_smoke_options():
    args = cli.build_parser().parse_args(["smoke", "--base-url", "http://api.test"])

    assert args.base_url == "http://api.test"
    assert args.address == cli.DEFAULT_TEST_ADDRESS


@pytest.mark.asyncio
async def test_unsupported_chain_exits_non_zero(capsys):
    assert await cli.main(["portfolio", WALLET, "--chain", "534352"]) == 1
    assert "Unknown Chain (534352)" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_info_prints_summary(stub_upstream, holding, asset, capsys):
    stub_upstream[0].holdings = [holding("Wrapped Ether", "0x4200000000000000000000000000000000000006", "WETH", asset(250.5, amount="1.2"))]

    assert await cli.main(["info", WALLET]) == 0

    out = capsys.readouterr().out
    assert "Top Token: WETH $250.50 (100.00%)" in out


@pytest.mark.asyncio
async def test_smoke_against_app(stub_upstream, monkeypatch, capsys):
    transport = httpx.ASGITransport(app=app)
    monkeypatch.setattr(cli.httpx, "AsyncClient", functools.partial(httpx.AsyncClient, transport=transport))

    failed = await cli.cli_smoke("http://testserver", WALLET)

    out = capsys.readouterr().out
    assert failed == 0
    assert "5/5 endpoints OK" in out
    assert "✅ balance (200): total=$0.00 tokens=0" in out


@pytest.mark.asyncio
@pytest.mark.parametrize("command", ["portfolio", "balance", "info"])
async def test_upstream_error_exits_non_zero(stub_upstream, capsys, command):
    stub_upstream[0].error = UpstreamFailure("portfolio down")

    assert await cli.main([command, WALLET]) == 1
    assert "❌ Error: portfolio down" in capsys.readouterr().out
