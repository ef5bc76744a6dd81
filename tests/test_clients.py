"""价格服务器与 Gas 价格 RPC 客户端测试，全部使用 httpx.MockTransport。"""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from chain_pricer.assets import PriceProviderAsset, PriceProviderNetwork
from chain_pricer.clients.price_server import PriceServerClient
from chain_pricer.clients.rpc import RpcClient, RpcError
from chain_pricer.config import Settings

ADDRESS = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"


def _price(handler, base_url: str | None = "http://proxy.local/") -> str | None:
    settings = Settings(pricer_proxy_server_url=None)
    client = PriceServerClient(settings, base_url=base_url, transport=httpx.MockTransport(handler))

    async def _run() -> str | None:
        try:
            return await client.get_price(PriceProviderAsset.USDC, PriceProviderNetwork.ETH, ADDRESS)
        finally:
            await client.close()

    return asyncio.run(_run())


def test_price_server_returns_price_string() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"price": 1.0001})

    assert _price(handler) == "1.0001"
    assert str(seen[0].url).startswith("http://proxy.local/pricer?")
    assert seen[0].url.params["asset"] == "usdc"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(404, json={"error": "not found"}),
        httpx.Response(503),
        httpx.Response(200, json={}),
        httpx.Response(200, json=["1.0"]),
    ],
)
def test_price_server_failures_are_none(response: httpx.Response) -> None:
    assert _price(lambda request: response) is None


def test_price_server_timeout_is_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    assert _price(handler) is None


def test_price_server_disabled_without_url() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    client = PriceServerClient(Settings(pricer_proxy_server_url=None))
    assert client.enabled is False
    assert asyncio.run(client.get_price("eth", "eth", ADDRESS)) is None
    assert _price(handler, base_url=None) is None


def _gas_client(handler, **overrides) -> RpcClient:
    settings = Settings(rpc_url="http://node.local", **overrides)
    return RpcClient(settings, transport=httpx.MockTransport(handler))


def test_gas_price_parses_hex_result() -> None:
    bodies: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        bodies.append(body)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": "0x4a817c800"})

    client = _gas_client(handler)

    async def _run() -> int:
        try:
            return await client()
        finally:
            await client.close()

    assert asyncio.run(_run()) == 20 * 10**9
    assert bodies[0]["method"] == "eth_gasPrice"
    assert bodies[0]["params"] == []


def test_gas_price_rpc_error() -> None:
    client = _gas_client(
        lambda request: httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32000, "message": "x"}})
    )

    async def _run() -> int:
        try:
            return await client.get_gas_price()
        finally:
            await client.close()

    with pytest.raises(RpcError):
        asyncio.run(_run())


def test_gas_price_retries_then_succeeds() -> None:
    calls = {"n": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["n"] += 1
        if calls["n"] == 1:
            return httpx.Response(502)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": 2, "result": "0x3b9aca00"})

    client = _gas_client(handler, rpc_retry_attempts=2)

    async def _run() -> int:
        try:
            return await client.get_gas_price_with_retry()
        finally:
            await client.close()

    assert asyncio.run(_run()) == 10**9
    assert calls["n"] == 2


def test_gas_client_requires_url() -> None:
    with pytest.raises(ValueError):
        RpcClient(Settings(rpc_url=None))


def test_balance_of_encodes_erc20_call() -> None:
    bodies: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        bodies.append(body)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": "0x" + "0" * 60 + "03e8"})

    client = _gas_client(handler)

    async def _run() -> int:
        try:
            return await client.balance_of(ADDRESS, "0x00000000000000000000000000000000000000AA")
        finally:
            await client.close()

    assert asyncio.run(_run()) == 1000
    assert bodies[0]["method"] == "eth_call"
    call, block = bodies[0]["params"]
    assert block == "latest"
    assert call["to"] == ADDRESS
    assert call["data"] == "0x70a08231" + "0" * 62 + "aa"


def test_balance_of_empty_result_is_zero() -> None:
    client = _gas_client(lambda request: httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": "0x"}))

    async def _run() -> int:
        try:
            return await client.balance_of(ADDRESS, ADDRESS)
        finally:
            await client.close()

    assert asyncio.run(_run()) == 0
