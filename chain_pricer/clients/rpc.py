"""Minimal JSON-RPC client for gas prices and ERC20 balances."""

from __future__ import annotations

from typing import Any, Optional

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_fixed

from ..config import Settings
from ..logging_utils import get_logger

logger = get_logger(__name__)

# ERC20 balanceOf(address)
BALANCE_OF_SELECTOR = "0x70a08231"


class RpcError(RuntimeError):
    """The node answered with a JSON-RPC error object."""


class RpcClient:
    """Reads gas prices and token balances from an EVM node.

    ``get_gas_price`` makes a single call; ``get_gas_price_with_retry`` wraps
    it in a tenacity retry loop for callers that want one.
    """

    def __init__(
        self,
        settings: Settings,
        rpc_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.rpc_url = rpc_url or settings.rpc_url
        if not self.rpc_url:
            raise ValueError("rpc_url must be configured to read gas prices or balances")
        self._http = httpx.AsyncClient(timeout=settings.pricer_request_timeout_sec, transport=transport)
        self._request_id = 0

    async def _call(self, method: str, params: Optional[list[Any]] = None) -> Any:
        self._request_id += 1
        body = {"jsonrpc": "2.0", "id": self._request_id, "method": method, "params": params or []}
        resp = await self._http.post(self.rpc_url, json=body)
        resp.raise_for_status()
        payload = resp.json()
        if "error" in payload:
            raise RpcError(f"{method} failed: {payload['error']}")
        return payload["result"]

    async def get_gas_price(self) -> int:
        """Current gas price in wei."""
        result = await self._call("eth_gasPrice")
        return int(result, 16)

    async def get_gas_price_with_retry(self) -> int:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.settings.rpc_retry_attempts),
            wait=wait_fixed(1),
            retry=retry_if_exception_type((httpx.HTTPError, RpcError)),
            reraise=True,
        ):
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    logger.warning("Retrying gas price request", attempt=attempt.retry_state.attempt_number)
                return await self.get_gas_price()
        raise RuntimeError("unreachable")

    async def balance_of(self, token_address: str, wallet_address: str) -> int:
        """ERC20 ``balanceOf(wallet_address)`` on ``token_address`` at the latest block."""
        wallet = wallet_address.lower().removeprefix("0x")
        data = BALANCE_OF_SELECTOR + wallet.rjust(64, "0")
        result = await self._call("eth_call", [{"to": token_address, "data": data}, "latest"])
        return int(result, 16) if result not in (None, "0x") else 0

    async def __call__(self) -> int:
        return await self.get_gas_price()

    async def close(self) -> None:
        await self._http.aclose()
