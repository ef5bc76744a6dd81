"""Client for the price cache proxy server."""

from __future__ import annotations

import re
from typing import Any, Optional

import httpx

from ..assets import PriceProviderAsset, PriceProviderNetwork
from ..config import Settings
from ..logging_utils import get_logger

logger = get_logger(__name__)

_DECIMAL_PRICE = re.compile(r"-?\d+(\.\d+)?")


class PriceServerClient:
    """Looks up USD prices on the proxy server's ``/pricer`` endpoint.

    Every failure is logged and reported as ``None``; callers never see an
    exception from this client and no retry is attempted.
    """

    def __init__(
        self,
        settings: Settings,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.base_url = (base_url or settings.pricer_proxy_server_url or "").rstrip("/")
        # no server configured means no connection pool to manage
        self._http: Optional[httpx.AsyncClient] = None
        if self.base_url:
            self._http = httpx.AsyncClient(timeout=settings.pricer_request_timeout_sec, transport=transport)

    @property
    def enabled(self) -> bool:
        return bool(self.base_url)

    async def get_price(
        self,
        asset: PriceProviderAsset | str,
        network: PriceProviderNetwork | str,
        address: str,
    ) -> Optional[str]:
        """Fetch the USD price string of ``asset`` on ``network``.

        Args:
            asset: Asset symbol on the price provider.
            network: Network name on the price provider.
            address: Token address of the asset on ``network``.

        Returns:
            The price string, or ``None`` when not found or on any error.
        """
        log = logger.bind(asset=_value(asset), network=_value(network), address=address)
        if not self.enabled or self._http is None:
            log.debug("Price cache server URL not defined. Default to local cache.")
            return None
        if not address:
            log.debug("No asset address was provided. Default to local cache.")
            return None

        params = {"network": _value(network), "asset": _value(asset), "address": address}
        try:
            resp = await self._http.get(f"{self.base_url}/pricer", params=params)
            if resp.status_code == 404:
                log.warning("Price for asset not found on price cache server.", status=resp.status_code)
                return None
            if resp.status_code != 200:
                log.error(
                    "Could not fetch asset price from price cache server.",
                    status=resp.status_code,
                    reason=resp.reason_phrase,
                )
                return None
            payload = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            log.error("Unexpected error while fetching asset price from price cache server", err=str(exc))
            return None

        price = payload.get("price") if isinstance(payload, dict) else None
        if not price:
            log.error("Request to price cache server is OK, but price was not found.", data=payload)
            return None
        text = _price_text(price)
        if text is None:
            log.error("Price cache server returned a price that is not a decimal number.", price=repr(price))
            return None
        return text

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._http is not None:
            await self._http.aclose()


def _price_text(price: Any) -> Optional[str]:
    """Plain decimal rendering of a server price, or ``None`` when it is not one."""
    # services 包在导入时依赖本模块，这里延迟导入
    from ..services.fixed_point import number_to_string

    if isinstance(price, bool):
        return None
    if isinstance(price, (int, float)):
        text = number_to_string(price) if isinstance(price, float) else str(price)
    elif isinstance(price, str):
        text = price.strip()
    else:
        return None
    return text if _DECIMAL_PRICE.fullmatch(text) else None


def _value(item: PriceProviderAsset | PriceProviderNetwork | str) -> str:
    return item.value if hasattr(item, "value") else str(item)
