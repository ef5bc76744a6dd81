"""In-memory USD price cache with remote fallback."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional, Union

from ..assets import AssetAndAddress, PriceProviderAsset, PriceProviderNetwork
from ..clients.price_server import PriceServerClient
from ..config import Settings
from ..logging_utils import get_logger

logger = get_logger(__name__)

SingleNetworkCache = Dict[PriceProviderAsset, str]
NetworkToPrice = Dict[PriceProviderNetwork, str]
MultiNetworkCache = Dict[PriceProviderAsset, NetworkToPrice]

CleanupHandle = asyncio.Task


class PriceCache:
    """资产 USD 价格缓存，按资产或按 (资产, 网络) 键控。

    模式在构造时由 ``settings.pricer_use_multichain`` 决定且不再改变；
    两套存储相互独立，只读写、清空当前模式对应的那一套。条目没有
    单独的过期时间：调用 ``init_cleanup`` 后，每隔
    ``pricer_cleanup_interval_sec`` 秒整体清空一次。

    Attributes:
        use_multichain: 是否按 (资产, 网络) 缓存。
    """

    def __init__(self, settings: Settings, client: Optional[PriceServerClient] = None):
        self.settings = settings
        self.use_multichain = settings.pricer_use_multichain
        self._client = client or PriceServerClient(settings)
        self._single: SingleNetworkCache = {}
        self._multi: MultiNetworkCache = {}
        self._cleanup_tasks: List[CleanupHandle] = []

    async def get(
        self,
        asset: PriceProviderAsset,
        network: PriceProviderNetwork,
        asset_obj: Optional[AssetAndAddress] = None,
    ) -> Optional[str]:
        """读取缓存价格，未命中时回退到代理价格服务器。

        仅当 ``asset_obj`` 带有地址时才请求远端；远端取到的价格先写入
        缓存再返回。远端失败一律视为未命中。

        Returns:
            价格字符串；未找到时返回 ``None``。
        """
        price = self.get_local(asset, network)
        if price is not None:
            return price

        if asset_obj is not None and asset_obj.address:
            price = await self.get_price_from_cache_server(asset, network, asset_obj.address)
            if price:
                self.set(asset, network, price)
                return price

        return None

    def get_local(self, asset: PriceProviderAsset, network: PriceProviderNetwork) -> Optional[str]:
        if self.use_multichain:
            return self._multi.get(asset, {}).get(network)
        return self._single.get(asset)

    async def get_price_from_cache_server(
        self,
        asset: PriceProviderAsset,
        network: PriceProviderNetwork,
        address: str,
    ) -> Optional[str]:
        return await self._client.get_price(asset, network, address)

    def set(
        self,
        asset: PriceProviderAsset,
        network: PriceProviderNetwork,
        price: str,
    ) -> Union[SingleNetworkCache, NetworkToPrice]:
        """Store ``price`` and return the map that was written to.

        Single-network mode returns the whole cache; multichain mode returns
        the per-asset network map.
        """
        if self.use_multichain:
            per_network = self._multi.setdefault(asset, {})
            per_network[network] = price
            return per_network
        self._single[asset] = price
        return self._single

    def init_cleanup(self) -> CleanupHandle:
        """启动周期清空缓存的定时任务。

        需在运行中的事件循环内调用。每次调用都会启动一个新的独立
        定时器，``stop_cleanup`` 会全部取消。
        """
        task = asyncio.get_running_loop().create_task(self._cleanup_loop())
        self._cleanup_tasks.append(task)
        return task

    async def _cleanup_loop(self) -> None:
        interval = self.settings.pricer_cleanup_interval_sec
        while True:
            await asyncio.sleep(interval)
            self.clean()
            logger.debug("Price cache flushed", interval_sec=interval)

    async def stop_cleanup(self) -> None:
        tasks, self._cleanup_tasks = self._cleanup_tasks, []
        for task in tasks:
            task.cancel()
        # cancelled timers raise CancelledError into gather
        await asyncio.gather(*tasks, return_exceptions=True)

    async def aclose(self) -> None:
        """Stop every cleanup timer and close the price server client."""
        await self.stop_cleanup()
        await self._client.close()

    def clean(self) -> None:
        if self.use_multichain:
            self._multi.clear()
        else:
            self._single.clear()

    def get_whole_cache(self) -> Union[SingleNetworkCache, MultiNetworkCache]:
        """Live reference to the active store. Intended for diagnostics and tests."""
        return self._multi if self.use_multichain else self._single
