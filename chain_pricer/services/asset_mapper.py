"""Lookups between circuit ids, provider assets and on-chain addresses."""

from __future__ import annotations

from typing import Awaitable, Callable, List, Union

from ..assets import (
    CIRCUIT_ASSET_TO_PROVIDER,
    CIRCUIT_NETWORK_TO_PROVIDER,
    FAKE_PRICE_DIVISORS,
    FAKE_PRICE_MULTIPLIERS,
    NETWORK_ASSET_ADDRESSES,
    CircuitNetwork,
    PriceProviderAsset,
)
from ..config import Settings
from ..logging_utils import get_logger
from .fixed_point import number_to_string, parse_price_string_to_fixed18

logger = get_logger(__name__)

# (token_address, wallet_address) -> 余额（最小单位）
BalanceReader = Callable[[str, str], Awaitable[int]]


class AssetNotMappedError(LookupError):
    """A circuit network, asset id or address has no entry in the asset tables."""


class AssetMapper:
    """Read-only view over the static asset tables.

    Build one per process from :class:`Settings` and hand it to whoever needs
    it.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def get_supported_assets_for_network(self, network_id: CircuitNetwork) -> List[PriceProviderAsset]:
        network_name = CIRCUIT_NETWORK_TO_PROVIDER.get(network_id)
        assets_and_addresses = NETWORK_ASSET_ADDRESSES.get(network_name) if network_name else None
        if not assets_and_addresses:
            logger.warning("No assets configured for network", network=network_name or str(network_id))
            return []
        return [entry.asset for entry in assets_and_addresses]

    @staticmethod
    def get_asset_id(asset: PriceProviderAsset) -> int:
        """First circuit asset id priced by ``asset``, or 0 (ETH) when there is none."""
        for asset_id, mapped in CIRCUIT_ASSET_TO_PROVIDER.items():
            if mapped == asset:
                return asset_id
        return 0

    @staticmethod
    def fake_price_of_asset(amount: Union[int, float], asset: PriceProviderAsset) -> Union[int, float]:
        """Synthetic USD value of ``amount`` units of ``asset``; 0 for unknown assets."""
        multiplier = FAKE_PRICE_MULTIPLIERS.get(asset)
        if multiplier is not None:
            return amount * multiplier
        divisor = FAKE_PRICE_DIVISORS.get(asset)
        if divisor is not None:
            return amount / divisor
        return 0

    @staticmethod
    def fake_price_of_vendor_asset(amount: Union[int, float], asset_a: int, asset_b: int) -> float:
        """``amount`` of circuit asset ``asset_a`` expressed in ``asset_b`` at synthetic prices.

        Raises:
            ValueError: if either id is not a known circuit asset.
        """
        asset_name_a = CIRCUIT_ASSET_TO_PROVIDER.get(asset_a)
        asset_name_b = CIRCUIT_ASSET_TO_PROVIDER.get(asset_b)
        if asset_name_a is None or asset_name_b is None:
            raise ValueError(f"Asset {asset_a} or {asset_b} not found")
        price_a = AssetMapper.fake_price_of_asset(amount, asset_name_a)
        price_b = AssetMapper.fake_price_of_asset(amount, asset_name_b)
        if price_b == 0:
            return 0.0
        return (price_a / price_b) * amount

    def fake_price_fixed18(self, asset: PriceProviderAsset) -> int:
        """Synthetic USD price of one unit of ``asset``, Fixed18. 0 when unknown."""
        one = self.settings.one_on_18_decimals
        fake = self.fake_price_of_asset(one, asset)
        if fake <= 0:
            return 0
        return parse_price_string_to_fixed18(number_to_string(fake / one), self.settings.max_decimals_18)

    def map_asset_by_address(self, network_id: CircuitNetwork, asset_address: str) -> PriceProviderAsset:
        network_name = CIRCUIT_NETWORK_TO_PROVIDER.get(network_id)
        log = logger.bind(asset_address=asset_address, network_id=str(network_id), network_name=network_name)
        assets_for_network = NETWORK_ASSET_ADDRESSES.get(network_name) if network_name else None
        if assets_for_network is None:
            log.error("Network name on circuit not mapped to price provider")
            raise AssetNotMappedError(f"Network {network_id} not mapped to price provider")

        wanted = asset_address.lower()
        for entry in assets_for_network:
            if entry.address.lower() == wanted:
                return entry.asset

        log.error("Asset address does not match any addresses in the provided mapping")
        raise AssetNotMappedError(f"Address {asset_address} not mapped on {network_id}")

    def get_address_by_circuit_asset(self, network_id: CircuitNetwork, asset_id: int) -> str:
        """On-chain address of circuit asset ``asset_id`` on ``network_id``.

        Raises:
            AssetNotMappedError: unknown asset id, unmapped network, or no address
                for the asset on that network.
        """
        network_name = CIRCUIT_NETWORK_TO_PROVIDER.get(network_id)
        asset_name = CIRCUIT_ASSET_TO_PROVIDER.get(asset_id)
        log = logger.bind(asset=asset_id, network_id=str(network_id), network_name=network_name)

        if asset_name is None:
            log.error("Asset not mapped to a known asset name")
            raise AssetNotMappedError(f"Asset {asset_id} not mapped to a known asset name")

        entries = NETWORK_ASSET_ADDRESSES.get(network_name) if network_name else None
        if entries is None:
            log.error("Network not mapped to an asset address table")
            raise AssetNotMappedError(f"Network {network_id} has no asset address table")

        for entry in entries:
            if entry.asset == asset_name and entry.address:
                return entry.address

        log.error("Address not found in asset address table", asset_name=asset_name.value)
        raise AssetNotMappedError(f"No address for asset {asset_id} on {network_id}")

    async def check_asset_balance(
        self,
        wallet_address: str,
        asset_id: int,
        network_id: CircuitNetwork,
        balance_of: BalanceReader,
    ) -> int:
        """钱包在 ``network_id`` 上持有的电路资产 ``asset_id`` 余额。

        余额通过 ``balance_of(token_address, wallet_address)`` 读取。资产未知、
        在该网络上没有合约地址（或地址为零地址），以及读取失败时一律返回 0。
        """
        log = logger.bind(asset=asset_id, network_id=str(network_id), wallet=wallet_address)
        asset_name = CIRCUIT_ASSET_TO_PROVIDER.get(asset_id)
        if asset_name is None:
            log.error("Asset not found in config. Return zero as balance")
            return 0

        try:
            asset_address = self.get_address_by_circuit_asset(network_id, asset_id)
            if asset_address == self.settings.address_zero:
                log.warning("Asset not found on network. Return zero as balance", asset_name=asset_name.value)
                return 0
            return await balance_of(asset_address, wallet_address)
        except Exception as exc:  # noqa: BLE001
            log.error("Failed to read asset balance. Return zero as balance", error=str(exc))
            return 0
