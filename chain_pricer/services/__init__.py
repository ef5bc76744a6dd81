"""Business logic services: price cache, asset mapping, fixed-point pricing."""

from .asset_mapper import AssetMapper, AssetNotMappedError
from .price_cache import PriceCache
from .pricer import ERC20_GAS_LIMIT, ETH_TRANSFER_GAS_LIMIT, PriceNotFoundError, Pricer

__all__ = [
    "AssetMapper",
    "AssetNotMappedError",
    "PriceCache",
    "Pricer",
    "PriceNotFoundError",
    "ERC20_GAS_LIMIT",
    "ETH_TRANSFER_GAS_LIMIT",
]
