"""Static asset and network tables.

Closed enums for the assets and networks known to the price provider and to
the circuit, plus the lookup tables between them. Every circuit network has
an entry in ``CIRCUIT_NETWORK_TO_PROVIDER``; networks the price provider does
not cover map to ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class PriceProviderAsset(str, Enum):
    ETH = "eth"
    BTC = "btc"
    SOL = "sol"
    FIL = "filecoin"
    DAI = "dai"
    USDC = "usdc"
    USDT = "usdt"
    T3USD = "usdt"
    MATIC = "matic"
    OPTIMISM = "optimism"
    BASE = "base"
    SCROLL = "scroll"
    ARBITRUM = "arbitrum"
    BSC = "bsc"
    BNB = "bsc"
    TRN = "trn"
    BRN = "brn"
    DOT = "dot"
    UNKNOWN = "unknown"


class VendorAsset(str, Enum):
    """Synthetic tokens issued by the vendor, priced through a real asset."""

    BTC = "t3BTC"
    SOL = "t3SOL"
    DOT = "t3DOT"
    USD = "t3USD"
    TRN = "TRN"
    BRN = "BRN"


class PriceProviderNetwork(str, Enum):
    ARBITRUM = "arbitrum"
    AVALANCHE = "avalanche"
    AVALANCHE_FUJI = "avalanche_fuji"
    BASE = "base"
    BLAST = "blast"
    BSC = "bsc"
    ETH = "eth"
    ETH_GOERLI = "eth_goerli"
    FANTOM = "fantom"
    FILE = "file"
    FILECOIN = "filecoin"
    FLARE = "flare"
    GNOSIS = "gnosis"
    L0RN = "l0rn"
    LINEA = "linea"
    OPTIMISM = "optimism"
    OPTIMISM_TESTNET = "optimism_testnet"
    POLYGON = "polygon"
    POLYGON_MUMBAI = "polygon_mumbai"
    POLYGON_ZKEVM = "polygon_zkevm"
    ROLLUX = "rollux"
    SCROLL = "scroll"
    SYSCOIN = "syscoin"
    T0RN = "t0rn"
    T2RN = "t2rn"


class CircuitNetwork(str, Enum):
    BASE = "base"
    ARBM = "arbm"
    BSCM = "bscm"
    OPTI = "opti"
    LINM = "linm"
    ETHM = "ethm"
    BSCT = "bsct"
    OPSP = "opsp"
    BSGR = "bsgr"
    BSCP = "bscp"
    BSSP = "bssp"
    SCRT = "scrt"
    ARBT = "arbt"
    SEPL = "sepl"
    POLY = "poly"
    L0RN = "l0rn"
    L1RN = "l1rn"
    L3RN = "l3rn"
    T0RN = "t0rn"
    T2RN = "t2rn"
    T3RN = "t3rn"
    LINE = "line"
    FILE = "file"
    BLSS = "blss"
    BLST = "blst"


@dataclass(frozen=True)
class AssetAndAddress:
    asset: PriceProviderAsset
    address: str
    network: PriceProviderNetwork


_P = PriceProviderNetwork
_A = PriceProviderAsset

CIRCUIT_NETWORK_TO_PROVIDER: Dict[CircuitNetwork, Optional[PriceProviderNetwork]] = {
    CircuitNetwork.ETHM: _P.ETH,
    CircuitNetwork.BASE: _P.BASE,
    CircuitNetwork.ARBM: _P.ARBITRUM,
    CircuitNetwork.BSCM: _P.BSC,
    CircuitNetwork.OPTI: _P.OPTIMISM,
    CircuitNetwork.LINM: _P.LINEA,
    CircuitNetwork.BSCT: _P.BSC,
    CircuitNetwork.OPSP: _P.OPTIMISM,
    CircuitNetwork.BSGR: _P.BASE,
    CircuitNetwork.BSCP: _P.BASE,
    CircuitNetwork.BSSP: _P.BASE,
    CircuitNetwork.SCRT: _P.SCROLL,
    CircuitNetwork.ARBT: _P.ARBITRUM,
    CircuitNetwork.SEPL: _P.ETH,
    CircuitNetwork.POLY: _P.POLYGON,
    CircuitNetwork.T0RN: _P.POLYGON,
    CircuitNetwork.L0RN: _P.ARBITRUM,
    CircuitNetwork.L1RN: _P.ARBITRUM,
    CircuitNetwork.L3RN: _P.ARBITRUM,
    CircuitNetwork.LINE: _P.LINEA,
    CircuitNetwork.BLSS: _P.BLAST,
    CircuitNetwork.BLST: _P.BLAST,
    CircuitNetwork.T2RN: None,
    CircuitNetwork.T3RN: None,
    CircuitNetwork.FILE: None,
}

# Circuit asset id -> price provider asset
CIRCUIT_ASSET_TO_PROVIDER: Dict[int, PriceProviderAsset] = {
    0: _A.ETH,
    1: _A.BTC,
    2: _A.BNB,
    3: _A.SOL,
    100: _A.DOT,
    101: _A.USDC,
    102: _A.USDT,
    103: _A.DAI,
    104: _A.T3USD,
    199: _A.FIL,
    3333: _A.TRN,
    3343: _A.BRN,
}

_VENDOR_TO_PROVIDER: Dict[str, PriceProviderAsset] = {
    VendorAsset.BTC.value.lower(): _A.BTC,
    VendorAsset.DOT.value.lower(): _A.DOT,
    VendorAsset.SOL.value.lower(): _A.SOL,
    VendorAsset.USD.value.lower(): _A.USDT,
    VendorAsset.TRN.value.lower(): _A.USDT,
    VendorAsset.BRN.value.lower(): _A.USDT,
}

_PROVIDER_TO_VENDOR: Dict[PriceProviderAsset, VendorAsset] = {
    _A.BTC: VendorAsset.BTC,
    _A.SOL: VendorAsset.SOL,
    _A.DOT: VendorAsset.DOT,
    _A.T3USD: VendorAsset.USD,
    _A.TRN: VendorAsset.TRN,
    _A.BRN: VendorAsset.BRN,
}


def _entries(network: PriceProviderNetwork, *pairs: Tuple[PriceProviderAsset, str]) -> Tuple[AssetAndAddress, ...]:
    return tuple(AssetAndAddress(asset=asset, address=address, network=network) for asset, address in pairs)


_ZERO = "0x0000000000000000000000000000000000000000"

NETWORK_ASSET_ADDRESSES: Dict[PriceProviderNetwork, Tuple[AssetAndAddress, ...]] = {
    _P.ETH: _entries(
        _P.ETH,
        (_A.ETH, _ZERO),
        (_A.USDC, "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"),
        (_A.USDT, "0xdac17f958d2ee523a2206206994597c13d831ec7"),
        (_A.MATIC, "0x7d1afa7b718fb893db30a3abc0cfc608aacfebb0"),
        (_A.ARBITRUM, "0xb50721bcf8d664c30412cfbc6cf7a15145234ad1"),
        (_A.OPTIMISM, "0x4200000000000000000000000000000000000042"),
    ),
    _P.BASE: _entries(
        _P.BASE,
        (_A.BASE, _ZERO),
        (_A.ETH, "0x4200000000000000000000000000000000000006"),
        (_A.USDC, "0x833589fcd6edb6e08f4c7c32d4f71b54bda02913"),
    ),
    _P.SCROLL: _entries(
        _P.SCROLL,
        (_A.SCROLL, _ZERO),
        (_A.ETH, "0x5300000000000000000000000000000000000004"),
        (_A.USDC, "0x06efdbff2a14a7c8e15944d1f4a48f9f95f663a4"),
        (_A.USDT, "0xf55bec9cafdbe8730f096aa55dad6d22d44099df"),
    ),
    _P.ARBITRUM: _entries(
        _P.ARBITRUM,
        (_A.ARBITRUM, "0x912ce59144191c1204e64559fe8253a0e49e6548"),
        (_A.ETH, "0x82af49447d8a07e3bd95bd0d56f35241523fbab1"),
        (_A.USDC, "0xaf88d065e77c8cc2239327c5edb3a432268e5831"),
        (_A.USDT, "0xfd086bc7cd5c481dcc9c85ebe478a1c0b69fcbb9"),
    ),
    _P.BSC: _entries(
        _P.BSC,
        (_A.BSC, _ZERO),
        (_A.ETH, "0x2170ed0880ac9a755fd29b2688956bd959f933f8"),
        (_A.USDC, "0x8ac76a51cc950d9822d68b83fe1ad97b32cd580d"),
        (_A.USDT, "0x55d398326f99059ff775485246999027b3197955"),
        (_A.ARBITRUM, "0xa050ffb3eeb8200eeb7f61ce34ff644420fd3522"),
        (_A.OPTIMISM, "0x170c84e3b1d282f9628229836086716141995200"),
        (_A.MATIC, "0xcc42724c6683b7e57334c4e856f4c9965ed682bd"),
        # wrapped DOT
        (_A.DOT, "0x7083609fCE4d1d8Dc0C979AAb8c869Ea2C873402"),
    ),
    _P.POLYGON: _entries(
        _P.POLYGON,
        (_A.MATIC, "0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270"),
        (_A.ETH, _ZERO),
        (_A.USDC, "0x625e7708f30ca75bfd92586e17077590c60eb4cd"),
        (_A.USDT, "0xc2132d05d31c914a87c6611c10748aeb04b58e8f"),
    ),
    _P.OPTIMISM: _entries(
        _P.OPTIMISM,
        (_A.OPTIMISM, "0x4200000000000000000000000000000000000042"),
        # wrapped ETH
        (_A.ETH, "0x4200000000000000000000000000000000000006"),
        (_A.USDC, "0x0b2c639c533813f4aa9d7837caf62653d097ff85"),
        (_A.USDT, "0x94b008aa00579c1307b0ef2c499ad98a8ce58e58"),
        (_A.MATIC, "0xe211233fe8b6964208cfc7ca66df9c0340088670"),
    ),
    _P.FILE: _entries(
        _P.FILE,
        (_A.OPTIMISM, "0x4200000000000000000000000000000000000042"),
        (_A.ETH, _ZERO),
        (_A.USDC, "0x0b2c639c533813f4aa9d7837caf62653d097ff85"),
        (_A.USDT, "0x94b008aa00579c1307b0ef2c499ad98a8ce58e58"),
        (_A.MATIC, "0xe211233fe8b6964208cfc7ca66df9c0340088670"),
    ),
    _P.LINEA: _entries(
        _P.LINEA,
        (_A.ETH, _ZERO),
        (_A.USDT, "0x1990bc6dfe2ef605bfc08f5a23564db75642ad73"),
    ),
    _P.L0RN: _entries(_P.L0RN, (_A.ETH, _ZERO)),
    _P.AVALANCHE_FUJI: (),
    _P.AVALANCHE: (),
    _P.FANTOM: (),
    _P.SYSCOIN: (),
    _P.FLARE: (),
    _P.GNOSIS: (),
    _P.POLYGON_MUMBAI: (),
    _P.POLYGON_ZKEVM: (),
    _P.ROLLUX: (),
    _P.ETH_GOERLI: (),
    _P.OPTIMISM_TESTNET: (),
    _P.T0RN: (),
    _P.T2RN: (),
    _P.FILECOIN: (),
    _P.BLAST: (),
}

# Synthetic USD price per unit, used when an asset has no known address.
FAKE_PRICE_MULTIPLIERS: Dict[PriceProviderAsset, int] = {
    _A.TRN: 2,
    _A.BTC: 40000,
    _A.ETH: 2000,
    _A.BNB: 400,
    _A.SOL: 100,
    _A.DOT: 6,
    _A.USDC: 1,
    _A.USDT: 1,
    _A.DAI: 1,
    _A.FIL: 4,
}
FAKE_PRICE_DIVISORS: Dict[PriceProviderAsset, int] = {
    _A.BRN: 10,
}


def to_vendor_asset(asset: PriceProviderAsset) -> VendorAsset:
    """Vendor token backed by the given price provider asset."""
    try:
        return _PROVIDER_TO_VENDOR[asset]
    except KeyError:
        raise ValueError(f"Asset {asset.value} not supported") from None


def from_vendor_token(token_name: str) -> PriceProviderAsset:
    """Price provider asset a vendor token is priced by (case-insensitive)."""
    try:
        return _VENDOR_TO_PROVIDER[token_name.lower()]
    except KeyError:
        raise ValueError(f"Asset {token_name} not supported") from None


def is_vendor_token(name: str) -> bool:
    return name.lower() in _VENDOR_TO_PROVIDER


def map_symbol_to_currency(asset_id: int) -> str:
    """Upper-cased provider symbol of a circuit asset id, e.g. ``0 -> "ETH"``."""
    return CIRCUIT_ASSET_TO_PROVIDER[asset_id].value.upper()


__all__ = [
    "AssetAndAddress",
    "CIRCUIT_ASSET_TO_PROVIDER",
    "CIRCUIT_NETWORK_TO_PROVIDER",
    "CircuitNetwork",
    "FAKE_PRICE_DIVISORS",
    "FAKE_PRICE_MULTIPLIERS",
    "NETWORK_ASSET_ADDRESSES",
    "PriceProviderAsset",
    "PriceProviderNetwork",
    "VendorAsset",
    "from_vendor_token",
    "is_vendor_token",
    "map_symbol_to_currency",
    "to_vendor_asset",
]
