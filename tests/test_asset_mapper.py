from __future__ import annotations

import asyncio

import pytest

from chain_pricer.assets import CircuitNetwork, PriceProviderAsset
from chain_pricer.config import Settings
from chain_pricer.services.asset_mapper import AssetMapper, AssetNotMappedError


def _mapper() -> AssetMapper:
    return AssetMapper(Settings())


def test_map_asset_by_address_is_case_insensitive() -> None:
    mapper = _mapper()
    address = "0x4200000000000000000000000000000000000006"

    assert mapper.map_asset_by_address(CircuitNetwork.BASE, address) == PriceProviderAsset.ETH
    assert mapper.map_asset_by_address(CircuitNetwork.BSCP, address.upper().replace("0X", "0x")) == PriceProviderAsset.ETH


def test_map_asset_by_address_unknown() -> None:
    mapper = _mapper()

    with pytest.raises(AssetNotMappedError):
        mapper.map_asset_by_address(CircuitNetwork.ETHM, "0xnonexistentaddress")
    # 报价方未覆盖的电路网络
    with pytest.raises(AssetNotMappedError):
        mapper.map_asset_by_address(CircuitNetwork.T3RN, "0x0000000000000000000000000000000000000000")


def test_supported_assets_for_network() -> None:
    mapper = _mapper()

    assert mapper.get_supported_assets_for_network(CircuitNetwork.BSCP) == [
        PriceProviderAsset.BASE,
        PriceProviderAsset.ETH,
        PriceProviderAsset.USDC,
    ]
    assert mapper.get_supported_assets_for_network(CircuitNetwork.T3RN) == []
    assert mapper.get_supported_assets_for_network(CircuitNetwork.BLSS) == []


def test_get_asset_id() -> None:
    assert AssetMapper.get_asset_id(PriceProviderAsset.USDC) == 101
    assert AssetMapper.get_asset_id(PriceProviderAsset.BRN) == 3343
    # 别名取第一个匹配的编号
    assert AssetMapper.get_asset_id(PriceProviderAsset.T3USD) == 102
    assert AssetMapper.get_asset_id(PriceProviderAsset.MATIC) == 0


def test_get_address_by_circuit_asset() -> None:
    mapper = _mapper()

    assert mapper.get_address_by_circuit_asset(CircuitNetwork.ETHM, 101) == "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
    assert mapper.get_address_by_circuit_asset(CircuitNetwork.BSCM, 100) == "0x7083609fCE4d1d8Dc0C979AAb8c869Ea2C873402"

    with pytest.raises(AssetNotMappedError):
        mapper.get_address_by_circuit_asset(CircuitNetwork.ETHM, 999)
    with pytest.raises(AssetNotMappedError):
        mapper.get_address_by_circuit_asset(CircuitNetwork.T3RN, 0)
    with pytest.raises(AssetNotMappedError):
        mapper.get_address_by_circuit_asset(CircuitNetwork.ETHM, 3)


def test_fake_price_of_asset() -> None:
    assert AssetMapper.fake_price_of_asset(2, PriceProviderAsset.ETH) == 4000
    assert AssetMapper.fake_price_of_asset(3, PriceProviderAsset.BRN) == pytest.approx(0.3)
    assert AssetMapper.fake_price_of_asset(1, PriceProviderAsset.MATIC) == 0


def test_fake_price_of_vendor_asset() -> None:
    assert AssetMapper.fake_price_of_vendor_asset(1, 0, 101) == pytest.approx(2000.0)
    assert AssetMapper.fake_price_of_vendor_asset(2, 0, 101) == pytest.approx(4000.0)
    assert AssetMapper.fake_price_of_vendor_asset(1, 0, 3343) == pytest.approx(20000.0)

    with pytest.raises(ValueError):
        AssetMapper.fake_price_of_vendor_asset(1, 0, 42)


def test_fake_price_fixed18() -> None:
    mapper = _mapper()

    assert mapper.fake_price_fixed18(PriceProviderAsset.BTC) == 40000 * 10**18
    assert mapper.fake_price_fixed18(PriceProviderAsset.BRN) == 10**17
    assert mapper.fake_price_fixed18(PriceProviderAsset.SCROLL) == 0


WALLET = "0x00000000000000000000000000000000000000aa"
USDC_ON_ETH = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"


def _balance_reader(balance: int, calls: list[tuple[str, str]]):
    async def _balance_of(token_address: str, wallet_address: str) -> int:
        calls.append((token_address, wallet_address))
        return balance

    return _balance_of


def test_check_asset_balance_reads_token_contract() -> None:
    mapper = _mapper()
    calls: list[tuple[str, str]] = []

    balance = asyncio.run(mapper.check_asset_balance(WALLET, 101, CircuitNetwork.ETHM, _balance_reader(42, calls)))

    assert balance == 42
    assert calls == [(USDC_ON_ETH, WALLET)]


def test_check_asset_balance_returns_zero_without_contract() -> None:
    mapper = _mapper()
    calls: list[tuple[str, str]] = []
    reader = _balance_reader(42, calls)

    # 未知资产编号、原生币（零地址）、网络上没有该资产
    assert asyncio.run(mapper.check_asset_balance(WALLET, 999, CircuitNetwork.ETHM, reader)) == 0
    assert asyncio.run(mapper.check_asset_balance(WALLET, 0, CircuitNetwork.ETHM, reader)) == 0
    assert asyncio.run(mapper.check_asset_balance(WALLET, 3, CircuitNetwork.ETHM, reader)) == 0
    assert calls == []


def test_check_asset_balance_returns_zero_when_read_fails() -> None:
    mapper = _mapper()

    async def _failing(token_address: str, wallet_address: str) -> int:
        raise ConnectionError("node unreachable")

    assert asyncio.run(mapper.check_asset_balance(WALLET, 101, CircuitNetwork.ETHM, _failing)) == 0
