"""价格、成本与到账估算相关 CLI 子命令。"""

from __future__ import annotations

import asyncio
from decimal import Decimal, InvalidOperation
from typing import Optional

import click

from ..assets import CircuitNetwork
from ..clients.rpc import RpcClient
from ..config import Settings
from ..services.asset_mapper import AssetMapper
from ..services.fixed_point import format_ether
from ..services.pricer import PriceNotFoundError, Pricer
from ..types import ExecutorTip, OverpayRatio, Slippage
from . import main
from .common import (
    console,
    normalize_asset,
    normalize_network,
    parse_amount,
    print_cost_result,
    print_estimate,
    print_price_result,
)


def _gwei_to_wei(value: str) -> int:
    try:
        return int(Decimal(value) * 10**9)
    except InvalidOperation:
        raise click.BadParameter(f"Not a decimal gas price: {value}") from None


def _build_rpc_client(settings: Settings) -> RpcClient:
    try:
        return RpcClient(settings)
    except ValueError as exc:
        raise click.UsageError(f"{exc}; set RPC_URL") from None


@main.command("price")
@click.argument("asset_a")
@click.argument("asset_b")
@click.option("--network", "source_network", default="eth", show_default=True, help="资产 A 所在的报价网络。")
@click.option("--destination-network", default=None, help="资产 B 所在的报价网络，缺省与 --network 相同。")
@click.option("--refresh", is_flag=True, default=False, help="跳过本地缓存，直接向代理服务器取价。")
def price(asset_a: str, asset_b: str, source_network: str, destination_network: Optional[str], refresh: bool) -> None:
    """查询资产 A 以资产 B 计价的价格。"""
    a = normalize_asset(asset_a)
    b = normalize_asset(asset_b)
    src = normalize_network(source_network)
    dst = normalize_network(destination_network or source_network)

    async def _run() -> None:
        settings = Settings.load()
        async with Pricer(settings) as pricer:
            if refresh:
                for asset, network in ((a, src), (b, dst)):
                    lookup = pricer.get_asset_object(asset, network)
                    if lookup.is_fake_price:
                        continue
                    try:
                        await pricer.fetch_price_and_store_in_cache(lookup.asset_object, lookup.asset_object.network)
                    except PriceNotFoundError as exc:
                        console.print(f"[yellow]{exc}[/yellow]")
            result = await pricer.retrieve_asset_pricing(a, b, src, dst)
        print_price_result(result)

    asyncio.run(_run())


@main.command("cost")
@click.argument("asset")
@click.argument("native_asset")
@click.option("--network", "source_network", default="eth", show_default=True, help="计价资产所在的报价网络。")
@click.option("--destination-network", default=None, help="原生币所在的报价网络，缺省与 --network 相同。")
@click.option("--gas-price-gwei", default=None, help="Gas 单价（gwei）；缺省通过 RPC_URL 查询。")
@click.option("--transfer-target", default=None, help="被转移代币地址；缺省按地址表解析，原生币为零地址。")
def cost(
    asset: str,
    native_asset: str,
    source_network: str,
    destination_network: Optional[str],
    gas_price_gwei: Optional[str],
    transfer_target: Optional[str],
) -> None:
    """估算一次转账的执行成本，并换算到指定资产。"""
    a = normalize_asset(asset)
    native = normalize_asset(native_asset)
    src = normalize_network(source_network)
    dst = normalize_network(destination_network or source_network)

    async def _run() -> None:
        settings = Settings.load()
        if gas_price_gwei is not None:
            gas_price_wei = _gwei_to_wei(gas_price_gwei)
        else:
            gas_client = _build_rpc_client(settings)
            try:
                gas_price_wei = await gas_client.get_gas_price_with_retry()
            finally:
                await gas_client.close()

        async with Pricer(settings) as pricer:
            target = transfer_target
            if target is None:
                lookup = pricer.get_asset_object(a, src)
                target = settings.address_zero if lookup.is_fake_price else lookup.asset_object.address
            result = await pricer.retrieve_cost_in_asset(a, src, native, dst, gas_price_wei, target)
        print_cost_result(result)

    asyncio.run(_run())


@main.command("gas-price")
def gas_price() -> None:
    """通过 JSON-RPC 查询当前 Gas 单价。"""

    async def _run() -> None:
        settings = Settings.load()
        gas_client = _build_rpc_client(settings)
        try:
            wei = await gas_client.get_gas_price_with_retry()
        finally:
            await gas_client.close()
        console.print(f"Gas price: [bold]{wei}[/bold] wei ({Decimal(wei) / 10**9} gwei)")

    asyncio.run(_run())


@main.command("balance")
@click.argument("wallet")
@click.option("--asset-id", type=int, required=True, help="电路资产编号，如 101 (USDC)。")
@click.option("--network", "network_id", type=click.Choice([n.value for n in CircuitNetwork]), required=True)
def balance(wallet: str, asset_id: int, network_id: str) -> None:
    """通过 JSON-RPC 读取钱包持有的电路资产余额；查不到时为 0。"""

    async def _run() -> None:
        settings = Settings.load()
        rpc_client = _build_rpc_client(settings)
        try:
            wei = await AssetMapper(settings).check_asset_balance(
                wallet, asset_id, CircuitNetwork(network_id), rpc_client.balance_of
            )
        finally:
            await rpc_client.close()
        console.print(f"Balance: [bold]{wei}[/bold] ({format_ether(wei)})")

    asyncio.run(_run())


@main.command("estimate")
@click.argument("from_asset")
@click.argument("to_asset")
@click.option("--from-chain", default="eth", show_default=True)
@click.option("--to-chain", default="eth", show_default=True)
@click.option("--max-reward", required=True, help="用户愿意支付的最大奖励，十进制单位。")
@click.option("--tip", type=click.Choice([t.value for t in ExecutorTip]), default="regular", show_default=True)
@click.option("--overpay", type=click.Choice([o.value for o in OverpayRatio]), default="regular", show_default=True)
@click.option("--slippage", type=click.Choice([s.value for s in Slippage]), default="regular", show_default=True)
@click.option("--custom-tip-percentage", type=float, default=None)
@click.option("--custom-tip-value", default=None, help="自定义小费，十进制单位。")
@click.option("--custom-overpay-ratio", type=float, default=None)
@click.option("--custom-slippage", type=float, default=None)
def estimate(
    from_asset: str,
    to_asset: str,
    from_chain: str,
    to_chain: str,
    max_reward: str,
    tip: str,
    overpay: str,
    slippage: str,
    custom_tip_percentage: Optional[float],
    custom_tip_value: Optional[str],
    custom_overpay_ratio: Optional[float],
    custom_slippage: Optional[float],
) -> None:
    """估算桥接后用户实际到账的金额与各项费用。"""
    src_asset = normalize_asset(from_asset)
    dst_asset = normalize_asset(to_asset)
    src = normalize_network(from_chain)
    dst = normalize_network(to_chain)
    max_reward_wei = parse_amount(max_reward)
    tip_value = parse_amount(custom_tip_value) if custom_tip_value is not None else None

    async def _run() -> None:
        settings = Settings.load()
        gas_client = _build_rpc_client(settings)
        try:
            async with Pricer(settings, gas_price_source=gas_client.get_gas_price_with_retry) as pricer:
                result = await pricer.estimate_received_amount_with_options(
                    src_asset,
                    dst_asset,
                    src,
                    dst,
                    max_reward_wei,
                    ExecutorTip(tip),
                    OverpayRatio(overpay),
                    Slippage(slippage),
                    custom_executor_tip_percentage=custom_tip_percentage,
                    custom_executor_tip_value=tip_value,
                    custom_overpay_ratio=custom_overpay_ratio,
                    custom_slippage=custom_slippage,
                )
        except ValueError as exc:
            raise click.UsageError(str(exc)) from None
        finally:
            await gas_client.close()
        print_estimate(result)

    asyncio.run(_run())


__all__ = ["price", "cost", "gas_price", "balance", "estimate"]
