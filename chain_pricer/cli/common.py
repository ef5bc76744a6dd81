"""CLI 通用工具与共享对象。

本模块提供：

- 统一的 Rich `console` 实例；
- 资产、网络与金额参数的规范化；
- 用于各子命令复用的表格渲染函数。
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click
from rich.console import Console
from rich.table import Table

from ..assets import PriceProviderAsset, PriceProviderNetwork, is_vendor_token
from ..services.fixed_point import format_ether, parse_price_string_to_fixed18
from ..types import (
    CostResult,
    DealPublishability,
    OrderProfitabilityProposalForSetAmount,
    PriceResult,
    ReceivedAmountEstimate,
)

console = Console()


def normalize_network(value: str) -> PriceProviderNetwork:
    """规范化并校验报价网络名。

    Raises:
        click.BadParameter: 当取值非法时抛出。
    """
    try:
        return PriceProviderNetwork((value or "").lower())
    except ValueError:
        valid = ", ".join(n.value for n in PriceProviderNetwork)
        raise click.BadParameter(f"Network must be one of: {valid}") from None


def normalize_asset(value: str) -> PriceProviderAsset | str:
    """规范化资产名；t3 厂商代币原样保留，交由定价引擎归一化。"""
    val = (value or "").strip()
    if is_vendor_token(val):
        return val
    try:
        return PriceProviderAsset(val.lower())
    except ValueError:
        raise click.BadParameter(f"Unknown asset: {value}") from None


def parse_amount(value: str) -> int:
    """将十进制字符串（如 ``"1.5"``）解析为 Fixed18 整数。"""
    try:
        text = format(Decimal(value), "f")
    except InvalidOperation:
        raise click.BadParameter(f"Not a decimal amount: {value}") from None
    return parse_price_string_to_fixed18(text)


def print_price_result(result: PriceResult) -> None:
    table = Table(title="Pricing", header_style="bold cyan")
    table.add_column("Asset A", style="magenta")
    table.add_column("Asset B", style="magenta")
    table.add_column("A in B", justify="right")
    table.add_column("A USD", justify="right")
    table.add_column("B USD", justify="right")
    table.add_row(
        result.asset_a,
        result.asset_b,
        format_ether(result.price_a_in_b),
        result.price_a_in_usd,
        result.price_b_in_usd,
    )
    console.print(table)


def print_cost_result(result: CostResult) -> None:
    """以 Rich 表格形式渲染执行成本。"""
    table = Table(title=f"Execution cost in {result.asset}", header_style="bold cyan")
    table.add_column("Wei", justify="right")
    table.add_column("ETH", justify="right")
    table.add_column("USD", justify="right")
    table.add_column("In asset", justify="right")
    table.add_row(
        str(result.cost_in_wei),
        result.cost_in_eth,
        f"{result.cost_in_usd:.6f}",
        format_ether(result.cost_in_asset),
    )
    console.print(table)


def print_proposal(proposal: OrderProfitabilityProposalForSetAmount) -> None:
    """渲染订单盈利性评估与建议的最大奖励。"""
    profitability = proposal.profitability
    style = "green" if profitability.is_profitable else "red"
    table = Table(title="Deal evaluation", header_style="bold cyan")
    table.add_column("Profitable")
    table.add_column("Profit", justify="right")
    table.add_column("Loss", justify="right")
    table.add_column("Set amount", justify="right")
    table.add_column("Proposed max reward", justify="right")
    table.add_row(
        f"[{style}]{profitability.is_profitable}[/{style}]",
        format_ether(profitability.profit),
        format_ether(profitability.loss),
        format_ether(proposal.set_amount),
        format_ether(proposal.proposed_max_reward),
    )
    console.print(table)


def print_publishability(result: DealPublishability) -> None:
    style = "green" if result.is_publishable else "red"
    table = Table(title="Deal publication", header_style="bold cyan")
    table.add_column("Publishable")
    table.add_column("Max reward", justify="right")
    table.add_row(f"[{style}]{result.is_publishable}[/{style}]", format_ether(result.max_reward))
    console.print(table)


def print_estimate(result: ReceivedAmountEstimate) -> None:
    """渲染到账金额估算，wei 与 USD 两列对照。"""
    table = Table(title="Received amount estimate", header_style="bold cyan")
    table.add_column("Item")
    table.add_column("Amount", justify="right")
    table.add_column("USD", justify="right")
    table.add_row(
        "Received",
        format_ether(result.estimated_received_amount_wei),
        f"{result.estimated_received_amount_usd:.4f}",
    )
    table.add_row("Gas fee", format_ether(result.gas_fee_wei), f"{result.gas_fee_usd:.4f}")
    table.add_row("Bridge fee", format_ether(result.bridge_fee_wei), f"{result.bridge_fee_usd:.4f}")
    table.add_row("BRN bonus", "-", f"{result.brn_bonus_usd:.4f}")
    console.print(table)


__all__ = [
    "console",
    "normalize_network",
    "normalize_asset",
    "parse_amount",
    "print_price_result",
    "print_cost_result",
    "print_proposal",
    "print_publishability",
    "print_estimate",
]
