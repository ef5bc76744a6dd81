"""订单评估与发布相关 CLI 子命令。

两个命令都只做离线计算：成本与相对价格由参数直接给出，
不访问价格服务器或 RPC 节点。所有金额均为十进制单位（如 ``0.5``）。
"""

from __future__ import annotations

from typing import Optional

import click

from ..config import Settings
from ..services.pricer import Pricer
from ..types import (
    CostResult,
    Order,
    OrderArbitrageStrategy,
    OverpayRatio,
    PriceResult,
    Slippage,
    UserPublishStrategy,
)
from . import main
from .common import parse_amount, print_proposal, print_publishability


def _offline_pricer() -> tuple[Settings, Pricer]:
    # 离线命令从不访问代理服务器，也就不创建 HTTP 客户端
    settings = Settings.load(overrides={"pricer_proxy_server_url": None})
    return settings, Pricer(settings)


def _offline_cost(cost_in_asset: int, asset: str) -> CostResult:
    return CostResult(cost_in_wei=0, cost_in_eth="0", cost_in_usd=0.0, cost_in_asset=cost_in_asset, asset=asset)


def _offline_pricing(price_a_in_b: int, reward_asset: str, asset: str) -> PriceResult:
    return PriceResult(
        asset_a=reward_asset,
        asset_b=asset,
        price_a_in_b=price_a_in_b,
        price_a_in_usd="0",
        price_b_in_usd="0",
    )


@main.command("evaluate-deal")
@click.option("--balance", required=True, help="执行者在目标资产上的余额。")
@click.option("--amount", required=True, help="订单金额（目标资产）。")
@click.option("--max-reward", required=True, help="订单提供的最大奖励（奖励资产）。")
@click.option("--cost", "cost_in_asset", default="0", show_default=True, help="以目标资产计的执行成本。")
@click.option("--price-a-in-b", default="1", show_default=True, help="奖励资产以目标资产计的价格。")
@click.option("--asset", default="eth", show_default=True)
@click.option("--reward-asset", default="eth", show_default=True)
@click.option("--min-profit-per-order", default="0", show_default=True)
@click.option("--min-profit-rate", type=float, default=0.0, show_default=True, help="相对余额的最低利润率（%）。")
@click.option("--max-amount-per-order", required=True)
@click.option("--min-amount-per-order", default="0", show_default=True)
@click.option("--max-share", type=float, default=100.0, show_default=True, help="单笔利润占余额的上限（%）。")
def evaluate_deal(
    balance: str,
    amount: str,
    max_reward: str,
    cost_in_asset: str,
    price_a_in_b: str,
    asset: str,
    reward_asset: str,
    min_profit_per_order: str,
    min_profit_rate: float,
    max_amount_per_order: str,
    min_amount_per_order: str,
    max_share: float,
) -> None:
    """按执行者策略评估订单是否有利可图，并给出建议的最大奖励。"""
    # 离线计算不需要周期清理，因此不进入上下文
    settings, pricer = _offline_pricer()
    strategy = OrderArbitrageStrategy(
        min_profit_per_order=parse_amount(min_profit_per_order),
        min_profit_rate=min_profit_rate,
        max_amount_per_order=parse_amount(max_amount_per_order),
        min_amount_per_order=parse_amount(min_amount_per_order),
        max_share_of_my_balance_per_order=max_share,
    )
    order = Order(
        id="cli",
        source="",
        destination="",
        asset=0,
        asset_address=settings.address_zero,
        asset_native=True,
        target_account=settings.address_zero,
        amount=parse_amount(amount),
        reward_asset=reward_asset,
        insurance=0,
        max_reward=parse_amount(max_reward),
    )
    proposal = pricer.propose_deal_for_set_amount(
        parse_amount(balance),
        _offline_cost(parse_amount(cost_in_asset), asset),
        strategy,
        order,
        _offline_pricing(parse_amount(price_a_in_b), reward_asset, asset),
    )
    print_proposal(proposal)


@main.command("assess-deal")
@click.option("--balance", required=True, help="用户余额。")
@click.option("--cost", "cost_in_asset", required=True, help="预估执行成本。")
@click.option("--price-a-in-b", required=True, help="市场相对价格。")
@click.option("--max-spend-limit", default=None, help="用户单笔最大支出；缺省时一律不可发布。")
@click.option("--overpay", type=click.Choice([o.value for o in OverpayRatio]), default="regular", show_default=True)
@click.option("--slippage", type=click.Choice([s.value for s in Slippage]), default="regular", show_default=True)
@click.option("--custom-overpay-ratio", type=float, default=None)
@click.option("--custom-slippage", type=float, default=None)
@click.option("--asset", default="eth", show_default=True)
def assess_deal(
    balance: str,
    cost_in_asset: str,
    price_a_in_b: str,
    max_spend_limit: Optional[str],
    overpay: str,
    slippage: str,
    custom_overpay_ratio: Optional[float],
    custom_slippage: Optional[float],
    asset: str,
) -> None:
    """评估用户能否按给定超付与滑点选项发布订单。"""
    _, pricer = _offline_pricer()
    strategy = UserPublishStrategy(
        max_spend_limit=parse_amount(max_spend_limit) if max_spend_limit is not None else None,
    )
    result = pricer.assess_deal_for_publication(
        parse_amount(balance),
        _offline_cost(parse_amount(cost_in_asset), asset),
        strategy,
        _offline_pricing(parse_amount(price_a_in_b), asset, asset),
        OverpayRatio(overpay),
        Slippage(slippage),
        custom_overpay_ratio=custom_overpay_ratio,
        custom_slippage=custom_slippage,
    )
    print_publishability(result)


__all__ = ["evaluate_deal", "assess_deal"]
