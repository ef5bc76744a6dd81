"""跨链订单定价引擎。

所有价格与金额均以 Fixed18 整数（放大 ``10 ** 18`` 倍）参与运算；只有
USD 展示值与比例参数使用浮点数。本模块负责：

* 从缓存 / 代理服务器 / 伪价格表取得资产 USD 价格；
* 计算资产 A 以资产 B 计价的相对价格；
* 估算转账执行成本并换算到目标资产；
* 按执行者策略评估订单是否有利可图，按用户策略评估是否可发布；
* 为桥接前端估算用户最终到账金额。
"""

from __future__ import annotations

import math
from typing import Awaitable, Callable, Optional, Union

from ..assets import (
    NETWORK_ASSET_ADDRESSES,
    AssetAndAddress,
    PriceProviderAsset,
    PriceProviderNetwork,
    from_vendor_token,
    is_vendor_token,
)
from ..config import Settings
from ..logging_utils import get_logger
from ..types import (
    AssetLookup,
    CostResult,
    DealPublishability,
    ExecutorTip,
    Order,
    OrderArbitrageStrategy,
    OrderProfitability,
    OrderProfitabilityProposalForSetAmount,
    OverpayRatio,
    PriceResult,
    ReceivedAmountEstimate,
    Slippage,
    UserPublishStrategy,
)
from .asset_mapper import AssetMapper
from .fixed_point import (
    div_trunc,
    format_ether,
    parse_price_string_to_fixed18,
    price_a_in_b,
    price_as_float,
    scale_factor,
    to_fixed_string,
)
from .price_cache import PriceCache

logger = get_logger(__name__)

ERC20_GAS_LIMIT = 50000
ETH_TRANSFER_GAS_LIMIT = 21000

GasPriceSource = Callable[[], Awaitable[int]]
AssetLike = Union[PriceProviderAsset, str]

OVERPAY_RATIOS = {
    OverpayRatio.SLOW: 1.05,
    OverpayRatio.REGULAR: 1.1,
    OverpayRatio.FAST: 1.2,
}
SLIPPAGE_TOLERANCES = {
    Slippage.ZERO: 1.0,
    Slippage.REGULAR: 1.02,
    Slippage.HIGH: 1.05,
}
EXECUTOR_TIP_ADJUSTMENTS = {
    ExecutorTip.LOW: 0.95,
    ExecutorTip.HIGH: 1.05,
}


class PriceNotFoundError(LookupError):
    """The price server has no price for the asset."""


class Pricer:
    """定价引擎。

    作为异步上下文管理器使用时，进入时启动价格缓存的周期清理，
    退出时停止清理；若缓存由本实例创建，还会一并关闭其 HTTP 客户端。

    Attributes:
        settings: 运行时配置。
        price_cache: 价格缓存。
        asset_mapper: 资产映射表。
        gas_price_source: 返回当前 Gas 价格（wei）的异步可调用对象。
    """

    def __init__(
        self,
        settings: Settings,
        price_cache: Optional[PriceCache] = None,
        asset_mapper: Optional[AssetMapper] = None,
        gas_price_source: Optional[GasPriceSource] = None,
    ):
        self.settings = settings
        self._owns_cache = price_cache is None
        self.price_cache = price_cache or PriceCache(settings)
        self.asset_mapper = asset_mapper or AssetMapper(settings)
        self.gas_price_source = gas_price_source

    async def __aenter__(self) -> "Pricer":
        self.price_cache.init_cleanup()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_cache:
            await self.price_cache.aclose()
        else:
            await self.price_cache.stop_cleanup()

    # ------------------------------------------------------------------
    # 定点数
    # ------------------------------------------------------------------

    def parse_price_string_to_fixed18(self, price: str) -> int:
        return parse_price_string_to_fixed18(price, self.settings.max_decimals_18)

    def calculate_price_a_in_b_on_18_decimals(self, price_a: int, price_b: int) -> int:
        """资产 A 以资产 B 计价的价格（Fixed18）；``price_b`` 为 0 时返回 0。"""
        return price_a_in_b(price_a, price_b, self.settings.max_decimals_18)

    # ------------------------------------------------------------------
    # 价格获取
    # ------------------------------------------------------------------

    def get_asset_object(self, asset: AssetLike, destination_network: PriceProviderNetwork) -> AssetLookup:
        """在地址表中解析资产。

        t3 系列厂商代币先归一化为对应的报价资产；请求网络上找不到时
        按地址表顺序在其他网络上查找；都找不到时退回伪价格（可能为 0）。

        Args:
            asset: 报价资产或厂商代币名。
            destination_network: 期望所在的报价网络。

        Returns:
            解析结果，``is_fake_price`` 为真时仅 ``fake_price`` 有效。
        """
        log = logger.bind(asset=_value(asset), network=_value(destination_network))
        if not asset or not destination_network:
            log.error("Asset and destination network must be specified.")
            return AssetLookup(fake_price=0)

        network_entries = NETWORK_ASSET_ADDRESSES.get(destination_network)
        if network_entries is None:
            log.error("Destination network not found in the asset address table.")
            return AssetLookup(fake_price=0)

        if is_vendor_token(_value(asset)):
            normalized = from_vendor_token(_value(asset))
            log.info("Asset is a vendor token. Normalizing to supported asset.", normalized_asset=normalized.value)
        else:
            try:
                normalized = PriceProviderAsset(_value(asset))
            except ValueError:
                log.error("Asset is not known to the price provider. Returning 0.")
                return AssetLookup(fake_price=0)

        found_in_requested_network = True
        details = next((entry for entry in network_entries if entry.asset == normalized), None)
        if details is None:
            found_in_requested_network = False
            for network_name, entries in NETWORK_ASSET_ADDRESSES.items():
                details = next((entry for entry in entries if entry.asset == normalized), None)
                if details is not None:
                    log.warning("Asset found in another network.", found_network=network_name.value)
                    break

        if details is None:
            fake_price = self.asset_mapper.fake_price_fixed18(normalized)
            if fake_price <= 0:
                log.error("Asset not found and no fake price available. Returning 0.")
            return AssetLookup(fake_price=fake_price)

        return AssetLookup(
            asset_object=details,
            found_in_requested_network=found_in_requested_network,
            found_network=details.network,
        )

    async def fetch_price_and_store_in_cache(self, asset_obj: AssetAndAddress, network: PriceProviderNetwork) -> str:
        """绕过本地缓存直接向代理服务器取价，并写入缓存。

        Raises:
            PriceNotFoundError: 服务器未返回价格。
        """
        usd_price = await self.price_cache.get_price_from_cache_server(asset_obj.asset, network, asset_obj.address)
        if not usd_price:
            raise PriceNotFoundError(f"Failed to fetch price for {asset_obj.asset.value} on {_value(network)}")
        self.price_cache.set(asset_obj.asset, network, usd_price)
        return usd_price

    async def receive_asset_price_with_cache(self, asset: AssetLike, network: PriceProviderNetwork) -> int:
        """资产 USD 价格（Fixed18），找不到时为伪价格或 0。"""
        lookup = self.get_asset_object(asset, network)
        if lookup.is_fake_price:
            return lookup.fake_price or 0

        asset_obj = lookup.asset_object
        price = await self.price_cache.get(asset_obj.asset, asset_obj.network, asset_obj)
        if price:
            return self.parse_price_string_to_fixed18(price)

        logger.error(
            "Failed to fetch price for asset from proxy server. Return zero.",
            asset=_value(asset),
            network=_value(network),
            cache=self.price_cache.get_whole_cache(),
        )
        return 0

    async def receive_asset_usd_value(self, asset: AssetLike, network: PriceProviderNetwork, amount: int) -> float:
        price = await self.receive_asset_price_with_cache(asset, network)
        return price_as_float(div_trunc(price * amount, self.settings.one_on_18_decimals))

    async def calculate_pricing_asset_a_in_b(
        self,
        asset_a: AssetLike,
        asset_b: AssetLike,
        price_a: int,
        price_b: int,
        destination_network: PriceProviderNetwork,
    ) -> PriceResult:
        price = self.calculate_price_a_in_b_on_18_decimals(price_a, price_b)
        return PriceResult(
            asset_a=_value(asset_a),
            asset_b=_value(asset_b),
            price_a_in_b=price,
            price_a_in_usd=await self._usd_price_string(asset_a, destination_network),
            price_b_in_usd=await self._usd_price_string(asset_b, destination_network),
        )

    async def _usd_price_string(self, asset: AssetLike, network: PriceProviderNetwork) -> str:
        lookup = self.get_asset_object(asset, network)
        if lookup.is_fake_price:
            return format_ether(lookup.fake_price) if lookup.fake_price else "0"
        asset_obj = lookup.asset_object
        return await self.price_cache.get(asset_obj.asset, asset_obj.network, asset_obj) or "0"

    async def retrieve_asset_pricing(
        self,
        asset_a: AssetLike,
        asset_b: AssetLike,
        source_network: PriceProviderNetwork,
        destination_network: PriceProviderNetwork,
    ) -> PriceResult:
        """A 在源网络、B 在目标网络上的价格之比。"""
        price_a = await self.receive_asset_price_with_cache(asset_a, source_network)
        price_b = await self.receive_asset_price_with_cache(asset_b, destination_network)
        return await self.calculate_pricing_asset_a_in_b(asset_a, asset_b, price_a, price_b, destination_network)

    async def retrieve_cost_in_asset(
        self,
        asset: AssetLike,
        source_network: PriceProviderNetwork,
        destination_asset: AssetLike,
        destination_network: PriceProviderNetwork,
        gas_price_wei: int,
        transfer_target: str,
    ) -> CostResult:
        price_asset = await self.receive_asset_price_with_cache(asset, source_network)
        price_native = await self.receive_asset_price_with_cache(destination_asset, destination_network)
        logger.debug(
            "Retrieved prices of assets",
            asset=_value(asset),
            destination_asset=_value(destination_asset),
            destination_network=_value(destination_network),
            price_asset=str(price_asset),
            price_native=str(price_native),
        )
        return self.calculate_cost_in_asset(_value(asset), price_asset, price_native, gas_price_wei, transfer_target)

    # ------------------------------------------------------------------
    # 成本与决策
    # ------------------------------------------------------------------

    def calculate_cost_in_asset(
        self,
        asset: str,
        price_asset: int,
        price_native: int,
        gas_price_wei: int,
        transfer_target: str,
    ) -> CostResult:
        """估算一次转账的执行成本。

        转给零地址视为原生币转账（21000 gas），否则按 ERC20 转账
        （50000 gas）。原生币成本经 native/asset 相对价格换算到目标资产。

        Args:
            asset: 成本计价资产名。
            price_asset: 计价资产 USD 价格（Fixed18）。
            price_native: 原生币 USD 价格（Fixed18）。
            gas_price_wei: Gas 单价（wei）。
            transfer_target: 被转移代币的地址，零地址表示原生币。
        """
        decimals = self.settings.max_decimals_18
        gas_limit = ETH_TRANSFER_GAS_LIMIT if transfer_target == self.settings.address_zero else ERC20_GAS_LIMIT
        cost_in_wei = gas_price_wei * gas_limit

        price_native_in_asset = self.calculate_price_a_in_b_on_18_decimals(price_native, price_asset)

        cost_in_asset = price_as_float(price_native_in_asset) * price_as_float(cost_in_wei)
        cost_in_usd = price_as_float(price_native) * price_as_float(cost_in_wei)
        cost_in_eth = price_as_float(cost_in_wei)

        return CostResult(
            cost_in_wei=cost_in_wei,
            cost_in_eth=to_fixed_string(cost_in_eth, decimals),
            cost_in_usd=cost_in_usd,
            cost_in_asset=self.parse_price_string_to_fixed18(to_fixed_string(cost_in_asset, decimals)),
            asset=asset,
        )

    def evaluate_deal(
        self,
        balance: int,
        cost: CostResult,
        strategy: OrderArbitrageStrategy,
        order: Order,
        pricing: PriceResult,
    ) -> OrderProfitability:
        """按执行者策略评估订单盈利性，输入输出均为 wei。

        潜在利润 = 以目标资产计的奖励 - 执行成本 - 订单金额。利润需同时
        满足：不低于余额的 ``min_profit_rate``%、不高于余额的
        ``max_share_of_my_balance_per_order``%、不低于单笔最小利润，
        且订单金额落在单笔上下限之间。

        Args:
            balance: 执行者在目标资产上的余额。
            cost: 以目标资产计的执行成本。
            strategy: 执行者策略。
            order: 待评估订单。
            pricing: 奖励资产相对目标资产的价格。

        Returns:
            不盈利时 ``profit`` 为 0，``loss`` 为潜在利润的绝对值。
        """
        log = logger.bind(
            order_id=order.id,
            balance=format_ether(balance),
            amount_to_spend=format_ether(order.amount),
            reward_to_receive=format_ether(order.max_reward),
            max_amount_per_order=format_ether(strategy.max_amount_per_order),
            min_amount_per_order=format_ether(strategy.min_amount_per_order),
            min_profit_per_order=format_ether(strategy.min_profit_per_order),
        )
        reward_in_destination_asset = div_trunc(order.max_reward * pricing.price_a_in_b, self.settings.one_on_18_decimals)
        potential_profit = reward_in_destination_asset - cost.cost_in_asset - order.amount
        # 对外只返回非负的亏损值
        potential_loss = abs(potential_profit)

        log.debug("Deal conditions before any checks", potential_profit=format_ether(potential_profit))

        if potential_profit <= 0:
            log.info("Potential profit is not positive. Return as not profitable")
            return OrderProfitability(is_profitable=False, profit=0, loss=potential_loss)

        try:
            min_profit_rate_baseline = math.floor(float(strategy.min_profit_rate) * float(balance) / 100)
            max_profit_rate_baseline = math.ceil(float(strategy.max_share_of_my_balance_per_order) * float(balance) / 100)
        except (OverflowError, ValueError) as exc:
            log.error("Failed to calculate profit rate baseline. Return as not profitable", error=str(exc))
            return OrderProfitability(is_profitable=False, profit=0, loss=potential_loss)

        is_profit_above_min_profit_rate = potential_profit >= min_profit_rate_baseline
        is_profit_below_max_profit_rate = potential_profit <= max_profit_rate_baseline
        is_amount_below_max_amount_per_order = order.amount <= strategy.max_amount_per_order
        is_amount_above_min_amount_per_order = order.amount >= strategy.min_amount_per_order
        is_profit_above_min_profit_per_order = potential_profit >= strategy.min_profit_per_order

        log.debug(
            "Profitability conditions",
            min_profit_rate_baseline=format_ether(min_profit_rate_baseline),
            potential_profit=format_ether(potential_profit),
            is_profit_above_min_profit_rate=is_profit_above_min_profit_rate,
            is_profit_below_max_profit_rate=is_profit_below_max_profit_rate,
            is_amount_below_max_amount_per_order=is_amount_below_max_amount_per_order,
            is_amount_above_min_amount_per_order=is_amount_above_min_amount_per_order,
            is_profit_above_min_profit_per_order=is_profit_above_min_profit_per_order,
        )

        is_profitable = (
            is_profit_above_min_profit_rate
            and is_profit_below_max_profit_rate
            and is_profit_above_min_profit_per_order
            and is_amount_below_max_amount_per_order
            and is_amount_above_min_amount_per_order
        )
        return OrderProfitability(
            is_profitable=is_profitable,
            profit=potential_profit if is_profitable else 0,
            loss=0 if is_profitable else potential_loss,
        )

    def assess_deal_for_publication(
        self,
        user_balance: int,
        cost: CostResult,
        user_strategy: UserPublishStrategy,
        market_pricing: PriceResult,
        overpay_option: OverpayRatio,
        slippage_option: Slippage,
        custom_overpay_ratio: Optional[float] = None,
        custom_slippage: Optional[float] = None,
    ) -> DealPublishability:
        """评估用户能否以当前条件发布订单。

        最大奖励 = 按超付比例放大的成本 + 按滑点放大的相对价格。比例先按
        其小数位数放大为整数再参与定点运算。余额不足时返回不可发布并
        带回所需的最大奖励；余额充足时只要不超过 ``max_spend_limit``
        即可发布，否则最大奖励归零。
        """
        overpay_ratio = _choose_ratio(overpay_option, OverpayRatio.CUSTOM, OVERPAY_RATIOS, custom_overpay_ratio)
        slippage_tolerance = _choose_ratio(slippage_option, Slippage.CUSTOM, SLIPPAGE_TOLERANCES, custom_slippage)

        overpay_scale = scale_factor(overpay_ratio)
        slippage_scale = scale_factor(slippage_tolerance)
        overpay_ratio_int = math.floor(overpay_ratio * overpay_scale)
        slippage_tolerance_int = math.floor(slippage_tolerance * slippage_scale)

        adjusted_cost = div_trunc(cost.cost_in_asset * overpay_ratio_int, overpay_scale)
        adjusted_price_a_in_b = div_trunc(market_pricing.price_a_in_b * slippage_tolerance_int, slippage_scale)
        max_reward = adjusted_cost + adjusted_price_a_in_b

        logger.debug(
            "Assessed deal for publication",
            overpay_ratio=overpay_ratio,
            slippage_tolerance=slippage_tolerance,
            adjusted_cost=format_ether(adjusted_cost),
            adjusted_price_a_in_b=format_ether(adjusted_price_a_in_b),
            user_balance=format_ether(user_balance),
            max_reward=format_ether(max_reward),
        )

        if user_balance < max_reward:
            return DealPublishability(is_publishable=False, max_reward=max_reward)

        max_spend_limit = user_strategy.max_spend_limit
        is_publishable = max_spend_limit is not None and max_reward <= max_spend_limit
        return DealPublishability(is_publishable=is_publishable, max_reward=max_reward if is_publishable else 0)

    def propose_deal_for_set_amount(
        self,
        balance: int,
        cost: CostResult,
        strategy: OrderArbitrageStrategy,
        order: Order,
        pricing: PriceResult,
    ) -> OrderProfitabilityProposalForSetAmount:
        profitability = self.evaluate_deal(balance, cost, strategy, order, pricing)
        proposed_max_reward = profitability.profit + cost.cost_in_asset + order.amount
        return OrderProfitabilityProposalForSetAmount(
            profitability=profitability,
            assumed_cost=cost,
            assumed_price=pricing,
            reward_asset=order.reward_asset,
            order_asset=order.asset_address,
            cost_overpayment_percent=0,
            set_amount=order.amount,
            proposed_max_reward=proposed_max_reward,
        )

    # ------------------------------------------------------------------
    # 到账金额估算
    # ------------------------------------------------------------------

    async def estimate_received_amount(
        self,
        from_asset: AssetLike,
        to_asset: AssetLike,
        from_chain: PriceProviderNetwork,
        to_chain: PriceProviderNetwork,
        max_reward_wei: int,
        gas_price_source: Optional[GasPriceSource] = None,
    ) -> ReceivedAmountEstimate:
        """估算从 ``from_chain`` 发送到 ``to_chain`` 后用户实际到账的金额。

        Args:
            from_asset: 发送的资产。
            to_asset: 接收的资产。
            from_chain: 发送资产所在网络。
            to_chain: 接收资产所在网络。
            max_reward_wei: 用户愿意支付的最大奖励（wei）。
            gas_price_source: 源网络 Gas 价格来源，缺省使用构造时注入的来源。

        Raises:
            ValueError: 缺少任一必填参数。
        """
        source = gas_price_source or self.gas_price_source
        if not from_asset or not to_asset or not from_chain or not to_chain or max_reward_wei is None or source is None:
            raise ValueError("All parameters must be provided and valid.")

        one = self.settings.one_on_18_decimals
        pricing = await self.retrieve_asset_pricing(from_asset, to_asset, from_chain, to_chain)
        max_reward_in_to_asset = div_trunc(max_reward_wei * pricing.price_a_in_b, one)

        gas_price_wei = await source()
        source_gas_limit = ETH_TRANSFER_GAS_LIMIT if _value(from_asset) == PriceProviderAsset.ETH.value else ERC20_GAS_LIMIT
        source_gas_fee_wei = gas_price_wei * source_gas_limit
        source_gas_fee_usd = await self.receive_asset_usd_value(from_asset, from_chain, source_gas_fee_wei)

        lookup = self.get_asset_object(from_asset, from_chain)
        transfer_target = self.settings.address_zero if lookup.is_fake_price else lookup.asset_object.address
        transaction_cost = await self.retrieve_cost_in_asset(
            from_asset, from_chain, to_asset, to_chain, gas_price_wei, transfer_target
        )

        transaction_cost_in_to_asset = div_trunc(transaction_cost.cost_in_asset * pricing.price_a_in_b, one)
        estimated_received_wei = max_reward_in_to_asset - transaction_cost_in_to_asset
        estimated_received_usd = await self.receive_asset_usd_value(to_asset, to_chain, estimated_received_wei)

        bridge_fee_wei = max_reward_wei - estimated_received_wei
        bridge_fee_usd = await self.receive_asset_usd_value(to_asset, to_chain, bridge_fee_wei)

        return ReceivedAmountEstimate(
            estimated_received_amount_wei=estimated_received_wei,
            gas_fee_wei=source_gas_fee_wei,
            bridge_fee_wei=bridge_fee_wei,
            estimated_received_amount_usd=estimated_received_usd,
            gas_fee_usd=source_gas_fee_usd,
            bridge_fee_usd=bridge_fee_usd,
            brn_bonus_usd=estimated_received_usd,
        )

    async def estimate_received_amount_with_options(
        self,
        from_asset: AssetLike,
        to_asset: AssetLike,
        from_chain: PriceProviderNetwork,
        to_chain: PriceProviderNetwork,
        max_reward_wei: int,
        executor_tip_option: ExecutorTip,
        overpay_option: OverpayRatio,
        slippage_option: Slippage,
        custom_executor_tip_percentage: Optional[float] = None,
        custom_executor_tip_value: Optional[int] = None,
        custom_overpay_ratio: Optional[float] = None,
        custom_slippage: Optional[float] = None,
        gas_price_source: Optional[GasPriceSource] = None,
    ) -> ReceivedAmountEstimate:
        """先按执行者小费、超付和滑点选项缩减最大奖励，再估算到账金额。

        自定义小费给定具体数值时直接从奖励中扣除；否则按比例缩减。
        每一步缩减都是 ``reward / round(ratio * 100) * 100``，除法向零取整。
        """
        if not from_asset or not to_asset or not from_chain or not to_chain or max_reward_wei is None:
            raise ValueError("All primary parameters must be provided and valid.")
        if (
            executor_tip_option == ExecutorTip.CUSTOM
            and custom_executor_tip_value is None
            and not custom_executor_tip_percentage
        ):
            raise ValueError(
                "Received custom executor tip option but missing custom_executor_tip_value "
                "or custom_executor_tip_percentage."
            )
        if overpay_option == OverpayRatio.CUSTOM and not custom_overpay_ratio:
            raise ValueError("Received custom overpay option but missing custom_overpay_ratio.")
        if slippage_option == Slippage.CUSTOM and not custom_slippage:
            raise ValueError("Received custom slippage option but missing custom_slippage.")

        if executor_tip_option == ExecutorTip.CUSTOM and custom_executor_tip_value is not None:
            max_reward_wei -= custom_executor_tip_value
        else:
            tip_adjustment = EXECUTOR_TIP_ADJUSTMENTS.get(executor_tip_option, 1.0)
            if executor_tip_option == ExecutorTip.CUSTOM:
                tip_adjustment = 1 + custom_executor_tip_percentage / 100
            max_reward_wei = _shrink(max_reward_wei, tip_adjustment)

        if overpay_option == OverpayRatio.CUSTOM:
            overpay_adjustment = custom_overpay_ratio or 1.0
        else:
            overpay_adjustment = OVERPAY_RATIOS.get(overpay_option, OVERPAY_RATIOS[OverpayRatio.REGULAR])
        max_reward_wei = _shrink(max_reward_wei, overpay_adjustment)

        if slippage_option == Slippage.CUSTOM:
            slippage_adjustment = custom_slippage or 1.0
        else:
            slippage_adjustment = SLIPPAGE_TOLERANCES.get(slippage_option, SLIPPAGE_TOLERANCES[Slippage.REGULAR])
        max_reward_wei = _shrink(max_reward_wei, slippage_adjustment)

        return await self.estimate_received_amount(
            from_asset, to_asset, from_chain, to_chain, max_reward_wei, gas_price_source=gas_price_source
        )


def _choose_ratio(option, custom_option, table: dict, custom_value: Optional[float]) -> float:
    if option == custom_option:
        return custom_value or 1.0
    return table.get(option, 1.0)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _shrink(amount: int, ratio: float) -> int:
    return div_trunc(amount, _round_half_up(ratio * 100)) * 100


def _value(item) -> str:
    return item.value if hasattr(item, "value") else str(item)
