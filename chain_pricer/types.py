from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .assets import AssetAndAddress, CircuitNetwork, PriceProviderNetwork


class OverpayRatio(str, Enum):
    SLOW = "slow"
    REGULAR = "regular"
    FAST = "fast"
    CUSTOM = "custom"


class Slippage(str, Enum):
    ZERO = "zero"
    REGULAR = "regular"
    HIGH = "high"
    CUSTOM = "custom"


class ExecutorTip(str, Enum):
    LOW = "low"
    REGULAR = "regular"
    HIGH = "high"
    CUSTOM = "custom"


@dataclass
class CostResult:
    """Execution cost of a transfer, expressed in several units.

    Attributes:
        cost_in_wei: Gas price times gas limit, in the native smallest unit.
        cost_in_eth: ``cost_in_wei`` as a decimal string with 18 fractional digits.
        cost_in_usd: Cost in USD as a float, for display only.
        cost_in_asset: Cost in the target asset, Fixed18.
        asset: Target asset the cost is expressed in.
    """

    cost_in_wei: int
    cost_in_eth: str
    cost_in_usd: float
    cost_in_asset: int
    asset: str


@dataclass
class PriceResult:
    """Snapshot of the relative price of two assets.

    Attributes:
        asset_a: Asset being priced.
        asset_b: Asset the price is expressed in.
        price_a_in_b: Units of B per unit of A, Fixed18.
        price_a_in_usd: USD price string of A as held by the cache.
        price_b_in_usd: USD price string of B as held by the cache.
    """

    asset_a: str
    asset_b: str
    price_a_in_b: int
    price_a_in_usd: str
    price_b_in_usd: str


@dataclass
class OrderArbitrageStrategy:
    """Executor bounds that gate whether an order is worth taking.

    Amounts are Fixed18 in the target asset; rates are percentages.
    """

    min_profit_per_order: int
    min_profit_rate: float
    max_amount_per_order: int
    min_amount_per_order: int
    max_share_of_my_balance_per_order: float


@dataclass
class Order:
    id: str
    source: CircuitNetwork | str
    destination: CircuitNetwork | str
    asset: int
    asset_address: str
    asset_native: bool
    target_account: str
    amount: int
    reward_asset: str
    insurance: int
    max_reward: int
    nonce: int = 0
    tx_hash: str = ""


@dataclass
class OrderProfitability:
    is_profitable: bool
    profit: int
    loss: int


@dataclass
class OrderProfitabilityProposalForSetAmount:
    profitability: OrderProfitability
    assumed_cost: CostResult
    assumed_price: PriceResult
    reward_asset: str
    order_asset: str
    cost_overpayment_percent: float
    set_amount: int
    proposed_max_reward: int


@dataclass
class DealPublishability:
    is_publishable: bool
    max_reward: int


@dataclass
class UserPublishStrategy:
    max_spend_limit: Optional[int] = None
    set_amount: Optional[int] = None


@dataclass
class AssetLookup:
    """Result of resolving an asset on a network.

    Exactly one of ``asset_object`` and ``fake_price`` is set: either the
    asset has a known address (possibly on another network), or it is priced
    synthetically (``fake_price`` may be 0 when nothing is known).

    Attributes:
        asset_object: Resolved asset with its address and network.
        fake_price: Synthetic Fixed18 USD price when the asset has no address.
        found_in_requested_network: False when the asset was found elsewhere.
        found_network: Network the asset was resolved on.
    """

    asset_object: Optional[AssetAndAddress] = None
    fake_price: Optional[int] = None
    found_in_requested_network: bool = False
    found_network: Optional[PriceProviderNetwork] = None

    @property
    def is_fake_price(self) -> bool:
        return self.asset_object is None


@dataclass
class ReceivedAmountEstimate:
    """What a bridge user ends up with after costs.

    Attributes:
        estimated_received_amount_wei: Reward left after the transfer cost, in the target asset.
        gas_fee_wei: Gas fee on the source network.
        bridge_fee_wei: Difference between the offered reward and what is received.
        estimated_received_amount_usd: USD value of the received amount.
        gas_fee_usd: USD value of the source gas fee.
        bridge_fee_usd: USD value of the bridge fee.
        brn_bonus_usd: Bonus credited in BRN, valued in USD.
    """

    estimated_received_amount_wei: int
    gas_fee_wei: int
    bridge_fee_wei: int
    estimated_received_amount_usd: float
    gas_fee_usd: float
    bridge_fee_usd: float
    brn_bonus_usd: float
