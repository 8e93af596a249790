from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal


PoolType = Literal["CPMM", "CLMM"]


@dataclass(frozen=True)
class FarmReward:
    mint: str
    symbol: str
    apr: Decimal
    per_day: Decimal


@dataclass(frozen=True)
class FarmIncentive:
    farm_id: str
    pool_id: str
    apr: Decimal
    rewards: tuple[FarmReward, ...] = ()


@dataclass(frozen=True)
class Pool:
    id: str
    amm_id: str
    lp_mint: str
    base_mint: str
    quote_mint: str
    base_symbol: str
    quote_symbol: str
    base_decimals: int
    quote_decimals: int
    tvl: Decimal
    volume_24h: Decimal
    apr: Decimal
    fee_apr: Decimal
    farm_apr: Decimal
    apy: Decimal
    price: Decimal
    base_reserve: str
    quote_reserve: str
    type: PoolType
    farm_id: str | None = None
    farm_rewards: tuple[FarmReward, ...] = field(default_factory=tuple)

    @property
    def pair_label(self) -> str:
        return f"{self.base_symbol}-{self.quote_symbol}"


@dataclass(frozen=True)
class PoolMetrics:
    total_tvl: Decimal
    total_volume_24h: Decimal
    top_apy: Decimal
    total_pools: int
