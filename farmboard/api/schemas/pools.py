from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel


class FarmRewardResponse(BaseModel):
    mint: str
    symbol: str
    apr: Decimal
    per_day: Decimal


class PoolResponse(BaseModel):
    id: str
    amm_id: str
    lp_mint: str
    base_mint: str
    quote_mint: str
    base_symbol: str
    quote_symbol: str
    base_decimals: int
    quote_decimals: int
    pair_label: str
    tvl: Decimal
    volume_24h: Decimal
    apr: Decimal
    fee_apr: Decimal
    farm_apr: Decimal
    apy: Decimal
    price: Decimal
    base_reserve: str
    quote_reserve: str
    type: str
    farm_id: str | None = None
    farm_rewards: list[FarmRewardResponse] = []


class PoolMetricsResponse(BaseModel):
    total_tvl: Decimal
    total_volume_24h: Decimal
    top_apy: Decimal
    total_pools: int


class PoolListResponse(BaseModel):
    metrics: PoolMetricsResponse
    data: list[PoolResponse]


class TokenPriceResponse(BaseModel):
    mint: str
    price: Decimal
    change_24h: Decimal
