from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

from farmboard.domain.entities.pool import FarmIncentive, FarmReward, Pool, PoolType
from farmboard.domain.entities.raw_market_data import (
    RawFarmRecord,
    RawPoolRecord,
    RawTokenRef,
)
from farmboard.domain.entities.token import TokenInfo
from farmboard.domain.services.token_registry import TokenRegistry


UNKNOWN_SYMBOL = "Unknown"
DEFAULT_TOKEN_DECIMALS = 9
CONCENTRATED_POOL_TYPE = "Concentrated"


def decimal_or_zero(value: str | float | int | None) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    try:
        parsed = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not parsed.is_finite():
        return Decimal("0")
    return parsed


def resolve_token(ref: RawTokenRef, registry: TokenRegistry) -> TokenInfo:
    known = registry.by_mint(ref.address) or registry.by_symbol(ref.symbol)
    if known is not None:
        return known
    return TokenInfo(
        mint=ref.address,
        symbol=ref.symbol or UNKNOWN_SYMBOL,
        decimals=ref.decimals or DEFAULT_TOKEN_DECIMALS,
    )


def pool_type_from_raw(raw_type: str | None) -> PoolType:
    return "CLMM" if raw_type == CONCENTRATED_POOL_TYPE else "CPMM"


def build_farm_incentive(raw: RawFarmRecord) -> FarmIncentive | None:
    if not raw.pool_id:
        return None
    return FarmIncentive(
        farm_id=raw.id,
        pool_id=raw.pool_id,
        apr=decimal_or_zero(raw.apr),
        rewards=tuple(
            FarmReward(
                mint=reward.mint_address,
                symbol=reward.mint_symbol or UNKNOWN_SYMBOL,
                apr=decimal_or_zero(reward.apr),
                per_day=decimal_or_zero(reward.per_day),
            )
            for reward in raw.rewards
        ),
    )


def build_farm_lookup(farms: Iterable[RawFarmRecord]) -> dict[str, FarmIncentive]:
    lookup: dict[str, FarmIncentive] = {}
    for raw in farms:
        farm = build_farm_incentive(raw)
        if farm is not None:
            # last write wins on duplicated pool ids
            lookup[farm.pool_id] = farm
    return lookup


def build_pool(
    raw: RawPoolRecord,
    *,
    registry: TokenRegistry,
    farm: FarmIncentive | None = None,
) -> Pool:
    base = resolve_token(raw.mint_a, registry)
    quote = resolve_token(raw.mint_b, registry)

    apr = decimal_or_zero(raw.day_apr)
    farm_apr = farm.apr if farm is not None else Decimal("0")

    return Pool(
        id=raw.id,
        amm_id=raw.amm_id or raw.id,
        lp_mint=raw.lp_mint,
        base_mint=raw.mint_a.address or base.mint,
        quote_mint=raw.mint_b.address or quote.mint,
        base_symbol=base.symbol,
        quote_symbol=quote.symbol,
        base_decimals=base.decimals,
        quote_decimals=quote.decimals,
        tvl=decimal_or_zero(raw.tvl),
        volume_24h=decimal_or_zero(raw.day_volume),
        apr=apr,
        fee_apr=decimal_or_zero(raw.day_fee_apr),
        farm_apr=farm_apr,
        apy=apr + farm_apr,
        price=decimal_or_zero(raw.price),
        base_reserve=str(raw.mint_amount_a) if raw.mint_amount_a is not None else "0",
        quote_reserve=str(raw.mint_amount_b) if raw.mint_amount_b is not None else "0",
        type=pool_type_from_raw(raw.type),
        farm_id=farm.farm_id if farm is not None else None,
        farm_rewards=farm.rewards if farm is not None else (),
    )


def is_displayable(pool: Pool, *, min_tvl_usd: Decimal) -> bool:
    if pool.tvl <= min_tvl_usd:
        return False
    if not pool.base_symbol or not pool.quote_symbol:
        return False
    return pool.base_symbol != UNKNOWN_SYMBOL and pool.quote_symbol != UNKNOWN_SYMBOL
