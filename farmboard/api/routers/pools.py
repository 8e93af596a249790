from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from farmboard.api.deps import (
    get_get_pool_use_case,
    get_list_pools_use_case,
    get_token_prices_use_case,
)
from farmboard.api.schemas.pools import (
    FarmRewardResponse,
    PoolListResponse,
    PoolMetricsResponse,
    PoolResponse,
    TokenPriceResponse,
)
from farmboard.application.dto.pools import ListPoolsInput
from farmboard.application.use_cases.get_pool import GetPoolUseCase
from farmboard.application.use_cases.get_token_prices import GetTokenPricesUseCase
from farmboard.application.use_cases.list_pools import ListPoolsUseCase
from farmboard.domain.entities.pool import Pool
from farmboard.domain.exceptions import PoolQueryInputError

router = APIRouter()


def _pool_response(pool: Pool) -> PoolResponse:
    return PoolResponse(
        id=pool.id,
        amm_id=pool.amm_id,
        lp_mint=pool.lp_mint,
        base_mint=pool.base_mint,
        quote_mint=pool.quote_mint,
        base_symbol=pool.base_symbol,
        quote_symbol=pool.quote_symbol,
        base_decimals=pool.base_decimals,
        quote_decimals=pool.quote_decimals,
        pair_label=pool.pair_label,
        tvl=pool.tvl,
        volume_24h=pool.volume_24h,
        apr=pool.apr,
        fee_apr=pool.fee_apr,
        farm_apr=pool.farm_apr,
        apy=pool.apy,
        price=pool.price,
        base_reserve=pool.base_reserve,
        quote_reserve=pool.quote_reserve,
        type=pool.type,
        farm_id=pool.farm_id,
        farm_rewards=[
            FarmRewardResponse(
                mint=reward.mint,
                symbol=reward.symbol,
                apr=reward.apr,
                per_day=reward.per_day,
            )
            for reward in pool.farm_rewards
        ],
    )


@router.get("/v1/pools", response_model=PoolListResponse)
async def list_pools(
    query: str | None = None,
    sort_by: str = "apy",
    use_case: ListPoolsUseCase = Depends(get_list_pools_use_case),
):
    try:
        result = await use_case.execute(ListPoolsInput(query=query, sort_by=sort_by))
    except PoolQueryInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return PoolListResponse(
        metrics=PoolMetricsResponse(
            total_tvl=result.metrics.total_tvl,
            total_volume_24h=result.metrics.total_volume_24h,
            top_apy=result.metrics.top_apy,
            total_pools=result.metrics.total_pools,
        ),
        data=[_pool_response(pool) for pool in result.pools],
    )


@router.get("/v1/pools/{pool_id}", response_model=PoolResponse)
async def get_pool(
    pool_id: str,
    use_case: GetPoolUseCase = Depends(get_get_pool_use_case),
):
    pool = await use_case.execute(pool_id)
    if pool is None:
        raise HTTPException(status_code=404, detail="Pool not found.")
    return _pool_response(pool)


@router.get("/v1/prices", response_model=list[TokenPriceResponse])
async def list_token_prices(
    use_case: GetTokenPricesUseCase = Depends(get_token_prices_use_case),
):
    prices = await use_case.execute()
    return [
        TokenPriceResponse(mint=price.mint, price=price.price, change_24h=price.change_24h)
        for price in prices.values()
    ]
