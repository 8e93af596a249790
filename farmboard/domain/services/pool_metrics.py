from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from farmboard.domain.entities.pool import Pool, PoolMetrics


def summarize_pools(pools: Sequence[Pool]) -> PoolMetrics:
    total_tvl = Decimal("0")
    total_volume = Decimal("0")
    top_apy: Decimal | None = None
    for pool in pools:
        total_tvl += pool.tvl
        total_volume += pool.volume_24h
        if top_apy is None or pool.apy > top_apy:
            top_apy = pool.apy
    return PoolMetrics(
        total_tvl=total_tvl,
        total_volume_24h=total_volume,
        top_apy=top_apy if top_apy is not None else Decimal("0"),
        total_pools=len(pools),
    )
