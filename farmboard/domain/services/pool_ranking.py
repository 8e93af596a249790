from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from farmboard.domain.entities.pool import Pool


SortCriterion = Literal["apy", "tvl", "volume24h"]

SORT_FIELDS: dict[str, str] = {
    "apy": "apy",
    "tvl": "tvl",
    "volume24h": "volume_24h",
}
DEFAULT_SORT: SortCriterion = "apy"

TOP_PRIORITY_PAIRS = frozenset({"SOL-USDC", "USDC-SOL"})


def search_pools(pools: Sequence[Pool], query: str | None) -> list[Pool]:
    if not query or not query.strip():
        return list(pools)
    term = query.lower()
    return [
        pool
        for pool in pools
        if term in pool.base_symbol.lower()
        or term in pool.quote_symbol.lower()
        or term in pool.pair_label.lower()
    ]


def sort_pools(pools: Sequence[Pool], sort_by: str = DEFAULT_SORT) -> list[Pool]:
    field_name = SORT_FIELDS.get(sort_by, SORT_FIELDS[DEFAULT_SORT])
    # sorted() is stable, ties keep their input order
    return sorted(pools, key=lambda pool: getattr(pool, field_name), reverse=True)


def apply_priority(pools: Sequence[Pool]) -> list[Pool]:
    front: list[Pool] = []
    featured: list[Pool] = []
    others: list[Pool] = []
    for pool in pools:
        label = pool.pair_label
        if label in TOP_PRIORITY_PAIRS:
            front.append(pool)
        elif "SOL" in label and ("USDT" in label or "RAY" in label):
            featured.append(pool)
        else:
            others.append(pool)
    return front + featured + others


def rank_pools(pools: Sequence[Pool], *, query: str | None, sort_by: str = DEFAULT_SORT) -> list[Pool]:
    return apply_priority(sort_pools(search_pools(pools, query), sort_by))
