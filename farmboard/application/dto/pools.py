from __future__ import annotations

from dataclasses import dataclass

from farmboard.domain.entities.pool import Pool, PoolMetrics


@dataclass(frozen=True)
class ListPoolsInput:
    query: str | None = None
    sort_by: str = "apy"


@dataclass(frozen=True)
class ListPoolsOutput:
    pools: list[Pool]
    metrics: PoolMetrics
