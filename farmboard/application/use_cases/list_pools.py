from __future__ import annotations

from farmboard.application.dto.pools import ListPoolsInput, ListPoolsOutput
from farmboard.application.use_cases.refresh_pools import RefreshPoolsUseCase
from farmboard.domain.exceptions import PoolQueryInputError
from farmboard.domain.services.pool_metrics import summarize_pools
from farmboard.domain.services.pool_ranking import SORT_FIELDS, rank_pools


class ListPoolsUseCase:
    def __init__(self, *, refresh_pools: RefreshPoolsUseCase):
        self._refresh_pools = refresh_pools

    async def execute(self, command: ListPoolsInput) -> ListPoolsOutput:
        if command.sort_by not in SORT_FIELDS:
            raise PoolQueryInputError("sort_by must be one of apy, tvl, volume24h.")

        pools = await self._refresh_pools.execute()
        ranked = rank_pools(pools, query=command.query, sort_by=command.sort_by)
        return ListPoolsOutput(pools=ranked, metrics=summarize_pools(pools))
