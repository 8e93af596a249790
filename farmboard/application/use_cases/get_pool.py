from __future__ import annotations

from decimal import DecimalException
import logging

from farmboard.application.ports.market_data_port import MarketDataPort
from farmboard.domain.entities.pool import Pool
from farmboard.domain.exceptions import MarketDataUnavailableError
from farmboard.domain.services.pool_normalization import build_pool
from farmboard.domain.services.token_registry import TokenRegistry


logger = logging.getLogger(__name__)


class GetPoolUseCase:
    def __init__(self, *, market_data_port: MarketDataPort, token_registry: TokenRegistry):
        self._market_data_port = market_data_port
        self._token_registry = token_registry

    async def execute(self, pool_id: str) -> Pool | None:
        if not pool_id or not pool_id.strip():
            return None
        try:
            rows = await self._market_data_port.get_pools_by_ids([pool_id.strip()])
        except MarketDataUnavailableError as exc:
            logger.warning("get_pool: fetch_failed pool_id=%s error=%s", pool_id, exc)
            return None
        if not rows:
            return None
        # single-pool lookups carry no farm data
        try:
            return build_pool(rows[0], registry=self._token_registry)
        except DecimalException as exc:
            logger.warning("get_pool: normalize_failed pool_id=%s error=%r", pool_id, exc)
            return None
