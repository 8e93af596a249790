from __future__ import annotations

import asyncio
from decimal import Decimal, DecimalException
import logging

from farmboard.application.ports.cache_port import CachePort
from farmboard.application.ports.market_data_port import MarketDataPort
from farmboard.domain.entities.pool import Pool
from farmboard.domain.exceptions import MarketDataUnavailableError
from farmboard.domain.services.pool_normalization import (
    build_farm_lookup,
    build_pool,
    is_displayable,
)
from farmboard.domain.services.token_registry import TokenRegistry


logger = logging.getLogger(__name__)


POOLS_CACHE_KEY = "pools"
DEFAULT_MIN_TVL_USD = Decimal("1000")


class RefreshPoolsUseCase:
    def __init__(
        self,
        *,
        market_data_port: MarketDataPort,
        cache: CachePort,
        token_registry: TokenRegistry,
        min_tvl_usd: Decimal = DEFAULT_MIN_TVL_USD,
    ):
        self._market_data_port = market_data_port
        self._cache = cache
        self._token_registry = token_registry
        self._min_tvl_usd = min_tvl_usd

    async def execute(self) -> list[Pool]:
        cached = self._cache.get(POOLS_CACHE_KEY)
        if cached is not None:
            logger.debug("refresh_pools: cache_hit pools=%s", len(cached))
            return list(cached)

        # both listings are awaited before either result is used
        pools_result, farms_result = await asyncio.gather(
            self._market_data_port.list_pools(),
            self._market_data_port.list_farms(),
            return_exceptions=True,
        )
        for label, result in (("pools", pools_result), ("farms", farms_result)):
            if isinstance(result, MarketDataUnavailableError):
                logger.warning("refresh_pools: fetch_failed source=%s error=%s", label, result)
                return []
            if isinstance(result, BaseException):
                raise result

        try:
            farms = build_farm_lookup(farms_result)
            pools = [
                build_pool(raw, registry=self._token_registry, farm=farms.get(raw.id))
                for raw in pools_result
            ]
            visible = [pool for pool in pools if is_displayable(pool, min_tvl_usd=self._min_tvl_usd)]
        except DecimalException as exc:
            logger.warning("refresh_pools: normalize_failed error=%r", exc)
            return []
        visible.sort(key=lambda pool: pool.apy, reverse=True)

        snapshot = tuple(visible)
        self._cache.set(POOLS_CACHE_KEY, snapshot)
        logger.info(
            "refresh_pools: refreshed raw_pools=%s farms=%s visible=%s",
            len(pools_result),
            len(farms),
            len(snapshot),
        )
        return list(snapshot)
