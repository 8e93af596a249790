from __future__ import annotations

import logging

from farmboard.application.ports.cache_port import CachePort
from farmboard.application.ports.market_data_port import MarketDataPort
from farmboard.domain.entities.token import TokenPrice
from farmboard.domain.exceptions import MarketDataUnavailableError
from farmboard.domain.services.pool_normalization import decimal_or_zero
from farmboard.domain.services.token_registry import TokenRegistry


logger = logging.getLogger(__name__)


PRICES_CACHE_KEY = "prices"


class GetTokenPricesUseCase:
    def __init__(
        self,
        *,
        market_data_port: MarketDataPort,
        cache: CachePort,
        token_registry: TokenRegistry,
    ):
        self._market_data_port = market_data_port
        self._cache = cache
        self._token_registry = token_registry

    async def execute(self) -> dict[str, TokenPrice]:
        cached = self._cache.get(PRICES_CACHE_KEY)
        if cached is not None:
            return dict(cached)

        mints = self._token_registry.mints()
        try:
            rows = await self._market_data_port.get_mint_prices(mints)
        except MarketDataUnavailableError as exc:
            logger.warning("get_token_prices: fetch_failed mints=%s error=%s", len(mints), exc)
            return {}

        prices = {
            row.mint: TokenPrice(
                mint=row.mint,
                price=decimal_or_zero(row.price),
                change_24h=decimal_or_zero(row.change_24h),
            )
            for row in rows
        }
        self._cache.set(PRICES_CACHE_KEY, dict(prices))
        return prices
