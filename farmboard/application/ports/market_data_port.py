from __future__ import annotations

from typing import Protocol

from farmboard.domain.entities.raw_market_data import RawFarmRecord, RawMintPrice, RawPoolRecord


class MarketDataPort(Protocol):
    async def list_pools(self) -> list[RawPoolRecord]:
        ...

    async def list_farms(self) -> list[RawFarmRecord]:
        ...

    async def get_pools_by_ids(self, pool_ids: list[str]) -> list[RawPoolRecord]:
        ...

    async def get_mint_prices(self, mints: list[str]) -> list[RawMintPrice]:
        ...
