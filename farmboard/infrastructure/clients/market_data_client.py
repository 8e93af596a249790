from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
from typing import Any

import httpx

from farmboard.domain.entities.raw_market_data import (
    RawFarmRecord,
    RawFarmReward,
    RawMintPrice,
    RawPoolRecord,
    RawTokenRef,
)
from farmboard.domain.exceptions import MarketDataUnavailableError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarketDataClientSettings:
    api_base: str
    timeout_seconds: float
    max_retries: int = 1


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _token_ref(value: Any) -> RawTokenRef:
    data = _as_dict(value)
    return RawTokenRef(
        address=str(data.get("address") or ""),
        symbol=_optional_str(data.get("symbol")),
        decimals=_optional_int(data.get("decimals")),
    )


def map_pool_row(row: dict) -> RawPoolRecord:
    day = _as_dict(row.get("day"))
    return RawPoolRecord(
        id=str(row["id"]),
        amm_id=_optional_str(row.get("ammId")),
        type=_optional_str(row.get("type")),
        mint_a=_token_ref(row.get("mintA")),
        mint_b=_token_ref(row.get("mintB")),
        lp_mint=str(_as_dict(row.get("lpMint")).get("address") or ""),
        tvl=row.get("tvl"),
        price=row.get("price"),
        mint_amount_a=row.get("mintAmountA"),
        mint_amount_b=row.get("mintAmountB"),
        day_volume=day.get("volume"),
        day_apr=day.get("apr"),
        day_fee_apr=day.get("feeApr"),
    )


def map_farm_row(row: dict) -> RawFarmRecord:
    rewards = row.get("rewardInfos") or []
    return RawFarmRecord(
        id=str(row.get("id") or ""),
        pool_id=_optional_str(row.get("poolId")),
        apr=row.get("apr"),
        rewards=tuple(
            RawFarmReward(
                mint_address=str(_as_dict(reward.get("mint")).get("address") or ""),
                mint_symbol=_optional_str(_as_dict(reward.get("mint")).get("symbol")),
                apr=reward.get("apr"),
                per_day=reward.get("perDay"),
            )
            for reward in rewards
            if isinstance(reward, dict)
        ),
    )


def map_price_entry(mint: str, value: Any) -> RawMintPrice:
    if isinstance(value, dict):
        return RawMintPrice(mint=mint, price=value.get("price"), change_24h=value.get("change24h"))
    return RawMintPrice(mint=mint, price=value, change_24h=None)


class MarketDataClient:
    def __init__(
        self,
        settings: MarketDataClientSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    async def list_pools(self) -> list[RawPoolRecord]:
        payload = await self._get_json("/pools/info/list")
        rows = self._map_rows(self._extract_rows(payload), map_pool_row, source="pools")
        logger.info("market_data_client: fetched_pools rows=%s", len(rows))
        return rows

    async def list_farms(self) -> list[RawFarmRecord]:
        payload = await self._get_json("/farms/info/list")
        rows = self._map_rows(self._extract_rows(payload), map_farm_row, source="farms")
        logger.info("market_data_client: fetched_farms rows=%s", len(rows))
        return rows

    async def get_pools_by_ids(self, pool_ids: list[str]) -> list[RawPoolRecord]:
        if not pool_ids:
            return []
        payload = await self._get_json("/pools/info/ids", params={"ids": ",".join(pool_ids)})
        return self._map_rows(self._extract_rows(payload), map_pool_row, source="pools_by_ids")

    async def get_mint_prices(self, mints: list[str]) -> list[RawMintPrice]:
        if not mints:
            return []
        payload = await self._get_json("/mint/price", params={"mints": ",".join(mints)})
        data = payload.get("data")
        if data is None:
            return []
        if not isinstance(data, dict):
            raise MarketDataUnavailableError("Unexpected mint price payload.")
        return [map_price_entry(str(mint), value) for mint, value in data.items() if value is not None]

    def _extract_rows(self, payload: dict) -> list:
        data = payload.get("data")
        if isinstance(data, dict):
            data = data.get("data")
        if data is None:
            return []
        if not isinstance(data, list):
            raise MarketDataUnavailableError("Unexpected listing payload.")
        return data

    def _map_rows(self, rows: list, mapper, *, source: str) -> list:
        mapped = []
        skipped = 0
        for row in rows:
            if not isinstance(row, dict) or not row.get("id"):
                skipped += 1
                continue
            try:
                mapped.append(mapper(row))
            except (AttributeError, KeyError, TypeError, ValueError) as exc:
                raise MarketDataUnavailableError(f"Malformed {source} row: {exc}") from exc
        if skipped:
            logger.warning("market_data_client: skipped_rows source=%s skipped=%s", source, skipped)
        return mapped

    async def _get_json(self, path: str, *, params: dict | None = None) -> dict:
        url = f"{self._settings.api_base.rstrip('/')}{path}"
        attempts = max(1, self._settings.max_retries)
        delay = 0.25
        last_exc: Exception | None = None

        for attempt in range(1, attempts + 1):
            try:
                async with httpx.AsyncClient(
                    timeout=self._settings.timeout_seconds,
                    transport=self._transport,
                ) as client:
                    response = await client.get(url, params=params)
                    response.raise_for_status()
                    payload = response.json()
                if not isinstance(payload, dict):
                    raise ValueError("response body is not a JSON object")
                if payload.get("success") is False:
                    raise ValueError(str(payload.get("msg") or "success flag is false"))
                return payload
            except (httpx.HTTPError, ValueError) as exc:
                last_exc = exc
                if attempt == attempts:
                    break
                logger.warning(
                    "market_data_client: request_retry path=%s attempt=%s/%s error=%s",
                    path,
                    attempt,
                    attempts,
                    exc,
                )
                await asyncio.sleep(delay)
                delay *= 2

        raise MarketDataUnavailableError(f"GET {path} failed: {last_exc}") from last_exc
