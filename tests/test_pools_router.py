from __future__ import annotations

from decimal import Decimal

from fastapi.testclient import TestClient

from farmboard.api.deps import (
    get_get_pool_use_case,
    get_list_pools_use_case,
    get_token_prices_use_case,
)
from farmboard.application.dto.pools import ListPoolsOutput
from farmboard.domain.entities.pool import FarmReward, Pool, PoolMetrics
from farmboard.domain.entities.token import TokenPrice
from farmboard.domain.exceptions import PoolQueryInputError
from farmboard.main import app


def _pool() -> Pool:
    return Pool(
        id="pool-1",
        amm_id="amm-1",
        lp_mint="lp-1",
        base_mint="sol-mint",
        quote_mint="usdc-mint",
        base_symbol="SOL",
        quote_symbol="USDC",
        base_decimals=9,
        quote_decimals=6,
        tvl=Decimal("2500000"),
        volume_24h=Decimal("150000"),
        apr=Decimal("12.5"),
        fee_apr=Decimal("10"),
        farm_apr=Decimal("7.5"),
        apy=Decimal("20.0"),
        price=Decimal("23.5"),
        base_reserve="1000",
        quote_reserve="23500",
        type="CPMM",
        farm_id="farm-1",
        farm_rewards=(FarmReward(mint="ray-mint", symbol="RAY", apr=Decimal("7.5"), per_day=Decimal("120")),),
    )


class FakeListPoolsUseCase:
    def __init__(self):
        self.commands = []

    async def execute(self, command):
        self.commands.append(command)
        if command.sort_by == "fees":
            raise PoolQueryInputError("sort_by must be one of apy, tvl, volume24h.")
        return ListPoolsOutput(
            pools=[_pool()],
            metrics=PoolMetrics(
                total_tvl=Decimal("2500000"),
                total_volume_24h=Decimal("150000"),
                top_apy=Decimal("20.0"),
                total_pools=1,
            ),
        )


class FakeGetPoolUseCase:
    async def execute(self, pool_id: str):
        return _pool() if pool_id == "pool-1" else None


class FakeTokenPricesUseCase:
    async def execute(self):
        return {"sol-mint": TokenPrice(mint="sol-mint", price=Decimal("23.5"), change_24h=Decimal("-1.2"))}


def test_list_pools_returns_metrics_and_data():
    fake = FakeListPoolsUseCase()
    app.dependency_overrides[get_list_pools_use_case] = lambda: fake

    client = TestClient(app)
    response = client.get("/v1/pools", params={"query": "sol", "sort_by": "tvl"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["metrics"]["total_pools"] == 1
    assert payload["metrics"]["top_apy"] == "20.0"
    assert payload["data"][0]["pair_label"] == "SOL-USDC"
    assert payload["data"][0]["farm_rewards"][0]["symbol"] == "RAY"
    assert fake.commands[0].query == "sol"
    assert fake.commands[0].sort_by == "tvl"

    app.dependency_overrides.clear()


def test_list_pools_rejects_unknown_sort():
    app.dependency_overrides[get_list_pools_use_case] = lambda: FakeListPoolsUseCase()

    client = TestClient(app)
    response = client.get("/v1/pools", params={"sort_by": "fees"})

    assert response.status_code == 400

    app.dependency_overrides.clear()


def test_get_pool_and_missing_pool():
    app.dependency_overrides[get_get_pool_use_case] = lambda: FakeGetPoolUseCase()

    client = TestClient(app)
    assert client.get("/v1/pools/pool-1").json()["price"] == "23.5"
    assert client.get("/v1/pools/unknown").status_code == 404

    app.dependency_overrides.clear()


def test_prices():
    app.dependency_overrides[get_token_prices_use_case] = lambda: FakeTokenPricesUseCase()

    client = TestClient(app)
    response = client.get("/v1/prices")

    assert response.status_code == 200
    assert response.json() == [{"mint": "sol-mint", "price": "23.5", "change_24h": "-1.2"}]

    app.dependency_overrides.clear()
