from __future__ import annotations

import asyncio

from fastapi.testclient import TestClient

from farmboard.api.deps import get_network_status_use_case
from farmboard.application.use_cases.get_network_status import GetNetworkStatusUseCase
from farmboard.domain.entities.network import NetworkStatus
from farmboard.domain.exceptions import LedgerUnavailableError
from farmboard.main import app


class FakeLedger:
    def __init__(self, *, status=None, error=None):
        self.status = status
        self.error = error

    async def get_network_status(self):
        if self.error is not None:
            raise self.error
        return self.status


_STATUS = NetworkStatus(healthy=True, version="1.18.22", epoch=612, slot_height=264601234)


def test_use_case_returns_ledger_status():
    use_case = GetNetworkStatusUseCase(ledger_port=FakeLedger(status=_STATUS))
    assert asyncio.run(use_case.execute()) == _STATUS


def test_use_case_degrades_to_none_when_ledger_unavailable():
    use_case = GetNetworkStatusUseCase(ledger_port=FakeLedger(error=LedgerUnavailableError("down")))
    assert asyncio.run(use_case.execute()) is None


def test_network_route_returns_status():
    app.dependency_overrides[get_network_status_use_case] = lambda: GetNetworkStatusUseCase(
        ledger_port=FakeLedger(status=_STATUS)
    )
    client = TestClient(app)

    response = client.get("/v1/network")

    assert response.status_code == 200
    assert response.json() == {"healthy": True, "version": "1.18.22", "epoch": 612, "slot_height": 264601234}
    app.dependency_overrides.clear()


def test_network_route_returns_503_when_unavailable():
    app.dependency_overrides[get_network_status_use_case] = lambda: GetNetworkStatusUseCase(
        ledger_port=FakeLedger(error=LedgerUnavailableError("down"))
    )
    client = TestClient(app)

    assert client.get("/v1/network").status_code == 503
    app.dependency_overrides.clear()
