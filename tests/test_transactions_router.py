from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

from fastapi.testclient import TestClient

from farmboard.api.deps import (
    get_list_transactions_use_case,
    get_record_transaction_use_case,
    get_track_transaction_use_case,
    get_update_transaction_status_use_case,
)
from farmboard.application.dto.transactions import TrackTransactionOutput
from farmboard.application.use_cases.transactions import (
    ListTransactionsUseCase,
    RecordTransactionUseCase,
    UpdateTransactionStatusUseCase,
)
from farmboard.domain.entities.transaction import TransactionRecord
from farmboard.domain.exceptions import TransactionNotFoundError
from farmboard.main import app


class InMemoryTransactionPort:
    def __init__(self):
        self.records: dict[str, TransactionRecord] = {}

    def create(self, *, record):
        created = TransactionRecord(
            id=f"tx-{len(self.records) + 1}",
            wallet_address=record.wallet_address,
            type=record.type,
            pool_id=record.pool_id,
            pool_name=record.pool_name,
            token_a=record.token_a,
            token_b=record.token_b,
            amount_a=record.amount_a,
            amount_b=record.amount_b,
            lp_token_amount=record.lp_token_amount,
            signature=record.signature,
            status="PENDING",
            created_at=datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc),
        )
        self.records[created.id] = created
        return created

    def list_by_wallet(self, *, wallet_address: str, limit: int):
        return [record for record in self.records.values() if record.wallet_address == wallet_address][:limit]

    def get_by_id(self, *, transaction_id: str):
        return self.records.get(transaction_id)

    def update_status(self, *, transaction_id: str, status: str):
        record = self.records.get(transaction_id)
        if record is None:
            return None
        self.records[transaction_id] = replace(record, status=status)
        return self.records[transaction_id]


class FakeTrackTransactionUseCase:
    async def execute(self, *, transaction_id: str):
        if transaction_id != "tx-1":
            raise TransactionNotFoundError(f"Transaction {transaction_id} not found.")
        return TrackTransactionOutput(transaction_id="tx-1", signature="sig-1", confirmed=True, status="CONFIRMED")


def _override(port: InMemoryTransactionPort) -> None:
    app.dependency_overrides[get_record_transaction_use_case] = lambda: RecordTransactionUseCase(transaction_port=port)
    app.dependency_overrides[get_list_transactions_use_case] = lambda: ListTransactionsUseCase(transaction_port=port)
    app.dependency_overrides[get_update_transaction_status_use_case] = lambda: UpdateTransactionStatusUseCase(
        transaction_port=port
    )
    app.dependency_overrides[get_track_transaction_use_case] = lambda: FakeTrackTransactionUseCase()


def test_create_list_and_update_transaction():
    _override(InMemoryTransactionPort())
    client = TestClient(app)

    created = client.post(
        "/v1/transactions",
        json={"wallet_address": "Wallet111", "type": "DEPOSIT", "pool_id": "pool-1", "signature": "sig-1"},
    )
    assert created.status_code == 200
    assert created.json()["status"] == "PENDING"

    listed = client.get("/v1/transactions", params={"wallet_address": "Wallet111"})
    assert [item["id"] for item in listed.json()["transactions"]] == ["tx-1"]

    updated = client.patch("/v1/transactions/tx-1", json={"status": "CONFIRMED"})
    assert updated.json()["status"] == "CONFIRMED"

    app.dependency_overrides.clear()


def test_transaction_input_errors():
    _override(InMemoryTransactionPort())
    client = TestClient(app)

    assert client.get("/v1/transactions").status_code == 400
    assert (
        client.post(
            "/v1/transactions",
            json={"wallet_address": "Wallet111", "type": "SWAP", "pool_id": "pool-1", "signature": "sig-1"},
        ).status_code
        == 400
    )
    assert client.patch("/v1/transactions/tx-1", json={"status": "DONE"}).status_code == 400
    assert client.patch("/v1/transactions/tx-9", json={"status": "FAILED"}).status_code == 404

    app.dependency_overrides.clear()


def test_confirm_transaction():
    _override(InMemoryTransactionPort())
    client = TestClient(app)

    response = client.post("/v1/transactions/tx-1/confirm")
    assert response.status_code == 200
    assert response.json() == {"transaction_id": "tx-1", "signature": "sig-1", "confirmed": True, "status": "CONFIRMED"}
    assert client.post("/v1/transactions/tx-9/confirm").status_code == 404

    app.dependency_overrides.clear()
