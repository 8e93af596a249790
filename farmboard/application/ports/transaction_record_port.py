from __future__ import annotations

from typing import Protocol

from farmboard.application.dto.transactions import NewTransactionRecord
from farmboard.domain.entities.transaction import TransactionRecord, TransactionStatus


class TransactionRecordPort(Protocol):
    def create(self, *, record: NewTransactionRecord) -> TransactionRecord:
        ...

    def list_by_wallet(self, *, wallet_address: str, limit: int) -> list[TransactionRecord]:
        ...

    def get_by_id(self, *, transaction_id: str) -> TransactionRecord | None:
        ...

    def update_status(
        self,
        *,
        transaction_id: str,
        status: TransactionStatus,
    ) -> TransactionRecord | None:
        ...
