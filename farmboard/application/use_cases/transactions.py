from __future__ import annotations

import asyncio
import logging

from farmboard.application.dto.transactions import NewTransactionRecord, TrackTransactionOutput
from farmboard.application.ports.transaction_record_port import TransactionRecordPort
from farmboard.application.use_cases.confirm_transaction import ConfirmTransactionUseCase
from farmboard.domain.entities.transaction import (
    TRANSACTION_STATUSES,
    TRANSACTION_TYPES,
    TransactionRecord,
)
from farmboard.domain.exceptions import TransactionInputError, TransactionNotFoundError


logger = logging.getLogger(__name__)


DEFAULT_HISTORY_LIMIT = 50


class RecordTransactionUseCase:
    def __init__(self, *, transaction_port: TransactionRecordPort):
        self._transaction_port = transaction_port

    def execute(self, command: NewTransactionRecord) -> TransactionRecord:
        if not command.wallet_address or not command.type or not command.pool_id or not command.signature:
            raise TransactionInputError("wallet_address, type, pool_id and signature are required.")
        if command.type not in TRANSACTION_TYPES:
            raise TransactionInputError("type must be DEPOSIT, WITHDRAW or HARVEST.")
        return self._transaction_port.create(record=command)


class ListTransactionsUseCase:
    def __init__(self, *, transaction_port: TransactionRecordPort, limit: int = DEFAULT_HISTORY_LIMIT):
        self._transaction_port = transaction_port
        self._limit = limit

    def execute(self, *, wallet_address: str | None) -> list[TransactionRecord]:
        if not wallet_address or not wallet_address.strip():
            raise TransactionInputError("wallet_address is required.")
        return self._transaction_port.list_by_wallet(
            wallet_address=wallet_address.strip(),
            limit=self._limit,
        )


class UpdateTransactionStatusUseCase:
    def __init__(self, *, transaction_port: TransactionRecordPort):
        self._transaction_port = transaction_port

    def execute(self, *, transaction_id: str, status: str | None) -> TransactionRecord:
        if not status or status not in TRANSACTION_STATUSES:
            raise TransactionInputError("status must be PENDING, CONFIRMED or FAILED.")
        record = self._transaction_port.update_status(transaction_id=transaction_id, status=status)
        if record is None:
            raise TransactionNotFoundError(f"Transaction {transaction_id} not found.")
        return record


class TrackTransactionUseCase:
    """Waits for a recorded transaction to settle and stores the outcome."""

    def __init__(
        self,
        *,
        transaction_port: TransactionRecordPort,
        confirm_transaction: ConfirmTransactionUseCase,
    ):
        self._transaction_port = transaction_port
        self._confirm_transaction = confirm_transaction

    async def execute(self, *, transaction_id: str) -> TrackTransactionOutput:
        record = await asyncio.to_thread(
            self._transaction_port.get_by_id,
            transaction_id=transaction_id,
        )
        if record is None:
            raise TransactionNotFoundError(f"Transaction {transaction_id} not found.")

        confirmed = await self._confirm_transaction.execute(record.signature)
        status = "CONFIRMED" if confirmed else "FAILED"
        await asyncio.to_thread(
            self._transaction_port.update_status,
            transaction_id=record.id,
            status=status,
        )
        logger.info(
            "track_transaction: settled transaction_id=%s signature=%s status=%s",
            record.id,
            record.signature,
            status,
        )
        return TrackTransactionOutput(
            transaction_id=record.id,
            signature=record.signature,
            confirmed=confirmed,
            status=status,
        )
