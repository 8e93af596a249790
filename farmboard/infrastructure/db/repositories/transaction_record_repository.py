from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
import logging
from uuid import uuid4

from sqlalchemy import select

from farmboard.application.dto.transactions import NewTransactionRecord
from farmboard.application.ports.transaction_record_port import TransactionRecordPort
from farmboard.domain.entities.transaction import TransactionRecord, TransactionStatus
from farmboard.infrastructure.db.mappers.transaction_record_mapper import (
    map_model_to_transaction_record,
)
from farmboard.infrastructure.db.models.transactions import TransactionModel, WalletUserModel


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SqlTransactionRecordRepository(TransactionRecordPort):
    def __init__(self, session_factory, *, now: Callable[[], datetime] = _utcnow):
        self._session_factory = session_factory
        self._now = now

    def create(self, *, record: NewTransactionRecord) -> TransactionRecord:
        now = self._now()
        with self._session_factory() as session, session.begin():
            user = session.execute(
                select(WalletUserModel).where(WalletUserModel.wallet_address == record.wallet_address)
            ).scalar_one_or_none()
            if user is None:
                user = WalletUserModel(
                    id=str(uuid4()),
                    wallet_address=record.wallet_address,
                    created_at=now,
                )
                session.add(user)

            model = TransactionModel(
                id=str(uuid4()),
                user_id=user.id,
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
                created_at=now,
                updated_at=now,
            )
            session.add(model)

        logger.info(
            "transaction_record_repository: created id=%s type=%s pool_id=%s",
            model.id,
            model.type,
            model.pool_id,
        )
        return map_model_to_transaction_record(model, wallet_address=record.wallet_address)

    def list_by_wallet(self, *, wallet_address: str, limit: int) -> list[TransactionRecord]:
        stmt = (
            select(TransactionModel)
            .join(WalletUserModel, TransactionModel.user_id == WalletUserModel.id)
            .where(WalletUserModel.wallet_address == wallet_address)
            .order_by(TransactionModel.created_at.desc())
            .limit(limit)
        )
        with self._session_factory() as session:
            models = session.execute(stmt).scalars().all()
        return [map_model_to_transaction_record(model, wallet_address=wallet_address) for model in models]

    def get_by_id(self, *, transaction_id: str) -> TransactionRecord | None:
        stmt = (
            select(TransactionModel, WalletUserModel.wallet_address)
            .join(WalletUserModel, TransactionModel.user_id == WalletUserModel.id)
            .where(TransactionModel.id == transaction_id)
        )
        with self._session_factory() as session:
            row = session.execute(stmt).first()
        if row is None:
            return None
        model, wallet_address = row
        return map_model_to_transaction_record(model, wallet_address=wallet_address)

    def update_status(
        self,
        *,
        transaction_id: str,
        status: TransactionStatus,
    ) -> TransactionRecord | None:
        with self._session_factory() as session, session.begin():
            row = session.execute(
                select(TransactionModel, WalletUserModel.wallet_address)
                .join(WalletUserModel, TransactionModel.user_id == WalletUserModel.id)
                .where(TransactionModel.id == transaction_id)
            ).first()
            if row is None:
                return None
            model, wallet_address = row
            model.status = status
            model.updated_at = self._now()

        logger.info(
            "transaction_record_repository: status_updated id=%s status=%s",
            transaction_id,
            status,
        )
        return map_model_to_transaction_record(model, wallet_address=wallet_address)
