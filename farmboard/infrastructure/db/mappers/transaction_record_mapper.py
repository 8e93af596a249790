from __future__ import annotations

from farmboard.domain.entities.transaction import TransactionRecord
from farmboard.infrastructure.db.models.transactions import TransactionModel


def map_model_to_transaction_record(
    model: TransactionModel,
    *,
    wallet_address: str,
) -> TransactionRecord:
    return TransactionRecord(
        id=model.id,
        wallet_address=wallet_address,
        type=model.type,
        pool_id=model.pool_id,
        pool_name=model.pool_name,
        token_a=model.token_a,
        token_b=model.token_b,
        amount_a=model.amount_a,
        amount_b=model.amount_b,
        lp_token_amount=model.lp_token_amount,
        signature=model.signature,
        status=model.status,
        created_at=model.created_at,
    )
