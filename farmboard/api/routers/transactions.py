from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from farmboard.api.deps import (
    get_list_transactions_use_case,
    get_record_transaction_use_case,
    get_track_transaction_use_case,
    get_update_transaction_status_use_case,
)
from farmboard.api.schemas.transactions import (
    TransactionConfirmResponse,
    TransactionCreateRequest,
    TransactionListResponse,
    TransactionResponse,
    TransactionStatusUpdateRequest,
)
from farmboard.application.dto.transactions import NewTransactionRecord
from farmboard.application.use_cases.transactions import (
    ListTransactionsUseCase,
    RecordTransactionUseCase,
    TrackTransactionUseCase,
    UpdateTransactionStatusUseCase,
)
from farmboard.domain.entities.transaction import TransactionRecord
from farmboard.domain.exceptions import TransactionInputError, TransactionNotFoundError

router = APIRouter()


def _transaction_response(record: TransactionRecord) -> TransactionResponse:
    return TransactionResponse(
        id=record.id,
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
        status=record.status,
        created_at=record.created_at,
    )


@router.get("/v1/transactions", response_model=TransactionListResponse)
def list_transactions(
    wallet_address: str | None = None,
    use_case: ListTransactionsUseCase = Depends(get_list_transactions_use_case),
):
    try:
        records = use_case.execute(wallet_address=wallet_address)
    except TransactionInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return TransactionListResponse(transactions=[_transaction_response(record) for record in records])


@router.post("/v1/transactions", response_model=TransactionResponse)
def create_transaction(
    req: TransactionCreateRequest,
    use_case: RecordTransactionUseCase = Depends(get_record_transaction_use_case),
):
    try:
        record = use_case.execute(
            NewTransactionRecord(
                wallet_address=req.wallet_address,
                type=req.type,
                pool_id=req.pool_id,
                signature=req.signature,
                pool_name=req.pool_name,
                token_a=req.token_a,
                token_b=req.token_b,
                amount_a=req.amount_a,
                amount_b=req.amount_b,
                lp_token_amount=req.lp_token_amount,
            )
        )
    except TransactionInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _transaction_response(record)


@router.patch("/v1/transactions/{transaction_id}", response_model=TransactionResponse)
def update_transaction_status(
    transaction_id: str,
    req: TransactionStatusUpdateRequest,
    use_case: UpdateTransactionStatusUseCase = Depends(get_update_transaction_status_use_case),
):
    try:
        record = use_case.execute(transaction_id=transaction_id, status=req.status)
    except TransactionInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except TransactionNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _transaction_response(record)


@router.post("/v1/transactions/{transaction_id}/confirm", response_model=TransactionConfirmResponse)
async def confirm_transaction(
    transaction_id: str,
    use_case: TrackTransactionUseCase = Depends(get_track_transaction_use_case),
):
    try:
        result = await use_case.execute(transaction_id=transaction_id)
    except TransactionNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return TransactionConfirmResponse(
        transaction_id=result.transaction_id,
        signature=result.signature,
        confirmed=result.confirmed,
        status=result.status,
    )
