from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class TransactionCreateRequest(BaseModel):
    wallet_address: str
    type: str
    pool_id: str
    signature: str
    pool_name: str | None = None
    token_a: str | None = None
    token_b: str | None = None
    amount_a: str | None = None
    amount_b: str | None = None
    lp_token_amount: str | None = None


class TransactionStatusUpdateRequest(BaseModel):
    status: str | None = None


class TransactionResponse(BaseModel):
    id: str
    wallet_address: str
    type: str
    pool_id: str
    pool_name: str | None
    token_a: str | None
    token_b: str | None
    amount_a: str | None
    amount_b: str | None
    lp_token_amount: str | None
    signature: str
    status: str
    created_at: datetime


class TransactionListResponse(BaseModel):
    transactions: list[TransactionResponse]


class TransactionConfirmResponse(BaseModel):
    transaction_id: str
    signature: str
    confirmed: bool
    status: str
