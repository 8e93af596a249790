from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NewTransactionRecord:
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


@dataclass(frozen=True)
class TrackTransactionOutput:
    transaction_id: str
    signature: str
    confirmed: bool
    status: str
