from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


TransactionType = Literal["DEPOSIT", "WITHDRAW", "HARVEST"]
TransactionStatus = Literal["PENDING", "CONFIRMED", "FAILED"]

TRANSACTION_TYPES: frozenset[str] = frozenset({"DEPOSIT", "WITHDRAW", "HARVEST"})
TRANSACTION_STATUSES: frozenset[str] = frozenset({"PENDING", "CONFIRMED", "FAILED"})


@dataclass(frozen=True)
class TransactionRecord:
    id: str
    wallet_address: str
    type: TransactionType
    pool_id: str
    pool_name: str | None
    token_a: str | None
    token_b: str | None
    amount_a: str | None
    amount_b: str | None
    lp_token_amount: str | None
    signature: str
    status: TransactionStatus
    created_at: datetime
