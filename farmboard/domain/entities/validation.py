from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


ValidationReason = Literal[
    "missing_amount",
    "non_positive_amount",
    "insufficient_balance",
    "invalid_percentage",
]
AmountSide = Literal["base", "quote"]


_MESSAGES = {
    "missing_amount": "Both token amounts are required.",
    "non_positive_amount": "Amounts must be greater than zero.",
    "insufficient_balance": "Insufficient balance.",
    "invalid_percentage": "Percentage must be greater than 0 and at most 100.",
}


@dataclass(frozen=True)
class ValidationFailure:
    reason: ValidationReason
    side: AmountSide | None = None
    symbol: str | None = None

    @property
    def message(self) -> str:
        if self.reason == "insufficient_balance" and self.symbol:
            return f"Insufficient balance for {self.symbol}."
        return _MESSAGES[self.reason]
