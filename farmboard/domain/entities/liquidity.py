from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


DEFAULT_SLIPPAGE = Decimal("0.005")


@dataclass(frozen=True)
class DepositIntent:
    base_amount: str
    quote_amount: str
    slippage: Decimal = DEFAULT_SLIPPAGE


@dataclass(frozen=True)
class WithdrawIntent:
    percentage: Decimal
    slippage: Decimal = DEFAULT_SLIPPAGE


@dataclass(frozen=True)
class WithdrawAmounts:
    withdraw_value: Decimal
    withdraw_lp_amount: Decimal
    remaining_value: Decimal
