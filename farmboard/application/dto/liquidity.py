from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal

from farmboard.domain.entities.liquidity import DEFAULT_SLIPPAGE
from farmboard.domain.entities.position import PositionReward
from farmboard.domain.entities.token import TokenBalance
from farmboard.domain.entities.validation import ValidationFailure


@dataclass(frozen=True)
class QuoteDepositInput:
    pool_id: str
    amount: str
    edited_side: Literal["base", "quote"]
    slippage: Decimal = DEFAULT_SLIPPAGE
    balances: list[TokenBalance] = field(default_factory=list)


@dataclass(frozen=True)
class QuoteDepositOutput:
    pool_id: str
    base_symbol: str
    quote_symbol: str
    base_amount: str
    quote_amount: str
    slippage: Decimal
    estimated_value: Decimal
    validation: ValidationFailure | None


@dataclass(frozen=True)
class QuoteWithdrawInput:
    pool_id: str
    value: Decimal
    lp_token_amount: Decimal
    percentage: Decimal
    slippage: Decimal = DEFAULT_SLIPPAGE
    rewards: list[PositionReward] = field(default_factory=list)


@dataclass(frozen=True)
class QuoteWithdrawOutput:
    pool_id: str
    percentage: Decimal
    slippage: Decimal
    withdraw_value: Decimal
    withdraw_lp_amount: Decimal
    remaining_value: Decimal
    rewards_to_harvest: Decimal
