from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field


class TokenBalanceRequest(BaseModel):
    mint: str
    symbol: str = ""
    ui_amount: Decimal


class DepositQuoteRequest(BaseModel):
    pool_id: str
    amount: str = Field(..., description="Decimal string typed on the edited side.")
    edited_side: Literal["base", "quote"] = "base"
    slippage: Decimal = Field(Decimal("0.005"), description="Fraction, e.g. 0.005 for 0.5%.")
    balances: list[TokenBalanceRequest] = []


class ValidationFailureResponse(BaseModel):
    reason: str
    side: str | None = None
    message: str


class DepositQuoteResponse(BaseModel):
    pool_id: str
    base_symbol: str
    quote_symbol: str
    base_amount: str
    quote_amount: str
    slippage: Decimal
    estimated_value: Decimal
    valid: bool
    validation: ValidationFailureResponse | None = None


class PositionRewardRequest(BaseModel):
    symbol: str
    accumulated: Decimal
    daily: Decimal = Decimal("0")


class WithdrawQuoteRequest(BaseModel):
    pool_id: str
    value: Decimal
    lp_token_amount: Decimal
    percentage: Decimal
    slippage: Decimal = Decimal("0.005")
    rewards: list[PositionRewardRequest] = []


class WithdrawQuoteResponse(BaseModel):
    pool_id: str
    percentage: Decimal
    slippage: Decimal
    withdraw_value: Decimal
    withdraw_lp_amount: Decimal
    remaining_value: Decimal
    rewards_to_harvest: Decimal
