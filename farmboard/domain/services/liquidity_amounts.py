from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_DOWN, Decimal, DecimalException, InvalidOperation, localcontext

from farmboard.domain.entities.liquidity import DepositIntent, WithdrawAmounts
from farmboard.domain.entities.pool import Pool
from farmboard.domain.entities.position import Position
from farmboard.domain.entities.token import TokenBalance
from farmboard.domain.entities.validation import ValidationFailure
from farmboard.domain.exceptions import (
    DepositAmountError,
    InvalidPercentageError,
    InvalidSlippageError,
)


_WORKING_PRECISION = 80


def parse_amount(value: str | None) -> Decimal | None:
    if value is None or not value.strip():
        return None
    try:
        parsed = Decimal(value.strip())
    except InvalidOperation:
        return None
    if not parsed.is_finite():
        return None
    return parsed


def truncate_to_decimals(value: Decimal, decimals: int) -> Decimal:
    if decimals < 0:
        raise ValueError("decimals must be non-negative.")
    with localcontext() as ctx:
        ctx.prec = max(_WORKING_PRECISION, value.adjusted() + decimals + 2)
        return value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_DOWN)


def derive_other_amount(pool: Pool, amount: str, *, is_base_side: bool) -> str:
    """Paired amount for a single-sided input at the pool's current price.

    Editing the base side multiplies by ``price`` (quote per base) and truncates
    to the quote token's decimals; editing the quote side divides and truncates
    to the base token's decimals.
    """
    parsed = parse_amount(amount)
    if parsed is None or parsed < 0:
        raise DepositAmountError("amount must be a finite, non-negative number.")
    if pool.price <= 0:
        raise DepositAmountError("pool price must be positive.")

    try:
        with localcontext() as ctx:
            # wide enough to keep every integer digit of the input exact
            ctx.prec = _WORKING_PRECISION + max(parsed.adjusted(), 0)
            if is_base_side:
                paired = truncate_to_decimals(parsed * pool.price, pool.quote_decimals)
            else:
                paired = truncate_to_decimals(parsed / pool.price, pool.base_decimals)
    except DecimalException as exc:
        raise DepositAmountError("amount is out of the representable range.") from exc
    return f"{paired:f}"


def _find_balance(balances: Sequence[TokenBalance], mint: str) -> TokenBalance | None:
    for balance in balances:
        if balance.mint == mint:
            return balance
    return None


def validate_deposit(
    pool: Pool,
    intent: DepositIntent,
    balances: Sequence[TokenBalance] = (),
) -> ValidationFailure | None:
    if not intent.base_amount or not intent.base_amount.strip():
        return ValidationFailure(reason="missing_amount", side="base")
    if not intent.quote_amount or not intent.quote_amount.strip():
        return ValidationFailure(reason="missing_amount", side="quote")

    base_amount = parse_amount(intent.base_amount)
    quote_amount = parse_amount(intent.quote_amount)
    if base_amount is None or base_amount <= 0:
        return ValidationFailure(reason="non_positive_amount", side="base")
    if quote_amount is None or quote_amount <= 0:
        return ValidationFailure(reason="non_positive_amount", side="quote")

    base_balance = _find_balance(balances, pool.base_mint)
    if base_balance is not None and base_amount > base_balance.ui_amount:
        return ValidationFailure(reason="insufficient_balance", side="base", symbol=pool.base_symbol)
    quote_balance = _find_balance(balances, pool.quote_mint)
    if quote_balance is not None and quote_amount > quote_balance.ui_amount:
        return ValidationFailure(reason="insufficient_balance", side="quote", symbol=pool.quote_symbol)
    return None


def validate_slippage(slippage: Decimal) -> Decimal:
    if not slippage.is_finite() or slippage <= 0 or slippage > 1:
        raise InvalidSlippageError("slippage must be greater than 0 and at most 1.")
    return slippage


def estimate_deposit_value(pool: Pool, intent: DepositIntent) -> Decimal:
    base_amount = parse_amount(intent.base_amount) or Decimal("0")
    quote_amount = parse_amount(intent.quote_amount) or Decimal("0")
    return base_amount * pool.price + quote_amount


def compute_withdrawal(
    *,
    value: Decimal,
    lp_token_amount: Decimal,
    percentage: Decimal,
) -> WithdrawAmounts:
    if not percentage.is_finite() or percentage <= 0 or percentage > 100:
        raise InvalidPercentageError(ValidationFailure(reason="invalid_percentage"))
    withdraw_value = value * percentage / Decimal("100")
    return WithdrawAmounts(
        withdraw_value=withdraw_value,
        withdraw_lp_amount=lp_token_amount * percentage / Decimal("100"),
        remaining_value=value - withdraw_value,
    )


def total_accumulated_rewards(position: Position) -> Decimal:
    return sum((reward.accumulated for reward in position.rewards), Decimal("0"))
