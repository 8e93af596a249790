from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from farmboard.api.deps import get_quote_deposit_use_case, get_quote_withdraw_use_case
from farmboard.api.schemas.liquidity import (
    DepositQuoteRequest,
    DepositQuoteResponse,
    ValidationFailureResponse,
    WithdrawQuoteRequest,
    WithdrawQuoteResponse,
)
from farmboard.application.dto.liquidity import QuoteDepositInput, QuoteWithdrawInput
from farmboard.application.use_cases.quote_deposit import QuoteDepositUseCase
from farmboard.application.use_cases.quote_withdraw import QuoteWithdrawUseCase
from farmboard.domain.entities.position import PositionReward
from farmboard.domain.entities.token import TokenBalance
from farmboard.domain.exceptions import (
    DepositAmountError,
    InvalidPercentageError,
    InvalidSlippageError,
    PoolNotFoundError,
)

router = APIRouter()


@router.post("/v1/deposit/quote", response_model=DepositQuoteResponse)
async def quote_deposit(
    req: DepositQuoteRequest,
    use_case: QuoteDepositUseCase = Depends(get_quote_deposit_use_case),
):
    try:
        result = await use_case.execute(
            QuoteDepositInput(
                pool_id=req.pool_id,
                amount=req.amount,
                edited_side=req.edited_side,
                slippage=req.slippage,
                balances=[
                    TokenBalance(mint=item.mint, symbol=item.symbol, ui_amount=item.ui_amount)
                    for item in req.balances
                ],
            )
        )
    except PoolNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (DepositAmountError, InvalidSlippageError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    validation = None
    if result.validation is not None:
        validation = ValidationFailureResponse(
            reason=result.validation.reason,
            side=result.validation.side,
            message=result.validation.message,
        )
    return DepositQuoteResponse(
        pool_id=result.pool_id,
        base_symbol=result.base_symbol,
        quote_symbol=result.quote_symbol,
        base_amount=result.base_amount,
        quote_amount=result.quote_amount,
        slippage=result.slippage,
        estimated_value=result.estimated_value,
        valid=validation is None,
        validation=validation,
    )


@router.post("/v1/withdraw/quote", response_model=WithdrawQuoteResponse)
def quote_withdraw(
    req: WithdrawQuoteRequest,
    use_case: QuoteWithdrawUseCase = Depends(get_quote_withdraw_use_case),
):
    try:
        result = use_case.execute(
            QuoteWithdrawInput(
                pool_id=req.pool_id,
                value=req.value,
                lp_token_amount=req.lp_token_amount,
                percentage=req.percentage,
                slippage=req.slippage,
                rewards=[
                    PositionReward(symbol=item.symbol, accumulated=item.accumulated, daily=item.daily)
                    for item in req.rewards
                ],
            )
        )
    except (InvalidPercentageError, InvalidSlippageError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return WithdrawQuoteResponse(
        pool_id=result.pool_id,
        percentage=result.percentage,
        slippage=result.slippage,
        withdraw_value=result.withdraw_value,
        withdraw_lp_amount=result.withdraw_lp_amount,
        remaining_value=result.remaining_value,
        rewards_to_harvest=result.rewards_to_harvest,
    )
