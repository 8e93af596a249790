from __future__ import annotations

from farmboard.application.dto.liquidity import QuoteWithdrawInput, QuoteWithdrawOutput
from farmboard.domain.entities.liquidity import WithdrawIntent
from farmboard.domain.entities.position import Position
from farmboard.domain.services.liquidity_amounts import (
    compute_withdrawal,
    total_accumulated_rewards,
    validate_slippage,
)


class QuoteWithdrawUseCase:
    def execute(self, command: QuoteWithdrawInput) -> QuoteWithdrawOutput:
        intent = WithdrawIntent(percentage=command.percentage, slippage=validate_slippage(command.slippage))
        position = Position(
            pool_id=command.pool_id,
            pool_name="",
            lp_token_amount=command.lp_token_amount,
            value=command.value,
            rewards=tuple(command.rewards),
        )
        amounts = compute_withdrawal(
            value=position.value,
            lp_token_amount=position.lp_token_amount,
            percentage=intent.percentage,
        )
        # a withdrawal harvests everything accumulated so far
        return QuoteWithdrawOutput(
            pool_id=position.pool_id,
            percentage=intent.percentage,
            slippage=intent.slippage,
            withdraw_value=amounts.withdraw_value,
            withdraw_lp_amount=amounts.withdraw_lp_amount,
            remaining_value=amounts.remaining_value,
            rewards_to_harvest=total_accumulated_rewards(position),
        )
