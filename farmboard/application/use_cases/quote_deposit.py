from __future__ import annotations

from farmboard.application.dto.liquidity import QuoteDepositInput, QuoteDepositOutput
from farmboard.application.use_cases.refresh_pools import RefreshPoolsUseCase
from farmboard.domain.entities.liquidity import DepositIntent
from farmboard.domain.exceptions import PoolNotFoundError
from farmboard.domain.services.liquidity_amounts import (
    derive_other_amount,
    estimate_deposit_value,
    validate_deposit,
    validate_slippage,
)


class QuoteDepositUseCase:
    def __init__(self, *, refresh_pools: RefreshPoolsUseCase):
        self._refresh_pools = refresh_pools

    async def execute(self, command: QuoteDepositInput) -> QuoteDepositOutput:
        slippage = validate_slippage(command.slippage)
        pools = await self._refresh_pools.execute()
        pool = next((item for item in pools if item.id == command.pool_id), None)
        if pool is None:
            raise PoolNotFoundError(f"Pool {command.pool_id} not found.")

        is_base_side = command.edited_side == "base"
        paired = derive_other_amount(pool, command.amount, is_base_side=is_base_side)
        if is_base_side:
            intent = DepositIntent(base_amount=command.amount, quote_amount=paired, slippage=slippage)
        else:
            intent = DepositIntent(base_amount=paired, quote_amount=command.amount, slippage=slippage)

        return QuoteDepositOutput(
            pool_id=pool.id,
            base_symbol=pool.base_symbol,
            quote_symbol=pool.quote_symbol,
            base_amount=intent.base_amount,
            quote_amount=intent.quote_amount,
            slippage=slippage,
            estimated_value=estimate_deposit_value(pool, intent),
            validation=validate_deposit(pool, intent, command.balances),
        )
