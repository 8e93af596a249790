from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PositionReward:
    symbol: str
    accumulated: Decimal
    daily: Decimal


@dataclass(frozen=True)
class Position:
    pool_id: str
    pool_name: str
    lp_token_amount: Decimal
    value: Decimal
    rewards: tuple[PositionReward, ...] = ()
