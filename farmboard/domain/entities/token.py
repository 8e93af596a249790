from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TokenInfo:
    mint: str
    symbol: str
    decimals: int
    name: str | None = None


@dataclass(frozen=True)
class TokenPrice:
    mint: str
    price: Decimal
    change_24h: Decimal


@dataclass(frozen=True)
class TokenBalance:
    mint: str
    symbol: str
    ui_amount: Decimal
