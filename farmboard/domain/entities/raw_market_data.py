from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawTokenRef:
    """Token reference embedded in a pool listing row (``mintA`` / ``mintB``)."""

    address: str = ""
    symbol: str | None = None
    decimals: int | None = None


@dataclass(frozen=True)
class RawPoolRecord:
    """One row of ``/pools/info/list`` or ``/pools/info/ids``.

    Numeric fields are kept as received (string or number); missing values are
    ``None`` and are defaulted to zero during normalization.
    """

    id: str
    amm_id: str | None = None
    type: str | None = None
    mint_a: RawTokenRef = RawTokenRef()
    mint_b: RawTokenRef = RawTokenRef()
    lp_mint: str = ""
    tvl: str | float | None = None
    price: str | float | None = None
    mint_amount_a: str | float | None = None
    mint_amount_b: str | float | None = None
    day_volume: str | float | None = None
    day_apr: str | float | None = None
    day_fee_apr: str | float | None = None


@dataclass(frozen=True)
class RawFarmReward:
    mint_address: str = ""
    mint_symbol: str | None = None
    apr: str | float | None = None
    per_day: str | float | None = None


@dataclass(frozen=True)
class RawFarmRecord:
    """One row of ``/farms/info/list``; rows without ``pool_id`` are ignored."""

    id: str
    pool_id: str | None = None
    apr: str | float | None = None
    rewards: tuple[RawFarmReward, ...] = ()


@dataclass(frozen=True)
class RawMintPrice:
    mint: str
    price: str | float | None = None
    change_24h: str | float | None = None
