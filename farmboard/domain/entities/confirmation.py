from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal


ConfirmationState = Literal["PENDING", "CONFIRMED", "FAILED"]

TERMINAL_COMMITMENTS: frozenset[str] = frozenset({"confirmed", "finalized"})


@dataclass(frozen=True)
class SignatureStatus:
    """Ledger view of a submitted signature; ``err`` is the raw on-chain error, if any."""

    confirmation_status: str | None
    err: Any = None
    slot: int | None = None
    confirmations: int | None = None
