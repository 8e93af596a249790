from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NetworkStatus:
    healthy: bool
    version: str | None
    epoch: int
    slot_height: int
