from __future__ import annotations

from pydantic import BaseModel


class NetworkStatusResponse(BaseModel):
    healthy: bool
    version: str | None
    epoch: int
    slot_height: int
