from __future__ import annotations

from typing import Protocol

from farmboard.domain.entities.confirmation import SignatureStatus
from farmboard.domain.entities.network import NetworkStatus


class LedgerPort(Protocol):
    async def get_signature_status(self, signature: str) -> SignatureStatus | None:
        ...

    async def get_network_status(self) -> NetworkStatus:
        ...

