from __future__ import annotations

import logging

from farmboard.application.ports.ledger_port import LedgerPort
from farmboard.domain.entities.network import NetworkStatus
from farmboard.domain.exceptions import LedgerUnavailableError


logger = logging.getLogger(__name__)


class GetNetworkStatusUseCase:
    def __init__(self, *, ledger_port: LedgerPort):
        self._ledger_port = ledger_port

    async def execute(self) -> NetworkStatus | None:
        try:
            return await self._ledger_port.get_network_status()
        except LedgerUnavailableError as exc:
            logger.warning("get_network_status: query_failed error=%s", exc)
            return None
