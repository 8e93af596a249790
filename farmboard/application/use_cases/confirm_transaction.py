from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
import logging

from farmboard.application.ports.ledger_port import LedgerPort
from farmboard.domain.exceptions import LedgerUnavailableError
from farmboard.domain.services.confirmation import classify_signature_status


logger = logging.getLogger(__name__)


DEFAULT_MAX_ATTEMPTS = 30
DEFAULT_RETRY_DELAY_MS = 1000


class ConfirmTransactionUseCase:
    """Polls the ledger until a signature is confirmed, fails, or the budget runs out.

    The delay between attempts is fixed. Every wait and every status query is an
    ordinary await, so cancelling the calling task stops the loop at once.
    """

    def __init__(
        self,
        *,
        ledger_port: LedgerPort,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._ledger_port = ledger_port
        self._max_attempts = max_attempts
        self._retry_delay_ms = retry_delay_ms
        self._sleep = sleep

    async def execute(
        self,
        signature: str,
        *,
        max_attempts: int | None = None,
        retry_delay_ms: int | None = None,
    ) -> bool:
        attempts = max(1, max_attempts if max_attempts is not None else self._max_attempts)
        delay_seconds = max(0, retry_delay_ms if retry_delay_ms is not None else self._retry_delay_ms) / 1000.0

        for attempt in range(1, attempts + 1):
            try:
                status = await self._ledger_port.get_signature_status(signature)
            except LedgerUnavailableError as exc:
                logger.warning(
                    "confirm_transaction: status_query_failed signature=%s attempt=%s/%s error=%s",
                    signature,
                    attempt,
                    attempts,
                    exc,
                )
            else:
                state = classify_signature_status(status)
                if state == "CONFIRMED":
                    logger.info(
                        "confirm_transaction: confirmed signature=%s attempt=%s commitment=%s",
                        signature,
                        attempt,
                        status.confirmation_status if status else None,
                    )
                    return True
                if state == "FAILED":
                    logger.info(
                        "confirm_transaction: failed signature=%s attempt=%s err=%s",
                        signature,
                        attempt,
                        status.err if status else None,
                    )
                    return False

            if attempt < attempts:
                await self._sleep(delay_seconds)

        logger.warning(
            "confirm_transaction: timeout signature=%s attempts=%s retry_delay_ms=%s",
            signature,
            attempts,
            int(delay_seconds * 1000),
        )
        return False
