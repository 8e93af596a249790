from __future__ import annotations

from dataclasses import dataclass
from itertools import count
import asyncio
import logging

import httpx

from farmboard.domain.entities.confirmation import SignatureStatus
from farmboard.domain.entities.network import NetworkStatus
from farmboard.domain.exceptions import LedgerUnavailableError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolanaRpcClientSettings:
    endpoint: str
    timeout_seconds: float
    search_transaction_history: bool = False


class SolanaRpcClient:
    def __init__(
        self,
        settings: SolanaRpcClientSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport
        self._request_ids = count(1)

    async def get_signature_status(self, signature: str) -> SignatureStatus | None:
        result = await self._call(
            "getSignatureStatuses",
            [
                [signature],
                {"searchTransactionHistory": self._settings.search_transaction_history},
            ],
        )
        values = result.get("value") if isinstance(result, dict) else None
        if not isinstance(values, list) or not values:
            raise LedgerUnavailableError("Unexpected getSignatureStatuses payload.")
        entry = values[0]
        if entry is None:
            return None
        if not isinstance(entry, dict):
            raise LedgerUnavailableError("Unexpected signature status entry.")
        return SignatureStatus(
            confirmation_status=entry.get("confirmationStatus"),
            err=entry.get("err"),
            slot=entry.get("slot"),
            confirmations=entry.get("confirmations"),
        )

    async def get_network_status(self) -> NetworkStatus:
        version, epoch_info, blockhash = await asyncio.gather(
            self._call("getVersion", []),
            self._call("getEpochInfo", []),
            self._call("getLatestBlockhash", []),
        )
        if not isinstance(version, dict) or not isinstance(epoch_info, dict) or not isinstance(blockhash, dict):
            raise LedgerUnavailableError("Unexpected network status payload.")
        try:
            epoch = int(epoch_info["epoch"])
            slot_height = int(epoch_info["absoluteSlot"])
        except (KeyError, TypeError, ValueError) as exc:
            raise LedgerUnavailableError("Unexpected getEpochInfo payload.") from exc
        value = blockhash.get("value")
        latest = value.get("blockhash") if isinstance(value, dict) else None
        return NetworkStatus(
            healthy=bool(latest),
            version=version.get("solana-core"),
            epoch=epoch,
            slot_height=slot_height,
        )

    async def _call(self, method: str, params: list):
        body = {
            "jsonrpc": "2.0",
            "id": next(self._request_ids),
            "method": method,
            "params": params,
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(self._settings.endpoint, json=body)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise LedgerUnavailableError(f"{method} request failed: {exc}") from exc

        if not isinstance(payload, dict):
            raise LedgerUnavailableError(f"{method} returned a non-object body.")
        error = payload.get("error")
        if error:
            message = error.get("message", error) if isinstance(error, dict) else error
            logger.debug("solana_rpc_client: rpc_error method=%s error=%s", method, message)
            raise LedgerUnavailableError(f"{method} failed: {message}")
        return payload.get("result")
