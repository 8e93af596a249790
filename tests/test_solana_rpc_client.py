from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from farmboard.domain.exceptions import LedgerUnavailableError
from farmboard.infrastructure.clients.solana_rpc_client import SolanaRpcClient, SolanaRpcClientSettings


def _make_client(handler) -> SolanaRpcClient:
    return SolanaRpcClient(
        SolanaRpcClientSettings(endpoint="https://rpc.example", timeout_seconds=5),
        transport=httpx.MockTransport(handler),
    )


def _rpc_result(value) -> dict:
    return {"jsonrpc": "2.0", "id": 1, "result": {"context": {"slot": 10}, "value": value}}


def test_posts_get_signature_statuses_and_maps_entry():
    bodies: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(
            200,
            json=_rpc_result([{"slot": 9, "confirmations": None, "err": None, "confirmationStatus": "finalized"}]),
        )

    status = asyncio.run(_make_client(handler).get_signature_status("sig-1"))

    assert bodies[0]["method"] == "getSignatureStatuses"
    assert bodies[0]["params"][0] == ["sig-1"]
    assert status.confirmation_status == "finalized"
    assert status.err is None
    assert status.slot == 9


def test_unknown_signature_returns_none():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_rpc_result([None]))

    assert asyncio.run(_make_client(handler).get_signature_status("sig-1")) is None


def test_on_chain_error_is_preserved():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json=_rpc_result([{"slot": 9, "err": {"InstructionError": [0, {"Custom": 1}]}, "confirmationStatus": "confirmed"}]),
        )

    status = asyncio.run(_make_client(handler).get_signature_status("sig-1"))
    assert status.err == {"InstructionError": [0, {"Custom": 1}]}


def test_rpc_error_raises_ledger_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "error": {"code": -32005, "message": "busy"}})

    with pytest.raises(LedgerUnavailableError, match="busy"):
        asyncio.run(_make_client(handler).get_signature_status("sig-1"))


def test_transport_failure_raises_ledger_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(LedgerUnavailableError):
        asyncio.run(_make_client(handler).get_signature_status("sig-1"))


def _network_handler(results: dict):
    def handler(request: httpx.Request) -> httpx.Response:
        method = json.loads(request.content)["method"]
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": results[method]})

    return handler


def test_network_status_combines_version_epoch_and_blockhash():
    handler = _network_handler(
        {
            "getVersion": {"solana-core": "1.18.22", "feature-set": 3469865029},
            "getEpochInfo": {"epoch": 612, "absoluteSlot": 264601234, "slotIndex": 201234},
            "getLatestBlockhash": {"context": {"slot": 264601234}, "value": {"blockhash": "EkSnNWid2cvwEVnVx9aBqawnmiCNiDgp3gUdkDPTKN1N"}},
        }
    )

    status = asyncio.run(_make_client(handler).get_network_status())

    assert status.healthy is True
    assert status.version == "1.18.22"
    assert status.epoch == 612
    assert status.slot_height == 264601234


def test_network_status_without_blockhash_is_unhealthy():
    handler = _network_handler(
        {
            "getVersion": {},
            "getEpochInfo": {"epoch": 1, "absoluteSlot": 2},
            "getLatestBlockhash": {"value": {"blockhash": ""}},
        }
    )

    status = asyncio.run(_make_client(handler).get_network_status())

    assert status.healthy is False
    assert status.version is None


def test_network_status_with_malformed_epoch_info_raises():
    handler = _network_handler(
        {
            "getVersion": {"solana-core": "1.18.22"},
            "getEpochInfo": {"epoch": 1},
            "getLatestBlockhash": {"value": {"blockhash": "abc"}},
        }
    )

    with pytest.raises(LedgerUnavailableError):
        asyncio.run(_make_client(handler).get_network_status())
