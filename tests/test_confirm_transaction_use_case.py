from __future__ import annotations

import asyncio

import pytest

from farmboard.application.use_cases.confirm_transaction import ConfirmTransactionUseCase
from farmboard.domain.entities.confirmation import SignatureStatus
from farmboard.domain.exceptions import LedgerUnavailableError
from farmboard.domain.services.confirmation import classify_signature_status


class ScriptedLedger:
    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = 0

    async def get_signature_status(self, signature: str):
        _ = signature
        self.calls += 1
        response = self._responses[min(self.calls, len(self._responses)) - 1]
        if isinstance(response, Exception):
            raise response
        return response


class RecordingSleep:
    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def _use_case(ledger, sleep, *, max_attempts: int = 30) -> ConfirmTransactionUseCase:
    return ConfirmTransactionUseCase(ledger_port=ledger, max_attempts=max_attempts, retry_delay_ms=1000, sleep=sleep)


def test_finalized_on_first_query_returns_true_without_waiting():
    ledger = ScriptedLedger([SignatureStatus(confirmation_status="finalized")])
    sleep = RecordingSleep()

    assert asyncio.run(_use_case(ledger, sleep).execute("sig")) is True
    assert ledger.calls == 1
    assert sleep.delays == []


def test_on_chain_error_returns_false_immediately():
    ledger = ScriptedLedger([SignatureStatus(confirmation_status="confirmed", err={"InstructionError": [0, "Custom"]})])
    sleep = RecordingSleep()

    assert asyncio.run(_use_case(ledger, sleep).execute("sig")) is False
    assert ledger.calls == 1


def test_confirms_after_pending_statuses():
    ledger = ScriptedLedger([None, SignatureStatus(confirmation_status="processed"), SignatureStatus(confirmation_status="confirmed")])
    sleep = RecordingSleep()

    assert asyncio.run(_use_case(ledger, sleep).execute("sig")) is True
    assert ledger.calls == 3
    assert sleep.delays == [1.0, 1.0]


def test_unresolved_signature_times_out_after_exact_attempts():
    ledger = ScriptedLedger([None])
    sleep = RecordingSleep()

    assert asyncio.run(_use_case(ledger, sleep, max_attempts=5).execute("sig")) is False
    assert ledger.calls == 5
    assert len(sleep.delays) == 4


def test_per_call_overrides():
    ledger = ScriptedLedger([None])
    sleep = RecordingSleep()

    assert asyncio.run(_use_case(ledger, sleep).execute("sig", max_attempts=2, retry_delay_ms=250)) is False
    assert ledger.calls == 2
    assert sleep.delays == [0.25]


def test_query_failures_are_retried():
    ledger = ScriptedLedger([LedgerUnavailableError("timeout"), SignatureStatus(confirmation_status="finalized")])
    sleep = RecordingSleep()

    assert asyncio.run(_use_case(ledger, sleep).execute("sig")) is True
    assert ledger.calls == 2


def test_cancellation_stops_polling():
    ledger = ScriptedLedger([None])

    async def run() -> None:
        use_case = ConfirmTransactionUseCase(ledger_port=ledger, max_attempts=100, retry_delay_ms=10_000)
        task = asyncio.create_task(use_case.execute("sig"))
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(run())
    assert ledger.calls == 1


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (None, "PENDING"),
        (SignatureStatus(confirmation_status="processed"), "PENDING"),
        (SignatureStatus(confirmation_status=None), "PENDING"),
        (SignatureStatus(confirmation_status="confirmed"), "CONFIRMED"),
        (SignatureStatus(confirmation_status="finalized"), "CONFIRMED"),
        (SignatureStatus(confirmation_status="processed", err="boom"), "FAILED"),
    ],
)
def test_classify_signature_status(status, expected):
    assert classify_signature_status(status) == expected
