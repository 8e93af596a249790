from __future__ import annotations

from farmboard.domain.entities.confirmation import (
    TERMINAL_COMMITMENTS,
    ConfirmationState,
    SignatureStatus,
)


def classify_signature_status(status: SignatureStatus | None) -> ConfirmationState:
    if status is None:
        return "PENDING"
    if status.err is not None:
        return "FAILED"
    if status.confirmation_status in TERMINAL_COMMITMENTS:
        return "CONFIRMED"
    return "PENDING"
