from __future__ import annotations

from farmboard.domain.entities.validation import ValidationFailure


class DomainError(Exception):
    """Base for domain errors."""


class PoolNotFoundError(DomainError):
    """Requested pool is not in the current pool snapshot."""


class DepositAmountError(DomainError):
    """Deposit amount cannot be converted against the pool price."""


class InvalidSlippageError(DomainError):
    """Slippage tolerance outside (0, 1]."""


class InvalidPercentageError(DomainError):
    """Withdraw percentage outside (0, 100]."""

    def __init__(self, failure: ValidationFailure):
        super().__init__(failure.message)
        self.failure = failure


class TransactionInputError(DomainError):
    """Invalid parameters for a transaction record."""


class TransactionNotFoundError(DomainError):
    """Transaction record does not exist."""


class PoolQueryInputError(DomainError):
    """Unsupported search or sort parameters for the pool list."""


class MarketDataUnavailableError(DomainError):
    """Market-data service failed or answered with an unreadable payload."""


class LedgerUnavailableError(DomainError):
    """Ledger status query failed."""
