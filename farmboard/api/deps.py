from __future__ import annotations

from functools import lru_cache

from fastapi import HTTPException

from farmboard.application.use_cases.confirm_transaction import ConfirmTransactionUseCase
from farmboard.application.use_cases.get_network_status import GetNetworkStatusUseCase
from farmboard.application.use_cases.get_pool import GetPoolUseCase
from farmboard.application.use_cases.get_token_prices import GetTokenPricesUseCase
from farmboard.application.use_cases.list_pools import ListPoolsUseCase
from farmboard.application.use_cases.quote_deposit import QuoteDepositUseCase
from farmboard.application.use_cases.quote_withdraw import QuoteWithdrawUseCase
from farmboard.application.use_cases.refresh_pools import RefreshPoolsUseCase
from farmboard.application.use_cases.transactions import (
    ListTransactionsUseCase,
    RecordTransactionUseCase,
    TrackTransactionUseCase,
    UpdateTransactionStatusUseCase,
)
from farmboard.domain.services.token_registry import TokenRegistry
from farmboard.infrastructure.cache.expiring_cache import ExpiringCache
from farmboard.infrastructure.clients.market_data_client import (
    MarketDataClient,
    MarketDataClientSettings,
)
from farmboard.infrastructure.clients.solana_rpc_client import (
    SolanaRpcClient,
    SolanaRpcClientSettings,
)
from farmboard.infrastructure.db.engine import create_schema, get_engine, get_session_factory
from farmboard.infrastructure.db.repositories.transaction_record_repository import (
    SqlTransactionRecordRepository,
)
from farmboard.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_market_cache() -> ExpiringCache:
    settings = get_settings()
    return ExpiringCache(
        ttl_ms=settings.pool_cache_ttl_ms,
        max_entries=settings.pool_cache_max_entries,
    )


@lru_cache(maxsize=1)
def _get_token_registry() -> TokenRegistry:
    settings = get_settings()
    return TokenRegistry.with_overrides(settings.token_registry_overrides)


@lru_cache(maxsize=1)
def _get_market_data_client() -> MarketDataClient:
    settings = get_settings()
    return MarketDataClient(
        MarketDataClientSettings(
            api_base=settings.market_data_api_base,
            timeout_seconds=settings.market_data_timeout_seconds,
            max_retries=settings.market_data_max_retries,
        )
    )


@lru_cache(maxsize=1)
def _get_solana_rpc_client() -> SolanaRpcClient:
    settings = get_settings()
    return SolanaRpcClient(
        SolanaRpcClientSettings(
            endpoint=settings.solana_rpc_endpoint,
            timeout_seconds=settings.solana_rpc_timeout_seconds,
        )
    )


@lru_cache(maxsize=1)
def _get_schema_ready_session_factory(dsn: str):
    create_schema(get_engine(dsn))
    return get_session_factory(dsn)


def _get_transaction_repository() -> SqlTransactionRecordRepository:
    settings = get_settings()
    if not settings.postgres_dsn:
        raise HTTPException(status_code=500, detail="POSTGRES_DSN is required.")
    return SqlTransactionRecordRepository(_get_schema_ready_session_factory(settings.postgres_dsn))


def get_refresh_pools_use_case() -> RefreshPoolsUseCase:
    settings = get_settings()
    return RefreshPoolsUseCase(
        market_data_port=_get_market_data_client(),
        cache=_get_market_cache(),
        token_registry=_get_token_registry(),
        min_tvl_usd=settings.pool_min_tvl_usd,
    )


def get_list_pools_use_case() -> ListPoolsUseCase:
    return ListPoolsUseCase(refresh_pools=get_refresh_pools_use_case())


def get_get_pool_use_case() -> GetPoolUseCase:
    return GetPoolUseCase(
        market_data_port=_get_market_data_client(),
        token_registry=_get_token_registry(),
    )


def get_token_prices_use_case() -> GetTokenPricesUseCase:
    return GetTokenPricesUseCase(
        market_data_port=_get_market_data_client(),
        cache=_get_market_cache(),
        token_registry=_get_token_registry(),
    )


def get_quote_deposit_use_case() -> QuoteDepositUseCase:
    return QuoteDepositUseCase(refresh_pools=get_refresh_pools_use_case())


def get_quote_withdraw_use_case() -> QuoteWithdrawUseCase:
    return QuoteWithdrawUseCase()


def get_confirm_transaction_use_case() -> ConfirmTransactionUseCase:
    settings = get_settings()
    return ConfirmTransactionUseCase(
        ledger_port=_get_solana_rpc_client(),
        max_attempts=settings.confirm_max_attempts,
        retry_delay_ms=settings.confirm_retry_delay_ms,
    )


def get_network_status_use_case() -> GetNetworkStatusUseCase:
    return GetNetworkStatusUseCase(ledger_port=_get_solana_rpc_client())


def get_record_transaction_use_case() -> RecordTransactionUseCase:
    return RecordTransactionUseCase(transaction_port=_get_transaction_repository())


def get_list_transactions_use_case() -> ListTransactionsUseCase:
    settings = get_settings()
    return ListTransactionsUseCase(
        transaction_port=_get_transaction_repository(),
        limit=settings.transaction_history_limit,
    )


def get_update_transaction_status_use_case() -> UpdateTransactionStatusUseCase:
    return UpdateTransactionStatusUseCase(transaction_port=_get_transaction_repository())


def get_track_transaction_use_case() -> TrackTransactionUseCase:
    return TrackTransactionUseCase(
        transaction_port=_get_transaction_repository(),
        confirm_transaction=get_confirm_transaction_use_case(),
    )
