from __future__ import annotations

import json
import os
from dataclasses import dataclass
from decimal import Decimal

from dotenv import load_dotenv


load_dotenv()


SOLANA_PUBLIC_ENDPOINTS = {
    "mainnet-beta": "https://api.mainnet-beta.solana.com",
    "devnet": "https://api.devnet.solana.com",
}


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _json(name: str) -> dict:
    value = _env(name)
    if not value:
        return {}
    return json.loads(value)


@dataclass(frozen=True)
class Settings:
    market_data_api_base: str
    market_data_timeout_seconds: float
    market_data_max_retries: int
    pool_cache_ttl_ms: int
    pool_cache_max_entries: int
    pool_min_tvl_usd: Decimal
    solana_network: str
    solana_rpc_endpoint: str
    solana_rpc_timeout_seconds: float
    confirm_max_attempts: int
    confirm_retry_delay_ms: int
    postgres_dsn: str
    transaction_history_limit: int
    token_registry_overrides: dict


def get_settings() -> Settings:
    network = _env("SOLANA_NETWORK", "devnet")
    default_endpoint = SOLANA_PUBLIC_ENDPOINTS.get(network, SOLANA_PUBLIC_ENDPOINTS["devnet"])
    return Settings(
        market_data_api_base=_env("MARKET_DATA_API_BASE", "https://api-v3.raydium.io"),
        market_data_timeout_seconds=float(_env("MARKET_DATA_TIMEOUT_SECONDS", "10")),
        market_data_max_retries=int(_env("MARKET_DATA_MAX_RETRIES", "1")),
        pool_cache_ttl_ms=int(_env("POOL_CACHE_TTL_MS", "30000")),
        pool_cache_max_entries=int(_env("POOL_CACHE_MAX_ENTRIES", "256")),
        pool_min_tvl_usd=Decimal(_env("POOL_MIN_TVL_USD", "1000")),
        solana_network=network,
        solana_rpc_endpoint=_env("SOLANA_RPC_ENDPOINT", "") or default_endpoint,
        solana_rpc_timeout_seconds=float(_env("SOLANA_RPC_TIMEOUT_SECONDS", "10")),
        confirm_max_attempts=int(_env("CONFIRM_MAX_ATTEMPTS", "30")),
        confirm_retry_delay_ms=int(_env("CONFIRM_RETRY_DELAY_MS", "1000")),
        postgres_dsn=_env("POSTGRES_DSN", ""),
        transaction_history_limit=int(_env("TRANSACTION_HISTORY_LIMIT", "50")),
        token_registry_overrides=_json("TOKEN_REGISTRY_OVERRIDES"),
    )
