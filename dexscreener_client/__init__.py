"""Асинхронный клиент DexScreener: цены, пары и ликвидность по многим сетям."""

from .api import (
    batch_get_metrics,
    close_client,
    get_all_liquidity_pool_addresses,
    get_boosted_tokens,
    get_client,
    get_liquidity_pool_address,
    get_new_pairs,
    get_token_by_address,
    get_token_metrics,
    get_tokens_by_addresses,
    search_by_volume,
    search_token,
)
from .logging_config import setup_logging
from .models import BoostedToken, MetricsRequest, Pair, TokenMetrics, TokenSocials
from .services import (
    DexScreenerClient,
    DexScreenerError,
    DexScreenerHTTP,
    FetchResult,
    FetchStatus,
    Lookup,
    LookupStatus,
    extract_socials,
    pair_to_metrics,
)
from .settings import DexScreenerSettings, get_settings
from .utils import CHAIN_MAP, FixedDelayPacer, NoopPacer, Pacer, TokenBucketPacer, normalize_chain

DexScreener = DexScreenerClient

__all__ = [
    "CHAIN_MAP",
    "BoostedToken",
    "DexScreener",
    "DexScreenerClient",
    "DexScreenerError",
    "DexScreenerHTTP",
    "DexScreenerSettings",
    "FetchResult",
    "FetchStatus",
    "FixedDelayPacer",
    "Lookup",
    "LookupStatus",
    "MetricsRequest",
    "NoopPacer",
    "Pacer",
    "Pair",
    "TokenBucketPacer",
    "TokenMetrics",
    "TokenSocials",
    "batch_get_metrics",
    "close_client",
    "extract_socials",
    "get_all_liquidity_pool_addresses",
    "get_boosted_tokens",
    "get_client",
    "get_liquidity_pool_address",
    "get_new_pairs",
    "get_settings",
    "get_token_by_address",
    "get_token_metrics",
    "get_tokens_by_addresses",
    "normalize_chain",
    "pair_to_metrics",
    "search_by_volume",
    "search_token",
    "setup_logging",
]
