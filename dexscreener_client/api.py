"""Операции клиента как самостоятельные функции.

Функции работают через общий ленивый DexScreenerClient. Если вызов пришёл из
нового event loop (например, повторный asyncio.run), HTTP-сессия клиента
пересоздаётся; close_client() закрывает её явно.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from .models import BoostedToken, MetricsRequest, Pair, TokenMetrics
from .services.client import DexScreenerClient
from .services.metrics import extract_socials, pair_to_metrics

_client: DexScreenerClient | None = None


def get_client() -> DexScreenerClient:
    """Возвращает синглтон DexScreenerClient с настройками по умолчанию."""

    global _client
    if _client is None:
        _client = DexScreenerClient()
    return _client


async def close_client() -> None:
    global _client
    if _client is not None:
        await _client.close()
        _client = None


async def search_token(query: str) -> Pair | None:
    return await get_client().search_token(query)


async def get_token_by_address(chain: str, address: str) -> Pair | None:
    return await get_client().get_token_by_address(chain, address)


async def get_token_metrics(ticker: str, chain: str | None = None) -> TokenMetrics | None:
    return await get_client().get_token_metrics(ticker, chain)


async def get_tokens_by_addresses(
    addresses: Sequence[str],
    chain_filter: str | None = None,
) -> dict[str, Pair]:
    return await get_client().get_tokens_by_addresses(addresses, chain_filter)


async def batch_get_metrics(
    requests: Iterable[MetricsRequest | Mapping[str, Any]],
) -> dict[str, TokenMetrics]:
    return await get_client().batch_get_metrics(requests)


async def get_boosted_tokens() -> list[BoostedToken]:
    return await get_client().get_boosted_tokens()


async def get_new_pairs(chain_id: str) -> list[Pair]:
    return await get_client().get_new_pairs(chain_id)


async def search_by_volume(query: str, min_volume_24h: float | None = None) -> list[Pair]:
    return await get_client().search_by_volume(query, min_volume_24h)


async def get_liquidity_pool_address(chain: str, token_address: str) -> str | None:
    return await get_client().get_liquidity_pool_address(chain, token_address)


async def get_all_liquidity_pool_addresses(chain: str, token_address: str) -> list[str]:
    return await get_client().get_all_liquidity_pool_addresses(chain, token_address)


__all__ = [
    "batch_get_metrics",
    "close_client",
    "extract_socials",
    "get_all_liquidity_pool_addresses",
    "get_boosted_tokens",
    "get_client",
    "get_liquidity_pool_address",
    "get_new_pairs",
    "get_token_by_address",
    "get_token_metrics",
    "get_tokens_by_addresses",
    "pair_to_metrics",
    "search_by_volume",
    "search_token",
]
