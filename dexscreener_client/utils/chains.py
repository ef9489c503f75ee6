"""Нормализация идентификаторов сетей к slug-ам DexScreener."""

from __future__ import annotations

CHAIN_MAP: dict[str, str] = {
    "SOL": "solana",
    "ETH": "ethereum",
    "BASE": "base",
    "ARB": "arbitrum",
    "BSC": "bsc",
    "AVAX": "avalanche",
    "MATIC": "polygon",
    "FTM": "fantom",
    "OP": "optimism",
}


def normalize_chain(chain: str) -> str:
    """Короткий тикер (`SOL`, `eth`) -> slug; неизвестное значение проходит в lower-case."""

    return CHAIN_MAP.get(chain.upper(), chain.lower())


__all__ = ["CHAIN_MAP", "normalize_chain"]
