"""Сервисный слой: HTTP, разбор ответов, проекции и фасад клиента."""

from .client import DexScreenerClient, Lookup, LookupStatus
from .http import DexScreenerError, DexScreenerHTTP, FetchResult, FetchStatus, ResponseShapeError
from .metrics import extract_socials, pair_to_metrics

__all__ = [
    "DexScreenerClient",
    "DexScreenerError",
    "DexScreenerHTTP",
    "FetchResult",
    "FetchStatus",
    "Lookup",
    "LookupStatus",
    "ResponseShapeError",
    "extract_socials",
    "pair_to_metrics",
]
