"""Типизированные записи API и производные проекции."""

from .base import ApiModel, utcnow
from .boosted import BoostedToken, BoostedTokenList, BoostLink
from .metrics import MetricsRequest, TokenMetrics, TokenSocials
from .pair import (
    Liquidity,
    Pair,
    PairInfo,
    PairsResponse,
    PairTxns,
    Social,
    TokenRef,
    TxnCount,
    Website,
    WindowValues,
    parse_decimal,
)

__all__ = [
    "ApiModel",
    "BoostLink",
    "BoostedToken",
    "BoostedTokenList",
    "Liquidity",
    "MetricsRequest",
    "Pair",
    "PairInfo",
    "PairTxns",
    "PairsResponse",
    "Social",
    "TokenMetrics",
    "TokenRef",
    "TokenSocials",
    "TxnCount",
    "Website",
    "WindowValues",
    "parse_decimal",
    "utcnow",
]
