"""Вспомогательные утилиты: сети и пейсинг."""

from .chains import CHAIN_MAP, normalize_chain
from .pacing import FixedDelayPacer, NoopPacer, Pacer, TokenBucketPacer

__all__ = [
    "CHAIN_MAP",
    "FixedDelayPacer",
    "NoopPacer",
    "Pacer",
    "TokenBucketPacer",
    "normalize_chain",
]
