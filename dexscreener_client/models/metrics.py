"""Производные записи: плоские метрики, соцсети, запросы батча."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from .base import utcnow


@dataclass(slots=True)
class TokenMetrics:
    """Упрощённая проекция пары для отображения и скоринга."""

    ticker: str
    name: str
    chain: str
    contract: str
    price_usd: float
    price_change_24h: float
    volume_24h: float
    liquidity: float
    market_cap: float
    fdv: float
    pair_url: str
    dex: str
    image_url: str | None = None
    fetched_at: datetime = field(default_factory=utcnow)

    def as_dict(self) -> dict[str, Any]:
        return {
            "ticker": self.ticker,
            "name": self.name,
            "chain": self.chain,
            "contract": self.contract,
            "price_usd": self.price_usd,
            "price_change_24h": self.price_change_24h,
            "volume_24h": self.volume_24h,
            "liquidity": self.liquidity,
            "market_cap": self.market_cap,
            "fdv": self.fdv,
            "pair_url": self.pair_url,
            "dex": self.dex,
            "image_url": self.image_url,
            "fetched_at": self.fetched_at.isoformat(),
        }


@dataclass(slots=True)
class TokenSocials:
    twitter: str | None = None
    telegram: str | None = None
    discord: str | None = None
    website: str | None = None


@dataclass(slots=True)
class MetricsRequest:
    """Элемент batch_get_metrics: тикер и, опционально, сеть и контракт."""

    ticker: str
    chain: str | None = None
    contract: str | None = None

    @classmethod
    def coerce(cls, item: MetricsRequest | Mapping[str, Any]) -> MetricsRequest:
        if isinstance(item, cls):
            return item
        return cls(
            ticker=item["ticker"],
            chain=item.get("chain"),
            contract=item.get("contract"),
        )


__all__ = ["MetricsRequest", "TokenMetrics", "TokenSocials"]
