"""Торговая пара DexScreener и вложенные блоки."""

from __future__ import annotations

import math
from typing import Any

from pydantic import Field, field_validator

from .base import ApiModel, ZeroFilledModel


def parse_decimal(value: str | float | None) -> float:
    """Десятичная строка API -> float, всё нечисловое даёт 0.0."""

    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


class TokenRef(ApiModel):
    address: str = ""
    name: str = ""
    symbol: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class TxnCount(ZeroFilledModel):
    buys: int = 0
    sells: int = 0


class PairTxns(ApiModel):
    m5: TxnCount = Field(default_factory=TxnCount)
    h1: TxnCount = Field(default_factory=TxnCount)
    h6: TxnCount = Field(default_factory=TxnCount)
    h24: TxnCount = Field(default_factory=TxnCount)

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class WindowValues(ZeroFilledModel):
    """Значения по окнам 5м / 1ч / 6ч / 24ч (объём или изменение цены)."""

    m5: float = 0.0
    h1: float = 0.0
    h6: float = 0.0
    h24: float = 0.0


class Liquidity(ZeroFilledModel):
    usd: float = 0.0
    base: float = 0.0
    quote: float = 0.0


class Website(ApiModel):
    label: str | None = None
    url: str | None = None


class Social(ApiModel):
    type: str = ""
    url: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _none_to_blank(cls, value: Any) -> Any:
        return "" if value is None else value


class PairInfo(ApiModel):
    image_url: str | None = Field(default=None, alias="imageUrl")
    websites: list[Website] = Field(default_factory=list)
    socials: list[Social] = Field(default_factory=list)

    @field_validator("websites", "socials", mode="before")
    @classmethod
    def _none_to_list(cls, value: Any) -> Any:
        return [] if value is None else value


class Pair(ApiModel):
    """Одна торговая пара (base/quote) на одной DEX одной сети."""

    chain_id: str = Field(default="", alias="chainId")
    dex_id: str = Field(default="", alias="dexId")
    url: str = ""
    pair_address: str = Field(default="", alias="pairAddress")
    base_token: TokenRef = Field(default_factory=TokenRef, alias="baseToken")
    quote_token: TokenRef = Field(default_factory=TokenRef, alias="quoteToken")
    price_native: str | None = Field(default=None, alias="priceNative")
    price_usd: str | None = Field(default=None, alias="priceUsd")
    txns: PairTxns = Field(default_factory=PairTxns)
    volume: WindowValues = Field(default_factory=WindowValues)
    price_change: WindowValues = Field(default_factory=WindowValues, alias="priceChange")
    liquidity: Liquidity = Field(default_factory=Liquidity)
    fdv: float | None = None
    market_cap: float | None = Field(default=None, alias="marketCap")
    pair_created_at: int | None = Field(default=None, alias="pairCreatedAt")
    info: PairInfo | None = None

    @field_validator(
        "base_token", "quote_token", "txns", "volume", "price_change", "liquidity", mode="before"
    )
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("chain_id", "dex_id", "url", "pair_address", mode="before")
    @classmethod
    def _none_to_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("price_native", "price_usd", mode="before")
    @classmethod
    def _number_to_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def price_usd_value(self) -> float:
        return parse_decimal(self.price_usd)

    @property
    def price_native_value(self) -> float:
        return parse_decimal(self.price_native)

    @property
    def liquidity_usd(self) -> float:
        return self.liquidity.usd

    @property
    def created_at_ms(self) -> int:
        return self.pair_created_at or 0


class PairsResponse(ApiModel):
    """Ответ search/tokens/pairs эндпоинтов: объект с массивом `pairs`."""

    pairs: list[Pair] = Field(default_factory=list)

    @field_validator("pairs", mode="before")
    @classmethod
    def _none_to_list(cls, value: Any) -> Any:
        return [] if value is None else value


__all__ = [
    "Liquidity",
    "Pair",
    "PairInfo",
    "PairTxns",
    "PairsResponse",
    "Social",
    "TokenRef",
    "TxnCount",
    "Website",
    "WindowValues",
    "parse_decimal",
]
