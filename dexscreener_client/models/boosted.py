"""Продвигаемые (boosted) токены."""

from __future__ import annotations

from typing import Any

from pydantic import Field, TypeAdapter, field_validator

from .base import ApiModel


class BoostLink(ApiModel):
    type: str | None = None
    label: str | None = None
    url: str | None = None


class BoostedToken(ApiModel):
    """Токен, видимость которого оплачена на DexScreener."""

    url: str = ""
    chain_id: str = Field(default="", alias="chainId")
    token_address: str = Field(default="", alias="tokenAddress")
    icon: str | None = None
    description: str | None = None
    links: list[BoostLink] = Field(default_factory=list)
    amount: float = 0.0
    total_amount: float = Field(default=0.0, alias="totalAmount")

    @field_validator("links", mode="before")
    @classmethod
    def _none_to_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("amount", "total_amount", mode="before")
    @classmethod
    def _none_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


BoostedTokenList = TypeAdapter(list[BoostedToken])


__all__ = ["BoostLink", "BoostedToken", "BoostedTokenList"]
