"""Базовые примеси для моделей ответов DexScreener."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ApiModel(BaseModel):
    """Неизменяемая запись API: принимает camelCase и snake_case ключи."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ZeroFilledModel(ApiModel):
    """Числовой блок API, где null и пропуски превращаются в 0."""

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


__all__ = ["ApiModel", "ZeroFilledModel", "utcnow"]
