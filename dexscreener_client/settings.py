"""Настройки клиента DexScreener.

Настройки разделены по доменам (HTTP API, пейсинг батчей, поиск), все значения
имеют дефолты, поэтому библиотека работает без единой переменной окружения.
При необходимости любое поле переопределяется через окружение
(`DEXSCREENER_API__REQUEST_TIMEOUT=10`) или явным экземпляром настроек.
"""

from __future__ import annotations

from pydantic import AnyHttpUrl, BaseModel, Field, PositiveFloat, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseModel):
    """Эндпоинты DexScreener и параметры HTTP."""

    base_url: AnyHttpUrl = Field(
        "https://api.dexscreener.com/latest",
        description="Корень search/tokens/pairs эндпоинтов",
    )
    boosts_url: AnyHttpUrl = Field(
        "https://api.dexscreener.com/token-boosts/top/v1",
        description="Эндпоинт продвигаемых (boosted) токенов",
    )
    request_timeout: PositiveFloat | None = Field(
        30.0, description="Таймаут одного запроса в секундах, None — без ограничения"
    )
    user_agent: str = "dexscreener-client/0.1"

    @field_validator("request_timeout", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PacingSettings(BaseModel):
    """Фиксированные паузы между последовательными запросами."""

    address_batch_size: PositiveInt = Field(30, description="Лимит адресов на один запрос")
    address_batch_delay_sec: float = Field(0.1, ge=0)
    metrics_batch_delay_sec: float = Field(0.25, ge=0)


class SearchSettings(BaseModel):
    """Параметры поисковых хелперов."""

    default_min_volume_24h: float = Field(30_000.0, ge=0)


class DexScreenerSettings(BaseSettings):
    """Главный контейнер настроек клиента."""

    model_config = SettingsConfigDict(
        env_prefix="DEXSCREENER_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    api: ApiSettings = ApiSettings()
    pacing: PacingSettings = PacingSettings()
    search: SearchSettings = SearchSettings()

    @property
    def base_url(self) -> str:
        return str(self.api.base_url).rstrip("/")

    @property
    def boosts_url(self) -> str:
        return str(self.api.boosts_url).rstrip("/")


_settings: DexScreenerSettings | None = None


def get_settings() -> DexScreenerSettings:
    """Возвращает единый экземпляр настроек.

    Окружение читается один раз за процесс, дальше отдаётся кэшированный объект.
    """

    global _settings
    if _settings is None:
        _settings = DexScreenerSettings()
    return _settings


__all__ = [
    "ApiSettings",
    "DexScreenerSettings",
    "PacingSettings",
    "SearchSettings",
    "get_settings",
]
