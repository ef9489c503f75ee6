"""HTTP-слой клиента DexScreener.

DexScreenerHTTP выполняет GET к публичным эндпоинтам и никогда не бросает
исключения наружу: транспортные ошибки, не-2xx статусы и битый JSON
сворачиваются в FetchResult с причиной, диагностика уходит в лог.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

import aiohttp
from loguru import logger

from ..settings import DexScreenerSettings, get_settings


class DexScreenerError(RuntimeError):
    """Базовое исключение клиента DexScreener."""


class ResponseShapeError(DexScreenerError):
    """JSON получен, но не совпадает с ожидаемой формой ответа."""


class FetchStatus(str, Enum):
    OK = "ok"
    TRANSPORT_ERROR = "transport_error"
    HTTP_ERROR = "http_error"
    PARSE_ERROR = "parse_error"


@dataclass(slots=True)
class FetchResult:
    """Итог одного HTTP запроса."""

    status: FetchStatus
    data: Any = None
    error: str | None = None
    http_status: int | None = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.OK

    @classmethod
    def success(cls, data: Any, http_status: int = 200) -> FetchResult:
        return cls(FetchStatus.OK, data=data, http_status=http_status)

    @classmethod
    def failure(
        cls,
        status: FetchStatus,
        error: str,
        http_status: int | None = None,
    ) -> FetchResult:
        return cls(status, error=error, http_status=http_status)


class DexScreenerHTTP:
    """Тонкая обёртка над aiohttp.ClientSession.

    Сессия создаётся лениво в первом запросе; переданную извне сессию
    клиент не закрывает.
    """

    def __init__(
        self,
        settings: DexScreenerSettings | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._session = session
        self._owns_session = session is None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._headers = {
            "Accept": "application/json",
            "User-Agent": self._settings.api.user_agent,
        }

    @property
    def settings(self) -> DexScreenerSettings:
        return self._settings

    async def __aenter__(self) -> DexScreenerHTTP:
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def start(self) -> None:
        """Создаёт HTTP-сессию, если её ещё нет.

        Своя сессия, открытая в другом (уже завершённом) event loop,
        отцепляется и заменяется новой: её соединения принадлежат старому
        loop и закрыть их из текущего нельзя.
        """

        loop = asyncio.get_running_loop()
        if (
            self._owns_session
            and self._session is not None
            and not self._session.closed
            and self._loop is not loop
        ):
            logger.debug("DexScreener HTTP-сессия из другого event loop сброшена")
            self._session.detach()
            self._session = None
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._settings.api.request_timeout),
            )
            self._owns_session = True
            self._loop = loop
            logger.debug("DexScreener HTTP-сессия открыта: {url}", url=self._settings.base_url)

    async def close(self) -> None:
        if self._owns_session and self._session and not self._session.closed:
            if self._loop is asyncio.get_running_loop():
                await self._session.close()
            else:
                self._session.detach()
        self._session = None if self._owns_session else self._session

    async def get_json(self, url: str, params: Mapping[str, str] | None = None) -> FetchResult:
        """GET с JSON `Accept`; результат всегда FetchResult."""

        await self.start()
        assert self._session is not None
        try:
            async with self._session.get(url, params=params, headers=self._headers) as resp:
                if not 200 <= resp.status < 300:
                    body = await resp.text(errors="replace")
                    logger.debug(
                        "DexScreener ответил HTTP {status} на {url}: {body}",
                        status=resp.status,
                        url=url,
                        body=body[:200],
                    )
                    return FetchResult.failure(
                        FetchStatus.HTTP_ERROR,
                        f"HTTP {resp.status}",
                        http_status=resp.status,
                    )
                raw = await resp.read()
                http_status = resp.status
        except asyncio.TimeoutError:
            logger.debug("DexScreener таймаут запроса {url}", url=url)
            return FetchResult.failure(FetchStatus.TRANSPORT_ERROR, "timeout")
        except aiohttp.ClientError as exc:
            logger.debug("DexScreener запрос {url} упал: {error}", url=url, error=exc)
            return FetchResult.failure(FetchStatus.TRANSPORT_ERROR, str(exc) or type(exc).__name__)

        try:
            text = raw.decode("utf-8-sig")
            data = json.loads(text) if text.strip() else None
        except (ValueError, RecursionError) as exc:
            # UnicodeDecodeError, JSONDecodeError и лимит длины int в json.loads: всё ValueError
            logger.debug("DexScreener вернул не-JSON с {url}: {error}", url=url, error=exc)
            return FetchResult.failure(FetchStatus.PARSE_ERROR, f"invalid JSON: {exc}", http_status)
        return FetchResult.success(data, http_status)


__all__ = [
    "DexScreenerError",
    "DexScreenerHTTP",
    "FetchResult",
    "FetchStatus",
    "ResponseShapeError",
]
