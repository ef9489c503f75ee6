"""Клиент DexScreener: поиск, lookup по адресу, метрики, батчи и discovery.

Все публичные операции работают по одной схеме: один HTTP запрос за раз,
любая ошибка транспорта, статуса или формы ответа логируется и превращается
в пустое значение (None, [] или {}). Кому нужна причина, вызывает *_result
варианты и получает Lookup со статусом.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Sequence

import aiohttp
from loguru import logger

from ..models import BoostedToken, MetricsRequest, Pair, TokenMetrics
from ..settings import DexScreenerSettings, get_settings
from ..utils.chains import normalize_chain
from ..utils.pacing import FixedDelayPacer, Pacer
from .http import DexScreenerHTTP, FetchResult, FetchStatus, ResponseShapeError
from .metrics import extract_socials, pair_to_metrics
from .selectors import (
    best_by_liquidity,
    chunked,
    filter_by_chain,
    filter_by_volume,
    group_by_base_token,
    parse_boosted,
    parse_pairs,
    sort_newest_first,
    unique_pair_addresses,
)


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    CHAIN_MISMATCH = "chain_mismatch"
    SYMBOL_MISMATCH = "symbol_mismatch"
    TRANSPORT_ERROR = "transport_error"
    HTTP_ERROR = "http_error"
    PARSE_ERROR = "parse_error"


_FETCH_TO_LOOKUP = {
    FetchStatus.TRANSPORT_ERROR: LookupStatus.TRANSPORT_ERROR,
    FetchStatus.HTTP_ERROR: LookupStatus.HTTP_ERROR,
    FetchStatus.PARSE_ERROR: LookupStatus.PARSE_ERROR,
}


@dataclass(slots=True)
class Lookup:
    """Результат одиночной операции вместе с причиной.

    CHAIN_MISMATCH несёт значение: пара из другой сети, отданная как fallback.
    """

    value: Any
    status: LookupStatus
    error: str | None = None

    @property
    def found(self) -> bool:
        return self.value is not None

    @classmethod
    def from_failure(cls, result: FetchResult) -> Lookup:
        return cls(None, _FETCH_TO_LOOKUP[result.status], result.error)


def _symbol_matches(pair: Pair, ticker: str) -> bool:
    return pair.base_token.symbol.upper() == ticker.upper()


class DexScreenerClient:
    """Фасад над операциями DexScreener с общей конфигурацией.

    Держит только настройки, HTTP-слой и пейсеры; состояния между вызовами нет.

    Пример::

        async with DexScreenerClient() as dex:
            bonk = await dex.search("BONK")
            pepe = await dex.get_metrics("PEPE", "ethereum")
    """

    def __init__(
        self,
        settings: DexScreenerSettings | None = None,
        *,
        http: DexScreenerHTTP | None = None,
        session: aiohttp.ClientSession | None = None,
        address_pacer: Pacer | None = None,
        metrics_pacer: Pacer | None = None,
    ) -> None:
        if settings is None:
            settings = http.settings if http is not None else get_settings()
        self._settings = settings
        self._http = http or DexScreenerHTTP(settings, session=session)
        pacing = settings.pacing
        self._address_pacer = address_pacer or FixedDelayPacer(pacing.address_batch_delay_sec)
        self._metrics_pacer = metrics_pacer or FixedDelayPacer(pacing.metrics_batch_delay_sec)

    @property
    def settings(self) -> DexScreenerSettings:
        return self._settings

    async def __aenter__(self) -> DexScreenerClient:
        await self._http.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.close()

    # ------------------------------------------------------------------
    # URL и загрузка
    # ------------------------------------------------------------------

    def _search_url(self) -> str:
        return f"{self._settings.base_url}/dex/search"

    def _tokens_url(self, addresses: Sequence[str]) -> str:
        return f"{self._settings.base_url}/dex/tokens/{','.join(addresses)}"

    def _pairs_url(self, chain_id: str) -> str:
        return f"{self._settings.base_url}/dex/pairs/{chain_id}"

    async def _fetch_pairs(self, url: str, params: Mapping[str, str] | None = None) -> FetchResult:
        """GET + разбор `pairs`; при успехе data — список Pair."""

        result = await self._http.get_json(url, params)
        if not result.ok:
            return result
        try:
            pairs = parse_pairs(result.data)
        except ResponseShapeError as exc:
            return FetchResult.failure(FetchStatus.PARSE_ERROR, str(exc), result.http_status)
        return FetchResult.success(pairs, result.http_status or 200)

    # ------------------------------------------------------------------
    # Одиночные операции
    # ------------------------------------------------------------------

    async def search_token_result(self, query: str) -> Lookup:
        result = await self._fetch_pairs(self._search_url(), {"q": query})
        if not result.ok:
            logger.warning(
                "DexScreener поиск {query} не удался ({status}): {error}",
                query=query,
                status=result.status.value,
                error=result.error,
            )
            return Lookup.from_failure(result)
        best = best_by_liquidity(result.data)
        if best is None:
            logger.debug("DexScreener поиск {query}: пар нет", query=query)
            return Lookup(None, LookupStatus.NOT_FOUND)
        return Lookup(best, LookupStatus.FOUND)

    async def search_token(self, query: str) -> Pair | None:
        """Поиск по тикеру или имени: самая ликвидная пара из выдачи."""

        return (await self.search_token_result(query)).value

    async def get_token_by_address_result(self, chain: str, address: str) -> Lookup:
        chain_id = normalize_chain(chain)
        result = await self._fetch_pairs(self._tokens_url([address]))
        if not result.ok:
            logger.warning(
                "DexScreener lookup {chain}:{address} не удался ({status}): {error}",
                chain=chain,
                address=address,
                status=result.status.value,
                error=result.error,
            )
            return Lookup.from_failure(result)
        pairs: list[Pair] = result.data
        if not pairs:
            return Lookup(None, LookupStatus.NOT_FOUND)
        candidates = filter_by_chain(pairs, chain_id) if chain_id else pairs
        if not candidates:
            logger.warning(
                "DexScreener: у {address} нет пар в сети {chain}, берём лучшую пару из всех сетей",
                address=address,
                chain=chain_id,
            )
            return Lookup(
                best_by_liquidity(pairs),
                LookupStatus.CHAIN_MISMATCH,
                f"no pairs on {chain_id}",
            )
        return Lookup(best_by_liquidity(candidates), LookupStatus.FOUND)

    async def get_token_by_address(self, chain: str, address: str) -> Pair | None:
        """Самая ликвидная пара токена в сети `chain`.

        Если в нужной сети пар нет, возвращается лучшая пара из любой сети:
        API иногда не отдаёт точное совпадение по сети.
        """

        return (await self.get_token_by_address_result(chain, address)).value

    async def get_token_metrics_result(self, ticker: str, chain: str | None = None) -> Lookup:
        query = f"{ticker} {chain}" if chain else ticker
        first = await self.search_token_result(query)
        if first.value is None:
            return first
        if _symbol_matches(first.value, ticker):
            return Lookup(pair_to_metrics(first.value), LookupStatus.FOUND)

        logger.debug(
            "DexScreener fuzzy-поиск {query} вернул {symbol}, повторяем по тикеру",
            query=query,
            symbol=first.value.base_token.symbol,
        )
        retry = await self.search_token_result(ticker)
        if retry.value is None and retry.status is not LookupStatus.NOT_FOUND:
            return retry
        if retry.value is None or not _symbol_matches(retry.value, ticker):
            return Lookup(None, LookupStatus.SYMBOL_MISMATCH, f"no pair with symbol {ticker.upper()}")
        return Lookup(pair_to_metrics(retry.value), LookupStatus.FOUND)

    async def get_token_metrics(self, ticker: str, chain: str | None = None) -> TokenMetrics | None:
        """Метрики токена по тикеру с проверкой символа (поиск DexScreener нечёткий)."""

        return (await self.get_token_metrics_result(ticker, chain)).value

    # ------------------------------------------------------------------
    # Батчи
    # ------------------------------------------------------------------

    async def get_tokens_by_addresses(
        self,
        addresses: Sequence[str],
        chain_filter: str | None = None,
    ) -> dict[str, Pair]:
        """Лучшая пара на каждый адрес, по 30 адресов в запросе.

        Упавший чанк пропускается, остальные доходят до результата.
        """

        results: dict[str, Pair] = {}
        if not addresses:
            return results

        chain_id = normalize_chain(chain_filter) if chain_filter else None
        chunks = chunked(list(addresses), self._settings.pacing.address_batch_size)
        for index, chunk in enumerate(chunks):
            if index:
                await self._address_pacer.wait()
            result = await self._fetch_pairs(self._tokens_url(chunk))
            if not result.ok:
                logger.warning(
                    "DexScreener батч {index}/{total} ({size} адресов) пропущен ({status}): {error}",
                    index=index + 1,
                    total=len(chunks),
                    size=len(chunk),
                    status=result.status.value,
                    error=result.error,
                )
                continue
            pairs: list[Pair] = result.data
            if chain_id:
                pairs = filter_by_chain(pairs, chain_id)
            for address, group in group_by_base_token(pairs).items():
                results[address] = best_by_liquidity(group)
        return results

    async def batch_get_metrics(
        self,
        requests: Iterable[MetricsRequest | Mapping[str, Any]],
    ) -> dict[str, TokenMetrics]:
        """Метрики по списку тикеров строго последовательно, с паузой после каждого."""

        results: dict[str, TokenMetrics] = {}
        for item in requests:
            request = MetricsRequest.coerce(item)
            if request.contract and request.chain:
                pair = await self.get_token_by_address(request.chain, request.contract)
                metrics = pair_to_metrics(pair) if pair else None
            else:
                metrics = await self.get_token_metrics(request.ticker, request.chain)
            if metrics is not None:
                results[request.ticker] = metrics
            else:
                logger.debug("DexScreener: метрики {ticker} не найдены", ticker=request.ticker)
            await self._metrics_pacer.wait()
        return results

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    async def get_boosted_tokens(self) -> list[BoostedToken]:
        url = self._settings.boosts_url
        result = await self._http.get_json(url)
        if not result.ok:
            logger.warning(
                "DexScreener boosted токены не получены ({status}): {error}",
                status=result.status.value,
                error=result.error,
            )
            return []
        try:
            return parse_boosted(result.data)
        except ResponseShapeError as exc:
            logger.warning("DexScreener boosted ответ не разобран: {error}", error=exc)
            return []

    async def get_new_pairs(self, chain_id: str) -> list[Pair]:
        """Пары сети, от новых к старым."""

        normalized = normalize_chain(chain_id)
        result = await self._fetch_pairs(self._pairs_url(normalized))
        if not result.ok:
            logger.warning(
                "DexScreener новые пары {chain} не получены ({status}): {error}",
                chain=chain_id,
                status=result.status.value,
                error=result.error,
            )
            return []
        return sort_newest_first(result.data)

    async def search_by_volume(self, query: str, min_volume_24h: float | None = None) -> list[Pair]:
        """Поиск с фильтром по объёму за 24ч (по умолчанию от $30k)."""

        if min_volume_24h is None:
            min_volume_24h = self._settings.search.default_min_volume_24h
        result = await self._fetch_pairs(self._search_url(), {"q": query})
        if not result.ok:
            logger.warning(
                "DexScreener поиск по объёму {query} не удался ({status}): {error}",
                query=query,
                status=result.status.value,
                error=result.error,
            )
            return []
        return filter_by_volume(result.data, min_volume_24h)

    # ------------------------------------------------------------------
    # Пулы ликвидности
    # ------------------------------------------------------------------

    async def get_liquidity_pool_address(self, chain: str, token_address: str) -> str | None:
        pair = await self.get_token_by_address(chain, token_address)
        if pair is None:
            return None
        return pair.pair_address or None

    async def get_all_liquidity_pool_addresses(self, chain: str, token_address: str) -> list[str]:
        """Все пулы токена в сети, без дублей, в порядке выдачи API."""

        chain_id = normalize_chain(chain)
        result = await self._fetch_pairs(self._tokens_url([token_address]))
        if not result.ok:
            logger.warning(
                "DexScreener LP адреса {address} не получены ({status}): {error}",
                address=token_address,
                status=result.status.value,
                error=result.error,
            )
            return []
        return unique_pair_addresses(filter_by_chain(result.data, chain_id))

    # ------------------------------------------------------------------
    # Чистые проекции и короткие алиасы
    # ------------------------------------------------------------------

    pair_to_metrics = staticmethod(pair_to_metrics)
    extract_socials = staticmethod(extract_socials)

    search = search_token
    get_by_address = get_token_by_address
    get_metrics = get_token_metrics
    get_boosted = get_boosted_tokens
    batch_get_by_addresses = get_tokens_by_addresses
    get_lp_address = get_liquidity_pool_address
    get_all_lp_addresses = get_all_liquidity_pool_addresses


__all__ = ["DexScreenerClient", "Lookup", "LookupStatus"]
