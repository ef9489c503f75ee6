from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import pytest
from loguru import logger

from dexscreener_client.models import Pair
from dexscreener_client.services.client import DexScreenerClient
from dexscreener_client.services.http import FetchResult, FetchStatus
from dexscreener_client.settings import DexScreenerSettings

BASE_URL = "https://api.test/latest"
BOOSTS_URL = "https://api.test/token-boosts/top/v1"


def pair_data(
    *,
    symbol: str = "BONK",
    chain: str = "solana",
    pair_address: str = "PAIR1",
    base_address: str = "TOKEN1",
    liquidity: float | None = 1_000.0,
    volume_h24: float | None = 0.0,
    created_at: int | None = None,
    **extra: Any,
) -> dict[str, Any]:
    data: dict[str, Any] = {
        "chainId": chain,
        "dexId": "raydium",
        "url": f"https://dexscreener.com/{chain}/{pair_address.lower()}",
        "pairAddress": pair_address,
        "baseToken": {"address": base_address, "name": symbol.title(), "symbol": symbol},
        "quoteToken": {"address": "QUOTE", "name": "Wrapped SOL", "symbol": "SOL"},
        "priceNative": "0.0000001",
        "priceUsd": "0.00002",
        "volume": {"h24": volume_h24, "h6": 0, "h1": 0, "m5": 0},
        "liquidity": {"usd": liquidity, "base": 10, "quote": 20},
        "fdv": 1_500_000,
        "marketCap": 1_200_000,
    }
    if created_at is not None:
        data["pairCreatedAt"] = created_at
    data.update(extra)
    return data


def make_pair(**kwargs: Any) -> Pair:
    return Pair.model_validate(pair_data(**kwargs))


def pairs_payload(*pairs: dict[str, Any]) -> dict[str, Any]:
    return {"schemaVersion": "1.0.0", "pairs": list(pairs)}


def http_error(status: int = 500) -> FetchResult:
    return FetchResult.failure(FetchStatus.HTTP_ERROR, f"HTTP {status}", http_status=status)


def transport_error() -> FetchResult:
    return FetchResult.failure(FetchStatus.TRANSPORT_ERROR, "connection reset")


class FakeHTTP:
    """Скриптованный HTTP-слой: отдаёт ответы по очереди и пишет вызовы."""

    def __init__(self, settings: DexScreenerSettings, responses: list[Any]) -> None:
        self.settings = settings
        self.calls: list[tuple[str, dict[str, str] | None]] = []
        self._responses = list(responses)
        self.started = False
        self.closed = False

    async def start(self) -> None:
        self.started = True

    async def close(self) -> None:
        self.closed = True

    async def get_json(self, url: str, params=None) -> FetchResult:
        self.calls.append((url, dict(params) if params else None))
        if not self._responses:
            raise AssertionError(f"неожиданный запрос {url}")
        item = self._responses.pop(0)
        if isinstance(item, FetchResult):
            return item
        return FetchResult.success(item)

    @property
    def urls(self) -> list[str]:
        return [url for url, _ in self.calls]


class RecordingPacer:
    """Пейсер без сна: запоминает, сколько запросов было сделано к каждому wait()."""

    def __init__(self, http: FakeHTTP) -> None:
        self._http = http
        self.calls_at_wait: list[int] = []

    async def wait(self) -> None:
        self.calls_at_wait.append(len(self._http.calls))

    @property
    def waits(self) -> int:
        return len(self.calls_at_wait)


@dataclass
class Harness:
    client: DexScreenerClient
    http: FakeHTTP
    address_pacer: RecordingPacer
    metrics_pacer: RecordingPacer


@pytest.fixture
def settings() -> DexScreenerSettings:
    return DexScreenerSettings(api={"base_url": BASE_URL, "boosts_url": BOOSTS_URL})


@pytest.fixture
def harness(settings: DexScreenerSettings) -> Callable[..., Harness]:
    def build(*responses: Any) -> Harness:
        http = FakeHTTP(settings, list(responses))
        address_pacer = RecordingPacer(http)
        metrics_pacer = RecordingPacer(http)
        client = DexScreenerClient(
            settings,
            http=http,  # type: ignore[arg-type]
            address_pacer=address_pacer,
            metrics_pacer=metrics_pacer,
        )
        return Harness(client, http, address_pacer, metrics_pacer)

    return build


@dataclass
class LogSink:
    records: list[dict[str, Any]] = field(default_factory=list)

    def __call__(self, message) -> None:
        record = message.record
        self.records.append({"level": record["level"].name, "message": record["message"]})

    def levels(self) -> list[str]:
        return [record["level"] for record in self.records]


@pytest.fixture
def log_sink():
    sink = LogSink()
    handler_id = logger.add(sink, level="DEBUG")
    yield sink
    logger.remove(handler_id)
