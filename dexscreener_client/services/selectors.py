"""Разбор ответов и выбор пар (ликвидность, сеть, объём, новизна)."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from pydantic import ValidationError

from ..models import BoostedToken, BoostedTokenList, Pair, PairsResponse
from .http import ResponseShapeError


def parse_pairs(data: Any) -> list[Pair]:
    """Объект `{"pairs": [...]}` -> список Pair; null и пропуск дают []."""

    if data is None:
        return []
    if not isinstance(data, dict):
        raise ResponseShapeError(f"ожидался объект с pairs, получен {type(data).__name__}")
    try:
        return PairsResponse.model_validate(data).pairs
    except ValidationError as exc:
        raise ResponseShapeError(f"pairs не прошли валидацию: {exc.error_count()} ошибок") from exc


def parse_boosted(data: Any) -> list[BoostedToken]:
    """Голый массив boosted токенов; null даёт []."""

    if data is None:
        return []
    if not isinstance(data, list):
        raise ResponseShapeError(f"ожидался массив, получен {type(data).__name__}")
    try:
        return BoostedTokenList.validate_python(data)
    except ValidationError as exc:
        raise ResponseShapeError(f"boosted токены не прошли валидацию: {exc.error_count()} ошибок") from exc


def best_by_liquidity(pairs: Sequence[Pair]) -> Pair | None:
    """Пара с максимальной liquidity.usd; при равенстве остаётся первая."""

    best: Pair | None = None
    for pair in pairs:
        if best is None or pair.liquidity_usd > best.liquidity_usd:
            best = pair
    return best


def filter_by_chain(pairs: Iterable[Pair], chain_id: str) -> list[Pair]:
    return [pair for pair in pairs if pair.chain_id == chain_id]


def group_by_base_token(pairs: Iterable[Pair]) -> dict[str, list[Pair]]:
    grouped: dict[str, list[Pair]] = {}
    for pair in pairs:
        grouped.setdefault(pair.base_token.address, []).append(pair)
    return grouped


def sort_newest_first(pairs: Iterable[Pair]) -> list[Pair]:
    return sorted(pairs, key=lambda pair: pair.created_at_ms, reverse=True)


def filter_by_volume(pairs: Iterable[Pair], min_volume_24h: float) -> list[Pair]:
    """Пары с объёмом за 24ч >= порога, по убыванию объёма."""

    qualifying = [pair for pair in pairs if pair.volume.h24 >= min_volume_24h]
    qualifying.sort(key=lambda pair: pair.volume.h24, reverse=True)
    return qualifying


def unique_pair_addresses(pairs: Iterable[Pair]) -> list[str]:
    """Адреса пар без дублей в порядке первого появления."""

    return list(dict.fromkeys(pair.pair_address for pair in pairs))


def chunked(items: Sequence[str], size: int) -> list[list[str]]:
    return [list(items[start : start + size]) for start in range(0, len(items), size)]


__all__ = [
    "best_by_liquidity",
    "chunked",
    "filter_by_chain",
    "filter_by_volume",
    "group_by_base_token",
    "parse_boosted",
    "parse_pairs",
    "sort_newest_first",
    "unique_pair_addresses",
]
