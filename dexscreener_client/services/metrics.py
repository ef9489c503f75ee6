"""Проекции пары: плоские метрики и ссылки на соцсети."""

from __future__ import annotations

from ..models import Pair, TokenMetrics, TokenSocials, utcnow

_SOCIAL_KINDS = ("twitter", "telegram", "discord")


def pair_to_metrics(pair: Pair) -> TokenMetrics:
    """Пара -> TokenMetrics. Отсутствующие числа дают 0, market cap падает на FDV."""

    fdv = pair.fdv or 0.0
    return TokenMetrics(
        ticker=pair.base_token.symbol,
        name=pair.base_token.name,
        chain=pair.chain_id.upper(),
        contract=pair.base_token.address,
        price_usd=pair.price_usd_value,
        price_change_24h=pair.price_change.h24,
        volume_24h=pair.volume.h24,
        liquidity=pair.liquidity.usd,
        market_cap=pair.market_cap or fdv,
        fdv=fdv,
        pair_url=pair.url,
        dex=pair.dex_id,
        image_url=pair.info.image_url if pair.info else None,
        fetched_at=utcnow(),
    )


def extract_socials(pair: Pair) -> TokenSocials:
    socials = TokenSocials()
    if pair.info is None:
        return socials
    for social in pair.info.socials:
        kind = social.type.lower()
        if kind in _SOCIAL_KINDS:
            setattr(socials, kind, social.url)
    if pair.info.websites and pair.info.websites[0].url:
        socials.website = pair.info.websites[0].url
    return socials


__all__ = ["extract_socials", "pair_to_metrics"]
