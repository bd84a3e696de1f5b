"""Aggregate statistics for the consolidated hotel index.

Always derived in full from the hotel collection, never patched in place.
"""

import math
from collections import Counter
from datetime import date

from config.site import CURRENCY, TIER_RANGE_LABELS
from models.enums import PriceTier
from models.hotel import AggregateIndex, Hotel, PriceStats, TierStat
from render.fragments import price_tier


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (2.5 -> 3, not 2)."""
    return math.floor(value + 0.5)


def average_price(hotels: list[Hotel]) -> int:
    if not hotels:
        return 0
    return round_half_up(sum(h.price_per_night for h in hotels) / len(hotels))


def build_price_stats(hotels: list[Hotel]) -> PriceStats:
    counts = Counter(price_tier(h.price_per_night) for h in hotels)

    def stat(tier: PriceTier) -> TierStat:
        return TierStat(range=TIER_RANGE_LABELS[tier], count=counts.get(tier, 0))

    return PriceStats(
        budget=stat(PriceTier.BUDGET),
        mid_range=stat(PriceTier.MID),
        upscale=stat(PriceTier.UPSCALE),
        luxury=stat(PriceTier.LUXURY),
    )


def build_index(
    hotels: list[Hotel], last_updated: date, currency: str = CURRENCY
) -> AggregateIndex:
    return AggregateIndex(
        last_updated=last_updated,
        currency=currency,
        total_hotels=len(hotels),
        avg_price=average_price(hotels),
        price_stats=build_price_stats(hotels),
        hotels=list(hotels),
    )


def stats_match(stored: AggregateIndex, derived: AggregateIndex) -> bool:
    return (
        stored.total_hotels == derived.total_hotels
        and stored.avg_price == derived.avg_price
        and stored.price_stats == derived.price_stats
    )
