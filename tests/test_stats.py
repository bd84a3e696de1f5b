"""Tests for the derived aggregate index."""

from datetime import date

from store.stats import average_price, build_index, round_half_up, stats_match

from conftest import make_hotel


def _hotels(*prices):
    return [make_hotel(f"Hotel {i}", price_per_night=p) for i, p in enumerate(prices)]


class TestRoundHalfUp:
    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4

    def test_below_half(self):
        assert round_half_up(80.4) == 80


class TestAveragePrice:
    def test_rounded_mean(self):
        assert average_price(_hotels(100, 101)) == 101  # 100.5 rounds up

    def test_empty(self):
        assert average_price([]) == 0


class TestBuildIndex:
    def test_counts_partition_total(self):
        index = build_index(_hotels(35, 79, 80, 149, 150, 249, 250, 450), date(2026, 5, 1))
        stats = index.price_stats
        assert index.total_hotels == 8
        assert stats.budget.count == 2
        assert stats.mid_range.count == 2
        assert stats.upscale.count == 2
        assert stats.luxury.count == 2
        total = stats.budget.count + stats.mid_range.count + stats.upscale.count + stats.luxury.count
        assert total == index.total_hotels

    def test_avg_price(self):
        index = build_index(_hotels(280, 95, 180), date(2026, 5, 1))
        assert index.avg_price == 185

    def test_labels_and_currency(self):
        index = build_index(_hotels(100), date(2026, 5, 1))
        assert index.currency == "EUR"
        assert index.price_stats.budget.range == "Under €80"
        assert index.price_stats.luxury.range == "€250+"

    def test_serializes_camel_case(self):
        data = build_index(_hotels(100), date(2026, 5, 1)).model_dump(mode="json", by_alias=True)
        assert data["lastUpdated"] == "2026-05-01"
        assert data["totalHotels"] == 1
        assert data["priceStats"]["midRange"]["count"] == 1
        assert data["hotels"][0]["pricePerNight"] == 100

    def test_stats_match(self):
        hotels = _hotels(100, 200)
        a = build_index(hotels, date(2026, 5, 1))
        b = build_index(hotels, date(2026, 6, 1))
        c = build_index(hotels[:1], date(2026, 5, 1))
        assert stats_match(a, b)
        assert not stats_match(a, c)
