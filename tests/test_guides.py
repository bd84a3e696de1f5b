"""Tests for guide page filters and sort orders."""

from builder.guides import GUIDE_RULES, build_guide_pages, select_guide_hotels

from conftest import make_hotel

RULES = {rule.slug: rule for rule in GUIDE_RULES}


class TestBudgetGuide:
    def test_under_80_ascending(self, athens_snapshot):
        hotels = select_guide_hotels(athens_snapshot.hotels, RULES["budget-hotels-athens"])
        assert [h.price_per_night for h in hotels] == [55, 79]

    def test_80_excluded(self):
        hotels = [make_hotel("A", price_per_night=80), make_hotel("B", price_per_night=79)]
        selected = select_guide_hotels(hotels, RULES["budget-hotels-athens"])
        assert [h.name for h in selected] == ["B"]


class TestLuxuryGuide:
    def test_200_and_up_descending(self, athens_snapshot):
        hotels = select_guide_hotels(athens_snapshot.hotels, RULES["luxury-hotels-athens"])
        assert [h.price_per_night for h in hotels] == [280, 200]


class TestRooftopGuide:
    def test_sorted_by_rating_missing_last(self, athens_snapshot):
        hotels = select_guide_hotels(athens_snapshot.hotels, RULES["best-rooftop-bars-athens"])
        assert [h.name for h in hotels] == ["Electra Palace", "Ava Suites", "Herodion", "Pallas Athena"]

    def test_ties_keep_store_order(self):
        hotels = [
            make_hotel("First", has_rooftop_bar=True, rooftop_rating=4),
            make_hotel("Second", has_rooftop_bar=True, rooftop_rating=4),
            make_hotel("Top", has_rooftop_bar=True, rooftop_rating=5),
        ]
        selected = select_guide_hotels(hotels, RULES["best-rooftop-bars-athens"])
        assert [h.name for h in selected] == ["Top", "First", "Second"]


class TestGuidePages:
    def test_three_pages(self, athens_snapshot, renderer):
        pages = build_guide_pages(athens_snapshot, renderer)
        assert [p.path for p in pages] == [
            "budget-hotels-athens.html",
            "luxury-hotels-athens.html",
            "best-rooftop-bars-athens.html",
        ]

    def test_budget_page_content(self, athens_snapshot, renderer):
        page = build_guide_pages(athens_snapshot, renderer)[0]
        assert "<h1>Budget Hotels in Athens</h1>" in page.html
        assert "Great stays under €80/night" in page.html
        assert "/hotel/marble-house-athens" in page.html
        assert "/hotel/electra-palace-athens" not in page.html
        assert page.html.index("marble-house") < page.html.index("philippos")
