"""Themed guide pages: fixed filter + fixed sort over the whole collection."""

from dataclasses import dataclass
from typing import Callable

from config.site import GUIDES
from models.hotel import Hotel
from models.snapshot import SiteSnapshot
from render.environment import PageRenderer
from builder.pages import RenderedPage, hotel_grid


@dataclass(frozen=True)
class GuideRule:
    slug: str
    include: Callable[[Hotel], bool]
    sort_key: Callable[[Hotel], int]
    descending: bool = False


GUIDE_RULES: list[GuideRule] = [
    GuideRule(
        slug="budget-hotels-athens",
        include=lambda h: h.price_per_night < 80,
        sort_key=lambda h: h.price_per_night,
    ),
    GuideRule(
        slug="luxury-hotels-athens",
        include=lambda h: h.price_per_night >= 200,
        sort_key=lambda h: h.price_per_night,
        descending=True,
    ),
    GuideRule(
        slug="best-rooftop-bars-athens",
        include=lambda h: h.has_rooftop_bar,
        sort_key=lambda h: h.rooftop_rating or 0,
        descending=True,
    ),
]


def select_guide_hotels(hotels: list[Hotel], rule: GuideRule) -> list[Hotel]:
    """Filter then stable-sort; ties keep data-store order."""
    selected = [h for h in hotels if rule.include(h)]
    return sorted(selected, key=rule.sort_key, reverse=rule.descending)


def build_guide_page(
    rule: GuideRule, hotels: list[Hotel], renderer: PageRenderer
) -> RenderedPage:
    copy = GUIDES[rule.slug]
    content = renderer.render(
        "guide.html",
        heading=copy["heading"],
        subheading=copy["subheading"],
        intro=copy["intro"],
        hotels_grid=hotel_grid(select_guide_hotels(hotels, rule)),
    )
    html = renderer.wrap_in_layout(
        content, copy["title"], copy["description"], f"/{rule.slug}"
    )
    return RenderedPage(f"{rule.slug}.html", html)


def build_guide_pages(snapshot: SiteSnapshot, renderer: PageRenderer) -> list[RenderedPage]:
    return [build_guide_page(rule, snapshot.hotels, renderer) for rule in GUIDE_RULES]
