"""HTML fragments shared across pages: cards, badges, star strings.

Every function here is a pure function of its record. Values are escaped
through ``Markup.format`` so curated text can never inject markup.
"""

from markupsafe import Markup

from config.site import TIER_THRESHOLDS
from models.enums import PriceTier
from models.hotel import Hotel
from models.neighborhood import Neighborhood

FILLED_STAR = "★"
EMPTY_STAR = "☆"
MAX_STARS = 5

VIEW_BADGE = Markup('<span class="badge badge-view">🏛️ Acropolis View</span>')
ROOFTOP_BADGE = Markup('<span class="badge badge-rooftop">🍸 Rooftop Bar</span>')

HOTEL_CARD = Markup("""
    <a href="/hotel/{slug}" class="hotel-card" data-tier="{tier}" data-view="{view}">
      <div class="hotel-card-image">🏨</div>
      <div class="hotel-card-content">
        <h3>{name}</h3>
        <div class="hotel-card-meta">
          <span>{stars}</span>
          <span>•</span>
          <span>{neighborhood}</span>
        </div>
        <div class="hotel-card-badges">{badges}</div>
        <div class="hotel-card-price">
          <span class="from">from</span>
          <span class="price">€{price}</span>
          <span class="per">/night</span>
        </div>
      </div>
    </a>
  """)

NEIGHBORHOOD_CARD = Markup("""
    <a href="/athens-hotels/{id}" class="neighborhood-card">
      <span class="emoji">{emoji}</span>
      <h3>{name}</h3>
      <p class="price">from €{avg_price}/night</p>
      <p class="walk">{walk} to Acropolis</p>
    </a>
  """)


def star_glyphs(rating: int) -> str:
    """Five-character star string, e.g. 3 -> '★★★☆☆'."""
    if not 0 <= rating <= MAX_STARS:
        raise ValueError(f"Star rating must be between 0 and {MAX_STARS}, got {rating}")
    return FILLED_STAR * rating + EMPTY_STAR * (MAX_STARS - rating)


def price_tier(price: int) -> PriceTier:
    """Map a nightly price to its tier. Boundary prices belong to the upper tier."""
    for lower_bound, tier in TIER_THRESHOLDS:
        if price >= lower_bound:
            return tier
    return PriceTier.BUDGET


def hotel_badges(hotel: Hotel) -> Markup:
    badges = []
    if hotel.has_acropolis_view:
        badges.append(VIEW_BADGE)
    if hotel.has_rooftop_bar:
        badges.append(ROOFTOP_BADGE)
    return Markup("").join(badges)


def hotel_card(hotel: Hotel) -> Markup:
    return HOTEL_CARD.format(
        slug=hotel.slug,
        tier=price_tier(hotel.price_per_night).value,
        view="true" if hotel.has_acropolis_view else "false",
        name=hotel.name,
        stars=star_glyphs(hotel.star_rating),
        neighborhood=hotel.display_neighborhood,
        badges=hotel_badges(hotel),
        price=hotel.price_per_night,
    )


def neighborhood_card(hood: Neighborhood) -> Markup:
    return NEIGHBORHOOD_CARD.format(
        id=hood.id,
        emoji=hood.emoji,
        name=hood.name,
        avg_price=hood.avg_price,
        walk=hood.walk_to_acropolis,
    )


def join_fragments(fragments) -> Markup:
    return Markup("").join(fragments)


def tag_list(values: list[str], css_class: str) -> Markup:
    """Render values as ``<span class=...>`` tags."""
    tag = Markup('<span class="{css_class}">{value}</span>')
    return join_fragments(tag.format(css_class=css_class, value=v) for v in values)


def list_items(values: list[str]) -> Markup:
    return join_fragments(Markup("<li>{}</li>").format(v) for v in values)
