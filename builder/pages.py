"""Page builders: one pure ``snapshot -> RenderedPage`` transform per page type."""

from dataclasses import dataclass
from urllib.parse import quote

from markupsafe import Markup

from config.site import (
    BOOKING_SEARCH_URL,
    DEFAULT_BEST_FOR,
    DEFAULT_CONS,
    DEFAULT_METRO_DISTANCE,
    DEFAULT_PROS,
    FORMSPREE_URL,
    HOME_HIGHLIGHT_LIMIT,
    HOME_ROOFTOP_MIN_RATING,
    HOTEL_DIR,
    NEARBY_NEIGHBORHOOD_LIMIT,
    NEIGHBORHOOD_DIR,
    PRICE_RANGE_HIGH,
    PRICE_RANGE_LOW,
    SIMILAR_HOTEL_LIMIT,
)
from models.hotel import Hotel, NeighborhoodListing
from models.neighborhood import Neighborhood
from models.snapshot import SiteSnapshot
from render.environment import PageRenderer
from render.fragments import (
    hotel_card,
    join_fragments,
    list_items,
    neighborhood_card,
    star_glyphs,
    tag_list,
)
from store.stats import round_half_up


HOTEL_BADGE = Markup('<span class="hotel-badge">{}</span>')


@dataclass(frozen=True)
class RenderedPage:
    path: str  # relative to the output root
    html: str


def hotel_grid(hotels: list[Hotel]) -> Markup:
    return join_fragments(hotel_card(h) for h in hotels)


# --- Selection policies (stable data-store order, first N) ---


def select_view_hotels(hotels: list[Hotel], limit: int = HOME_HIGHLIGHT_LIMIT) -> list[Hotel]:
    return [h for h in hotels if h.has_acropolis_view][:limit]


def select_rooftop_hotels(
    hotels: list[Hotel],
    limit: int = HOME_HIGHLIGHT_LIMIT,
    min_rating: int = HOME_ROOFTOP_MIN_RATING,
) -> list[Hotel]:
    return [
        h for h in hotels
        if h.has_rooftop_bar and (h.rooftop_rating or 0) >= min_rating
    ][:limit]


def select_nearby(
    neighborhoods: tuple[Neighborhood, ...] | list[Neighborhood],
    hood_id: str,
    limit: int = NEARBY_NEIGHBORHOOD_LIMIT,
) -> list[Neighborhood]:
    """Other neighborhoods in catalog order. Not ranked by distance."""
    return [n for n in neighborhoods if n.id != hood_id][:limit]


def select_similar(
    hotels: list[Hotel], hotel: Hotel, limit: int = SIMILAR_HOTEL_LIMIT
) -> list[Hotel]:
    return [
        h for h in hotels
        if h.neighborhood == hotel.neighborhood and h.id != hotel.id
    ][:limit]


# --- Home ---


def build_home_page(snapshot: SiteSnapshot, renderer: PageRenderer) -> RenderedPage:
    index = snapshot.index
    content = renderer.render(
        "home.html",
        total_hotels=index.total_hotels,
        avg_price=index.avg_price,
        price_stats=index.price_stats,
        neighborhoods_grid=join_fragments(
            neighborhood_card(n) for n in snapshot.neighborhoods
        ),
        acropolis_view_hotels=hotel_grid(select_view_hotels(index.hotels)),
        rooftop_hotels=hotel_grid(select_rooftop_hotels(index.hotels)),
    )
    html = renderer.wrap_in_layout(
        content,
        "Compare Hotels by Neighborhood",
        f"Discover {index.total_hotels}+ Athens hotels. Compare prices, "
        "Acropolis views, rooftop bars by neighborhood.",
        "/",
    )
    return RenderedPage("index.html", html)


# --- Neighborhood ---


def neighborhood_faq(hood: Neighborhood) -> dict[str, str]:
    first_sentence = hood.description.split(".")[0].lower()
    best_for = ", ".join(hood.best_for).lower()
    return {
        "good_area": (
            f"Yes! {hood.name} is {first_sentence}. "
            f"It's especially good for {best_for}."
        ),
        "distance": (
            f"Most hotels in {hood.name} are within easy walking distance of "
            "the Acropolis and other major attractions."
        ),
        "price": (
            "You can find options ranging from budget hostels to luxury hotels "
            "depending on your preferences."
        ),
    }


def build_neighborhood_page(
    hood: Neighborhood,
    listing: NeighborhoodListing,
    neighborhoods: tuple[Neighborhood, ...],
    renderer: PageRenderer,
) -> RenderedPage:
    content = renderer.render(
        "neighborhood.html",
        hood=hood,
        hotel_count=listing.hotel_count,
        vibe_tags=tag_list(hood.vibe, "vibe-tag"),
        best_for=", ".join(hood.best_for),
        hotels_grid=hotel_grid(listing.hotels),
        nearby_neighborhoods=join_fragments(
            neighborhood_card(n) for n in select_nearby(neighborhoods, hood.id)
        ),
        faq=neighborhood_faq(hood),
    )
    html = renderer.wrap_in_layout(
        content,
        f"Hotels in {hood.name}, Athens",
        f"Find the best hotels in {hood.name}, Athens. {hood.tagline}. "
        f"Compare {listing.hotel_count} hotels from €{hood.avg_price}/night.",
        f"/{NEIGHBORHOOD_DIR}/{hood.id}",
    )
    return RenderedPage(f"{NEIGHBORHOOD_DIR}/{hood.id}.html", html)


# --- Hotel ---


def price_range(price: int) -> tuple[int, int]:
    """Displayed nightly range, e.g. 100 -> (80, 150)."""
    return round_half_up(price * PRICE_RANGE_LOW), round_half_up(price * PRICE_RANGE_HIGH)


def booking_url(hotel: Hotel) -> str:
    # Same escaping as JavaScript's encodeURIComponent
    return BOOKING_SEARCH_URL + quote(f"{hotel.name} Athens", safe="-_.!~*'()")


def hotel_page_badges(hotel: Hotel) -> Markup:
    labels = []
    if hotel.has_acropolis_view:
        labels.append("🏛️ Acropolis View")
    if hotel.has_rooftop_bar:
        labels.append("🍸 Rooftop Bar")
    if hotel.star_rating >= 5:
        labels.append("👑 Luxury")
    return join_fragments(HOTEL_BADGE.format(label) for label in labels)


def hotel_overview(hotel: Hotel) -> str:
    return hotel.overview or (
        f"{hotel.name} is a {hotel.star_rating}-star hotel in "
        f"{hotel.display_neighborhood}, Athens."
    )


def build_hotel_page(
    hotel: Hotel, snapshot: SiteSnapshot, renderer: PageRenderer
) -> RenderedPage:
    price_min, price_max = price_range(hotel.price_per_night)
    pros = hotel.pros if hotel.pros is not None else DEFAULT_PROS
    cons = hotel.cons if hotel.cons is not None else DEFAULT_CONS
    best_for = hotel.best_for if hotel.best_for is not None else DEFAULT_BEST_FOR

    content = renderer.render(
        "hotel.html",
        hotel=hotel,
        neighborhood_name=hotel.display_neighborhood,
        stars=star_glyphs(hotel.star_rating),
        badges=hotel_page_badges(hotel),
        price_min=price_min,
        price_max=price_max,
        overview=hotel_overview(hotel),
        amenities=tag_list(hotel.amenities, "amenity"),
        pros=list_items(pros),
        cons=list_items(cons),
        location_desc=f"{hotel.distance_to_acropolis} walk to the Acropolis.",
        distance_metro=DEFAULT_METRO_DISTANCE,
        has_view="Yes ✓" if hotel.has_acropolis_view else "No",
        has_rooftop="Yes ✓" if hotel.has_rooftop_bar else "No",
        best_for_tags=tag_list(best_for, "best-for-tag"),
        similar_hotels=hotel_grid(select_similar(snapshot.hotels, hotel)),
        booking_url=booking_url(hotel),
    )
    description = (
        f"{hotel.name} - {hotel.star_rating}-star hotel in "
        f"{hotel.display_neighborhood}, Athens. From €{hotel.price_per_night}/night."
    )
    if hotel.has_acropolis_view:
        description += " Acropolis views available."
    html = renderer.wrap_in_layout(
        content, hotel.name, description, f"/{HOTEL_DIR}/{hotel.slug}"
    )
    return RenderedPage(f"{HOTEL_DIR}/{hotel.slug}.html", html)


# --- Contact / thank-you ---


def build_contact_page(renderer: PageRenderer, formspree_id: str) -> RenderedPage:
    content = renderer.render(
        "contact.html", form_action=f"{FORMSPREE_URL}{formspree_id}"
    )
    html = renderer.wrap_in_layout(
        content,
        "Contact Us",
        "Questions about Athens hotels? Contact the Hotels of Athens team for "
        "personalized recommendations.",
        "/contact",
    )
    return RenderedPage("contact.html", html)


def build_thank_you_page(renderer: PageRenderer) -> RenderedPage:
    html = renderer.wrap_in_layout(
        renderer.render("thank-you.html"),
        "Message Sent",
        "Thank you for contacting Hotels of Athens.",
        "/thank-you",
    )
    return RenderedPage("thank-you.html", html)
