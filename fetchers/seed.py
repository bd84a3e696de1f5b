"""Turn curated seed records into normalized Hotel records and store documents."""

import logging
from datetime import date

from models.hotel import AggregateIndex, Hotel, NeighborhoodListing
from models.neighborhood import Neighborhood
from parsers.hotel_parser import generate_slug
from store.stats import build_index

logger = logging.getLogger(__name__)


def normalize_seed_hotel(record: dict, hood: Neighborhood, verified_on: date) -> Hotel:
    """Add identity and neighborhood metadata; the seed's own fields win."""
    slug = generate_slug(record["name"])
    base = {
        "id": slug.replace("-athens", "", 1) + "-" + hood.id,
        "slug": slug,
        "neighborhood": hood.id,
        "neighborhood_name": hood.name,
        "distance_to_acropolis": hood.walk_to_acropolis,
        "last_verified": verified_on,
        "is_active": True,
    }
    return Hotel(**{**base, **record})


def build_dataset(
    neighborhoods: list[Neighborhood],
    seed: dict[str, list[dict]],
    verified_on: date,
) -> tuple[list[NeighborhoodListing], AggregateIndex]:
    """Build every per-neighborhood listing plus the consolidated index.

    A slug already taken by an earlier neighborhood gets the neighborhood
    id appended, so every hotel keeps its own page.
    """
    listings: list[NeighborhoodListing] = []
    all_hotels: list[Hotel] = []
    used_slugs: set[str] = set()

    for hood in neighborhoods:
        logger.info(f"Processing {hood.name}...")
        hotels = []
        for record in seed.get(hood.id, []):
            hotel = normalize_seed_hotel(record, hood, verified_on)
            if hotel.slug in used_slugs:
                renamed = f"{hotel.slug}-{hood.id}"
                logger.warning(
                    f"Slug '{hotel.slug}' already used, renaming {hotel.id} to '{renamed}'"
                )
                hotel = hotel.model_copy(update={"slug": renamed})
            used_slugs.add(hotel.slug)
            hotels.append(hotel)

        listings.append(
            NeighborhoodListing(
                **hood.model_dump(), hotel_count=len(hotels), hotels=hotels
            )
        )
        all_hotels.extend(hotels)

    return listings, build_index(all_hotels, verified_on)
