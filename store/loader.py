"""Load the JSON data store into a validated, immutable SiteSnapshot."""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from exceptions.custom import DataConsistencyError, InputDataError
from models.hotel import AggregateIndex, Hotel, NeighborhoodListing
from models.neighborhood import Neighborhood, NeighborhoodCatalog
from models.snapshot import SiteSnapshot
from store.stats import build_index, stats_match

logger = logging.getLogger(__name__)

NEIGHBORHOODS_FILE = "neighborhoods.json"
ALL_HOTELS_FILE = "all-hotels.json"
HOTELS_DIR = "hotels"


def read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise InputDataError("file not found", path=str(path)) from e
    except json.JSONDecodeError as e:
        raise InputDataError(f"malformed JSON: {e}", path=str(path)) from e
    except OSError as e:
        raise InputDataError(f"cannot read file: {e}", path=str(path)) from e


def parse_document(path: Path, model: type[BaseModel]):
    try:
        return model.model_validate(read_json(path))
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InputDataError(f"invalid {model.__name__}: {errors}", path=str(path)) from e


def load_catalog(data_dir: Path) -> list[Neighborhood]:
    catalog = parse_document(Path(data_dir) / NEIGHBORHOODS_FILE, NeighborhoodCatalog)
    return catalog.neighborhoods


def find_consistency_problems(
    neighborhoods: list[Neighborhood],
    hotels: list[Hotel],
    listings: dict[str, NeighborhoodListing],
) -> list[str]:
    """Cross-record checks the schemas cannot express."""
    problems = []

    hood_counts = Counter(n.id for n in neighborhoods)
    for hood_id, count in hood_counts.items():
        if count > 1:
            problems.append(f"neighborhood id '{hood_id}' appears {count} times")

    for hotel in hotels:
        if hotel.neighborhood not in hood_counts:
            problems.append(
                f"hotel '{hotel.id}' references unknown neighborhood '{hotel.neighborhood}'"
            )

    id_counts = Counter((h.neighborhood, h.id) for h in hotels)
    for (hood_id, hotel_id), count in id_counts.items():
        if count > 1:
            problems.append(
                f"hotel id '{hotel_id}' appears {count} times in neighborhood '{hood_id}'"
            )

    slug_counts = Counter(h.slug for h in hotels)
    for slug, count in slug_counts.items():
        if count > 1:
            problems.append(f"slug '{slug}' is used by {count} hotels")

    # Listing documents must mirror the consolidated collection exactly
    by_slug = {h.slug: h for h in hotels if slug_counts[h.slug] == 1}
    for hood_id, listing in listings.items():
        listing_file = f"{HOTELS_DIR}/{hood_id}.json"
        if listing.hotel_count != len(listing.hotels):
            problems.append(
                f"{listing_file} declares hotelCount {listing.hotel_count} "
                f"but lists {len(listing.hotels)} hotels"
            )

        for hotel in listing.hotels:
            if hotel.slug not in slug_counts:
                problems.append(
                    f"{listing_file} lists '{hotel.slug}' which is "
                    f"missing from {ALL_HOTELS_FILE}"
                )
            elif hotel.slug in by_slug and hotel != by_slug[hotel.slug]:
                problems.append(
                    f"{listing_file} entry '{hotel.slug}' differs from {ALL_HOTELS_FILE}"
                )
            if hotel.neighborhood != hood_id:
                problems.append(
                    f"{listing_file} lists '{hotel.slug}' under "
                    f"neighborhood '{hotel.neighborhood}'"
                )

        listed = {h.slug for h in listing.hotels}
        for hotel in hotels:
            if hotel.neighborhood == hood_id and hotel.slug not in listed:
                problems.append(
                    f"{ALL_HOTELS_FILE} hotel '{hotel.slug}' is missing from {listing_file}"
                )

    return problems


def load_snapshot(data_dir: Path) -> SiteSnapshot:
    """Read every data file once and return the snapshot all builders share.

    Raises InputDataError for missing or malformed files and
    DataConsistencyError when records contradict each other.
    """
    data_dir = Path(data_dir)
    neighborhoods = load_catalog(data_dir)
    stored = parse_document(data_dir / ALL_HOTELS_FILE, AggregateIndex)

    listings = {
        hood.id: parse_document(data_dir / HOTELS_DIR / f"{hood.id}.json", NeighborhoodListing)
        for hood in neighborhoods
    }

    problems = find_consistency_problems(neighborhoods, stored.hotels, listings)
    if problems:
        for problem in problems:
            logger.error(f"Data consistency: {problem}")
        raise DataConsistencyError(problems)

    index = build_index(stored.hotels, stored.last_updated, stored.currency)
    if not stats_match(stored, index):
        logger.warning(
            f"{ALL_HOTELS_FILE} statistics are stale "
            f"(stored total={stored.total_hotels} avg={stored.avg_price}, "
            f"derived total={index.total_hotels} avg={index.avg_price}); using derived values"
        )

    logger.info(
        f"Loaded {len(neighborhoods)} neighborhoods and {index.total_hotels} hotels "
        f"from {data_dir}"
    )
    return SiteSnapshot(
        neighborhoods=tuple(neighborhoods), listings=listings, index=index
    )
