"""Extract candidate hotels from scraped markdown and build URL slugs."""

import re
from typing import Optional

from models.candidate import HotelCandidate

# "Hotel Grande Bretagne - from €450" / "Electra Palace Athens 280"
HOTEL_PATTERNS = [
    re.compile(
        r"(?:Hotel|Athens)\s+([A-Z][a-zA-Z\s&']+?)(?:\s*[-–]\s*|\s+)(?:from\s+)?€?(\d{2,4})",
        re.IGNORECASE,
    ),
    re.compile(
        r"([A-Z][a-zA-Z\s&']+?)\s+(?:Hotel|Athens)(?:\s*[-–]\s*|\s+)(?:from\s+)?€?(\d{2,4})",
        re.IGNORECASE,
    ),
]

MIN_NAME_LENGTH = 4
MAX_NAME_LENGTH = 49
MIN_PRICE = 31
MAX_PRICE = 1999


def parse_hotel_candidates(
    content: str, neighborhood: str, source_url: Optional[str] = None
) -> list[HotelCandidate]:
    """Find plausible (name, nightly price) pairs in free text.

    Names are de-duplicated case-insensitively across both patterns.
    """
    if not content:
        return []

    candidates = []
    seen: set[str] = set()

    for pattern in HOTEL_PATTERNS:
        for match in pattern.finditer(content):
            name = match.group(1).strip()
            price = int(match.group(2))

            if not MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH:
                continue
            if not MIN_PRICE <= price <= MAX_PRICE:
                continue
            if name.lower() in seen:
                continue

            seen.add(name.lower())
            candidates.append(
                HotelCandidate(
                    name=name,
                    price_per_night=price,
                    neighborhood=neighborhood,
                    source_url=source_url,
                )
            )

    return candidates


def generate_slug(name: str) -> str:
    """'Hotel Grande Bretagne' -> 'hotel-grande-bretagne-athens'."""
    slug = name.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip() + "-athens"
