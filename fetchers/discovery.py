"""Live hotel discovery: search, extract, parse, dedup. Results are for curation only."""

import logging

from dedup.candidates import CandidateDeduplicator
from fetchers.jina import JinaReader
from fetchers.serper import SerperClient
from models.candidate import HotelCandidate
from models.neighborhood import Neighborhood
from parsers.hotel_parser import parse_hotel_candidates

logger = logging.getLogger(__name__)


def discover_candidates(
    hood: Neighborhood,
    search: SerperClient,
    reader: JinaReader,
    deduplicator: CandidateDeduplicator,
    max_pages: int = 5,
) -> list[HotelCandidate]:
    results = search.search_hotels(hood.name)
    logger.info(f"{hood.name}: {len(results)} search results")

    found: list[HotelCandidate] = []
    for result in results[:max_pages]:
        url = result.get("link")
        if not url:
            continue
        content = reader.extract(url)
        if not content:
            continue
        found.extend(parse_hotel_candidates(content, hood.id, source_url=url))

    return deduplicator.deduplicate(found)
