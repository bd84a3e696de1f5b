"""Fetch step: seed the data store, optionally report live discoveries."""

import logging
from datetime import date
from pathlib import Path

import httpx

from config.seed_hotels import SEED_HOTELS
from config.settings import Settings
from dedup.candidates import CandidateDeduplicator
from exceptions.custom import FetchError
from fetchers.discovery import discover_candidates
from fetchers.http import RetryingClient
from fetchers.jina import JinaReader
from fetchers.seed import build_dataset
from fetchers.serper import SerperClient
from models.candidate import HotelCandidate
from models.hotel import AggregateIndex
from store.loader import load_catalog
from store.writer import save_index, save_listing

logger = logging.getLogger(__name__)


def run_fetch(settings: Settings, today: date | None = None) -> AggregateIndex:
    """Write hotels/<id>.json for every neighborhood and the all-hotels index."""
    today = today or date.today()
    data_dir = Path(settings.data_dir)

    logger.info("Fetching Athens hotels...")
    neighborhoods = load_catalog(data_dir)
    listings, index = build_dataset(neighborhoods, SEED_HOTELS, today)

    for listing in listings:
        save_listing(data_dir, listing)
    save_index(data_dir, index)

    stats = index.price_stats
    logger.info(f"Complete! {index.total_hotels} hotels saved.")
    logger.info(f"Average price: €{index.avg_price}/night")
    logger.info(
        f"Budget: {stats.budget.count} | Mid: {stats.mid_range.count} | "
        f"Upscale: {stats.upscale.count} | Luxury: {stats.luxury.count}"
    )
    return index


def run_discovery(settings: Settings, index: AggregateIndex) -> list[HotelCandidate]:
    """Search the web for hotels missing from the curated dataset and log them."""
    neighborhoods = load_catalog(Path(settings.data_dir))
    deduplicator = CandidateDeduplicator([h.name for h in index.hotels])

    candidates: list[HotelCandidate] = []
    with RetryingClient(settings.fetch_retries, settings.request_timeout) as http:
        search = SerperClient(settings.serper_api_key, http)
        reader = JinaReader(settings.jina_api_key, http)
        for hood in neighborhoods:
            try:
                candidates.extend(discover_candidates(hood, search, reader, deduplicator))
            except httpx.RequestError as e:
                raise FetchError(f"discovery failed for {hood.name}: {e}") from e

    for c in candidates:
        logger.info(f"  Candidate: {c.name} (€{c.price_per_night}) in {c.neighborhood} <- {c.source_url}")
    logger.info(f"Discovery found {len(candidates)} uncurated hotels")
    return candidates
