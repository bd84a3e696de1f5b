"""Shared fixtures: in-memory records, snapshots and an on-disk data store."""

import json
from datetime import date
from pathlib import Path

import pytest

from config.settings import Settings
from models.hotel import Hotel, NeighborhoodListing
from models.neighborhood import Neighborhood
from models.snapshot import SiteSnapshot
from render.environment import PageRenderer, create_environment
from store.stats import build_index
from store.writer import save_index, save_listing

ROOT = Path(__file__).resolve().parents[1]
TEMPLATES_DIR = ROOT / "templates"
STATIC_DIR = ROOT / "static"
BUILD_DATE = date(2026, 5, 1)


def make_neighborhood(hood_id: str = "plaka", **overrides) -> Neighborhood:
    fields = {
        "id": hood_id,
        "name": hood_id.title(),
        "emoji": "🏛️",
        "tagline": f"{hood_id.title()} tagline",
        "description": f"The heart of {hood_id.title()}. Lots to see.",
        "avg_price": 120,
        "walk_to_acropolis": "10 min",
        "vibe": ["Historic", "Lively"],
        "best_for": ["Couples", "First-time visitors"],
    }
    fields.update(overrides)
    return Neighborhood(**fields)


def make_hotel(name: str = "Test Hotel", neighborhood: str = "plaka", **overrides) -> Hotel:
    slug = name.lower().replace(" ", "-") + "-athens"
    fields = {
        "id": f"{name.lower().replace(' ', '-')}-{neighborhood}",
        "slug": slug,
        "name": name,
        "star_rating": 4,
        "price_per_night": 120,
        "neighborhood": neighborhood,
        "neighborhood_name": neighborhood.title(),
        "distance_to_acropolis": "10 min",
        "has_acropolis_view": False,
        "has_rooftop_bar": False,
        "rooftop_rating": 0,
        "amenities": ["WiFi"],
        "last_verified": BUILD_DATE,
    }
    fields.update(overrides)
    return Hotel(**fields)


def make_snapshot(
    neighborhoods: list[Neighborhood], hotels: list[Hotel]
) -> SiteSnapshot:
    listings = {}
    for hood in neighborhoods:
        hood_hotels = [h for h in hotels if h.neighborhood == hood.id]
        listings[hood.id] = NeighborhoodListing(
            **hood.model_dump(), hotel_count=len(hood_hotels), hotels=hood_hotels
        )
    return SiteSnapshot(
        neighborhoods=tuple(neighborhoods),
        listings=listings,
        index=build_index(hotels, BUILD_DATE),
    )


def write_data_store(data_dir: Path, snapshot: SiteSnapshot) -> Path:
    """Persist a snapshot in the JSON layout the loader reads."""
    data_dir.mkdir(parents=True, exist_ok=True)
    catalog = [n.model_dump(by_alias=True) for n in snapshot.neighborhoods]
    (data_dir / "neighborhoods.json").write_text(
        json.dumps({"neighborhoods": catalog}, ensure_ascii=False), encoding="utf-8"
    )
    for listing in snapshot.listings.values():
        save_listing(data_dir, listing)
    save_index(data_dir, snapshot.index)
    return data_dir


@pytest.fixture
def renderer() -> PageRenderer:
    return PageRenderer(create_environment(TEMPLATES_DIR), "https://hotelsofathens.com")


@pytest.fixture
def plaka() -> Neighborhood:
    return make_neighborhood("plaka", name="Plaka")


@pytest.fixture
def athens_snapshot() -> SiteSnapshot:
    """Three neighborhoods, eight hotels with a mix of views, rooftops and prices."""
    hoods = [
        make_neighborhood("plaka", name="Plaka"),
        make_neighborhood("koukaki", name="Koukaki"),
        make_neighborhood("psyrri", name="Psyrri"),
    ]
    hotels = [
        make_hotel("Electra Palace", "plaka", star_rating=5, price_per_night=280,
                   has_acropolis_view=True, has_rooftop_bar=True, rooftop_rating=5),
        make_hotel("Plaka Inn", "plaka", star_rating=3, price_per_night=95,
                   has_acropolis_view=True),
        make_hotel("Ava Suites", "plaka", price_per_night=180,
                   has_acropolis_view=True, has_rooftop_bar=True, rooftop_rating=4),
        make_hotel("Herodion", "plaka", price_per_night=165,
                   has_rooftop_bar=True, rooftop_rating=3),
        make_hotel("Marble House", "koukaki", star_rating=2, price_per_night=55),
        make_hotel("Philippos", "koukaki", star_rating=3, price_per_night=79,
                   has_acropolis_view=True),
        make_hotel("Pallas Athena", "psyrri", star_rating=5, price_per_night=200,
                   has_rooftop_bar=True, rooftop_rating=None),
        make_hotel("Athens Way", "psyrri", star_rating=3, price_per_night=80),
    ]
    return make_snapshot(hoods, hotels)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        data_dir=tmp_path / "data",
        templates_dir=TEMPLATES_DIR,
        static_dir=STATIC_DIR,
        output_dir=tmp_path / "dist",
        formspree_id="testform",
        site_url="https://hotelsofathens.com",
    )
