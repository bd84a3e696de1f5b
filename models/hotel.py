from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.neighborhood import Neighborhood


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class Hotel(_CamelModel):
    # Identity
    id: str
    slug: str = Field(pattern=r"^[a-z0-9-]+$")
    name: str

    # Core fields
    star_rating: int = Field(ge=1, le=5)
    price_per_night: int = Field(ge=0)

    # Location
    neighborhood: str
    neighborhood_name: Optional[str] = None
    distance_to_acropolis: str = ""

    # Features
    has_acropolis_view: bool = False
    has_rooftop_bar: bool = False
    rooftop_rating: Optional[int] = None
    amenities: list[str] = Field(default_factory=list)

    # Editorial (None means "use the site default")
    pros: Optional[list[str]] = None
    cons: Optional[list[str]] = None
    best_for: Optional[list[str]] = None
    overview: Optional[str] = None

    # Metadata
    last_verified: Optional[date] = None
    is_active: bool = True

    @property
    def display_neighborhood(self) -> str:
        return self.neighborhood_name or self.neighborhood


class NeighborhoodListing(Neighborhood):
    """A per-neighborhood document: the catalog entry plus its hotels."""

    hotel_count: int = 0
    hotels: list[Hotel] = Field(default_factory=list)


class TierStat(_CamelModel):
    range: str
    count: int


class PriceStats(_CamelModel):
    budget: TierStat
    mid_range: TierStat
    upscale: TierStat
    luxury: TierStat


class AggregateIndex(_CamelModel):
    """The consolidated all-hotels document with derived statistics."""

    last_updated: date
    currency: str = "EUR"
    total_hotels: int
    avg_price: int
    price_stats: PriceStats
    hotels: list[Hotel] = Field(default_factory=list)
