"""Immutable in-memory view of the data store, loaded once per run."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from models.hotel import AggregateIndex, Hotel, NeighborhoodListing
from models.neighborhood import Neighborhood


class SiteSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    neighborhoods: tuple[Neighborhood, ...]
    listings: dict[str, NeighborhoodListing]
    index: AggregateIndex

    @property
    def hotels(self) -> list[Hotel]:
        return self.index.hotels

    def neighborhood(self, hood_id: str) -> Optional[Neighborhood]:
        for hood in self.neighborhoods:
            if hood.id == hood_id:
                return hood
        return None

    def listing(self, hood_id: str) -> NeighborhoodListing:
        return self.listings[hood_id]
