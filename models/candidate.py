from typing import Optional

from pydantic import BaseModel


class HotelCandidate(BaseModel):
    """A hotel name/price pair found in search results, pending curation."""

    name: str
    price_per_night: int
    neighborhood: str
    source_url: Optional[str] = None
