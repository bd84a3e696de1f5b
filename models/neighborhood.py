from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Neighborhood(BaseModel):
    """One entry of the neighborhoods catalog (data/neighborhoods.json)."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    id: str = Field(pattern=r"^[a-z0-9-]+$")
    name: str
    emoji: str = ""
    tagline: str = ""
    description: str = ""
    avg_price: int = 0
    walk_to_acropolis: str = ""
    vibe: list[str] = Field(default_factory=list)
    best_for: list[str] = Field(default_factory=list)


class NeighborhoodCatalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    neighborhoods: list[Neighborhood]
