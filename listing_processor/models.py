from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class FilterCriteria(BaseModel):
    """Inclusive [min, max] bounds; a max of 0 leaves that dimension unconstrained."""

    model_config = ConfigDict(frozen=True)

    price_min: float = Field(0, description="Lowest price kept")
    price_max: float = Field(0, description="Highest price kept, 0 = no price filter")
    room_min: float = Field(0, description="Fewest bedrooms kept")
    room_max: float = Field(0, description="Most bedrooms kept, 0 = no bedroom filter")
    score_min: float = Field(0, description="Lowest review score kept")
    score_max: float = Field(0, description="Highest review score kept, 0 = no score filter")

    @classmethod
    def from_ranges(
        cls,
        price: Tuple[float, float] = (0, 0),
        rooms: Tuple[float, float] = (0, 0),
        score: Tuple[float, float] = (0, 0),
    ) -> "FilterCriteria":
        return cls(
            price_min=price[0], price_max=price[1],
            room_min=rooms[0], room_max=rooms[1],
            score_min=score[0], score_max=score[1],
        )


class Stats(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = Field(..., description="Listings in the subset")
    average_price: float = Field(..., description="sum(price) / count, NaN when empty")
    avg_price_per_room: float = Field(..., description="sum(price) / sum(bedrooms), NaN when no bedrooms")
    valid_listings: int = Field(..., description="Listings with a genuine positive numeric host_id")


class HostRankEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    host_id: Any = None
    host_name: Optional[Any] = None
    count: int
