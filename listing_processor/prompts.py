# -*- coding: utf-8 -*-

"""
prompts.py — where the run gets its filters, order field and output path.

- PromptConfig asks on the console (Enter skips a question).
- StaticConfig answers from values given up front (command-line flags).
- Ranges are typed as "min,max"; any part that is not a number becomes 0.
"""

import logging
import math
from typing import Callable, Optional, Protocol, Tuple

from listing_processor.models import FilterCriteria

LOG = logging.getLogger("listings.prompts")

RANGE_HINT = "Enter values in 'min,max' format (e.g., 0,100). Press Enter to skip."
PRICE_PROMPT = "Price Range (min,max): "
ROOMS_PROMPT = "Number of Rooms (min,max): "
SCORE_PROMPT = "Review Score (min,max): "
ORDER_PROMPT = (
    "Order lists (e.g., price, price_per_room, bedrooms, accommodates, "
    "review_scores_rating), Press Enter to skip: "
)
OUTPUT_PROMPT = "Enter the file path (e.g., result.csv): "


def _number_or_zero(part: Optional[str]) -> float:
    if part is None or part.strip() == "":
        return 0.0
    try:
        v = float(part.strip())
    except ValueError:
        return 0.0
    return v if math.isfinite(v) else 0.0


def parse_range(text: Optional[str]) -> Tuple[float, float]:
    """'10,200' -> (10.0, 200.0); '' or None -> (0.0, 0.0); '50' -> (50.0, 0.0)."""
    if not text:
        return 0.0, 0.0
    parts = text.split(",")
    lo = parts[0]
    hi = parts[1] if len(parts) > 1 else None
    return _number_or_zero(lo), _number_or_zero(hi)


class ConfigSource(Protocol):
    def filter_criteria(self) -> FilterCriteria: ...
    def order_field(self) -> str: ...
    def output_path(self) -> str: ...


class StaticConfig:
    def __init__(
        self,
        price: Optional[str] = None,
        rooms: Optional[str] = None,
        score: Optional[str] = None,
        order: Optional[str] = None,
        output: Optional[str] = None,
    ):
        self.price = price
        self.rooms = rooms
        self.score = score
        self.order = order
        self.output = output

    def filter_criteria(self) -> FilterCriteria:
        return FilterCriteria.from_ranges(
            price=parse_range(self.price),
            rooms=parse_range(self.rooms),
            score=parse_range(self.score),
        )

    def order_field(self) -> str:
        return (self.order or "").strip()

    def output_path(self) -> str:
        return (self.output or "").strip()


class PromptConfig(StaticConfig):
    """Console prompts for every value not already supplied."""

    def __init__(self, ask: Optional[Callable[[str], str]] = None, **given: Optional[str]):
        super().__init__(**given)
        self.ask = ask or input

    def filter_criteria(self) -> FilterCriteria:
        if None in (self.price, self.rooms, self.score):
            print(RANGE_HINT)
        if self.price is None:
            self.price = self.ask(PRICE_PROMPT)
        if self.rooms is None:
            self.rooms = self.ask(ROOMS_PROMPT)
        if self.score is None:
            self.score = self.ask(SCORE_PROMPT)
        criteria = super().filter_criteria()
        LOG.info("Filters imported: %s", criteria.model_dump())
        return criteria

    def order_field(self) -> str:
        if self.order is None:
            self.order = self.ask(ORDER_PROMPT)
        return super().order_field()

    def output_path(self) -> str:
        if self.output is None:
            self.output = self.ask(OUTPUT_PROMPT)
        return super().output_path()
