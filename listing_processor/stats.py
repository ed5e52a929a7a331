# -*- coding: utf-8 -*-

"""
stats.py — aggregate statistics over a (filtered) listings frame.

The returned frame carries a derived ``price_per_room`` column:
price / max(bedrooms, 1), rounded half away from zero to 2 decimals.
The aggregate average per room has no such floor: sum(price) / sum(bedrooms),
NaN when the subset has no bedrooms at all.
"""

import math
import numbers
from typing import Any, Tuple

import numpy as np
import pandas as pd

from listing_processor.models import Stats
from listing_processor.numeric import numeric_column, round_half_away

PRICE_PER_ROOM = "price_per_room"


def is_valid_host_id(value: Any) -> bool:
    """Genuine positive number; numeric-looking text does not count."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return value > 0


def price_per_room(df: pd.DataFrame) -> pd.Series:
    price = numeric_column(df, "price")
    rooms = numeric_column(df, "bedrooms").clip(lower=1)
    return (price / rooms).map(round_half_away).astype("float64")


def compute_stats(df: pd.DataFrame) -> Tuple[pd.DataFrame, Stats]:
    price = numeric_column(df, "price")
    rooms = numeric_column(df, "bedrooms")

    count = int(len(df))
    total_price = float(price.sum())
    total_rooms = float(rooms.sum())

    average_price = round_half_away(total_price / count) if count else float("nan")
    avg_per_room = round_half_away(total_price / total_rooms) if total_rooms else float("nan")

    if "host_id" in df.columns:
        valid = int(df["host_id"].map(is_valid_host_id).astype(bool).sum())
    else:
        valid = 0

    annotated = df.copy()
    annotated[PRICE_PER_ROOM] = price_per_room(df)

    stats = Stats(
        count=count,
        average_price=average_price,
        avg_price_per_room=avg_per_room,
        valid_listings=valid,
    )
    return annotated, stats
