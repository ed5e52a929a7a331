import logging

import pandas as pd

from listing_processor.models import FilterCriteria
from listing_processor.numeric import numeric_column

LOG = logging.getLogger("listings.filter")


def _within(values: pd.Series, lo: float, hi: float) -> pd.Series:
    # hi == 0 means the dimension was never constrained
    if hi == 0:
        return pd.Series(True, index=values.index, dtype=bool)
    return values.between(lo, hi, inclusive="both")


def filter_listings(df: pd.DataFrame, criteria: FilterCriteria) -> pd.DataFrame:
    """
    Keep listings whose price, bedrooms and review score all fall inside
    ``criteria``. Returns a new frame in input order; ``df`` is untouched.
    """
    price = numeric_column(df, "price")
    rooms = numeric_column(df, "bedrooms")
    score = numeric_column(df, "review_scores_rating")

    mask = (
        _within(price, criteria.price_min, criteria.price_max)
        & _within(rooms, criteria.room_min, criteria.room_max)
        & _within(score, criteria.score_min, criteria.score_max)
    )
    out = df.loc[mask].reset_index(drop=True)
    LOG.debug("filter kept %s of %s rows", len(out), len(df))
    return out
