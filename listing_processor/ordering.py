import logging

import pandas as pd

from listing_processor.numeric import numeric_column

LOG = logging.getLogger("listings.order")

_SORT_KEY = "__order_key"


def order_listings(df: pd.DataFrame, field: str) -> pd.DataFrame:
    """
    Ascending, stable sort on the numeric value of ``field``.
    Rows where the field is missing or non-numeric sort as 0.
    """
    tmp = df.copy()
    tmp[_SORT_KEY] = numeric_column(df, field)
    tmp = tmp.sort_values(_SORT_KEY, kind="mergesort")
    return tmp.drop(columns=[_SORT_KEY]).reset_index(drop=True)


def describe_ends(df: pd.DataFrame, field: str) -> str:
    if df.empty:
        return f"no rows to show {field}"
    first = df.iloc[0].get(field)
    last = df.iloc[-1].get(field)
    return f"first {field}: {first}, last: {last}"
