# -*- coding: utf-8 -*-

"""
numeric.py — numeric normalization for raw listing fields.

- "$1,234.50" -> 1234.5 (currency symbol and thousands separators stripped).
- Missing, unparseable, boolean or non-finite values -> 0.0.
- Never raises: zero doubles as "absent" and "literally zero".
"""

import math
import numbers
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Mapping

import numpy as np
import pandas as pd

_CURRENCY_JUNK_RE = re.compile(r"[$,]")
_NUMBER_RE = re.compile(r"[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")


def to_number(value: Any) -> float:
    if value is None or isinstance(value, (bool, np.bool_)):
        return 0.0
    if isinstance(value, numbers.Real):
        try:
            v = float(value)
        except (OverflowError, ValueError):
            return 0.0
        return v if math.isfinite(v) else 0.0
    s = _CURRENCY_JUNK_RE.sub("", str(value)).strip()
    if not _NUMBER_RE.fullmatch(s):
        return 0.0
    try:
        v = float(s)
    except (TypeError, ValueError):
        return 0.0
    return v if math.isfinite(v) else 0.0


def extract(record: Mapping[str, Any], field: str) -> float:
    """Numeric value of ``record[field]``; 0.0 when absent or invalid."""
    return to_number(record.get(field))


def numeric_column(df: pd.DataFrame, field: str) -> pd.Series:
    """Vectorised ``extract`` over every row of ``df``."""
    if field not in df.columns:
        return pd.Series(0.0, index=df.index, dtype="float64")
    return df[field].map(to_number).astype("float64")


def round_half_away(value: float, places: int = 2) -> float:
    # Decimal(str(x)) keeps the shortest repr, so 1.005 rounds to 1.01
    if not math.isfinite(value):
        return value
    try:
        q = Decimal(str(value)).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return value
    return float(q)
