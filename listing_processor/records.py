# -*- coding: utf-8 -*-

"""
records.py — CSV <-> listings frame.

Reading keeps every cell as text first, then infers each cell on its own:
  "12" -> 12, "4.5" -> 4.5, "true"/"false" -> bool, "" -> None, anything else stays text.
So "$1,200" stays a string and a host_id column with one bad cell still yields
ints for the good ones.

Writing emits a header from the frame's columns, no index column.
"""

import logging
import re
from pathlib import Path
from typing import Any, Union

import pandas as pd

LOG = logging.getLogger("listings.records")

PathLike = Union[str, Path]

_INT_RE = re.compile(r"[-+]?\d+")
_FLOAT_RE = re.compile(r"[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")


class InputReadError(RuntimeError):
    """The input CSV could not be read or parsed."""


class OutputWriteError(RuntimeError):
    """The output CSV could not be written."""


def infer_cell(raw: Any) -> Any:
    if raw is None:
        return None
    s = str(raw).strip()
    if s == "":
        return None
    low = s.lower()
    if low == "true":
        return True
    if low == "false":
        return False
    if _INT_RE.fullmatch(s):
        try:
            return int(s)
        except ValueError:
            # past the interpreter's int digit limit
            return raw
    if _FLOAT_RE.fullmatch(s):
        return float(s)
    return raw


def read_listings(path: PathLike) -> pd.DataFrame:
    try:
        raw = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise InputReadError(f"could not read {path}: {e}") from e

    cols = [c.strip() for c in raw.columns]
    dupes = sorted({c for c in cols if cols.count(c) > 1})
    if dupes:
        raise InputReadError(f"could not read {path}: duplicate columns after stripping headers: {dupes}")
    raw.columns = cols
    # dtype=object so pandas does not coerce int + None columns to float
    df = pd.DataFrame(
        {c: pd.Series([infer_cell(v) for v in raw[c]], index=raw.index, dtype=object) for c in raw.columns},
        index=raw.index,
        columns=raw.columns,
    )
    LOG.info("CSV file %s successfully loaded: %s rows, %s columns", path, df.shape[0], df.shape[1])
    return df


def write_listings(df: pd.DataFrame, path: PathLike) -> Path:
    out = Path(path)
    try:
        df.to_csv(out, index=False)
    except OSError as e:
        raise OutputWriteError(f"could not write {out}: {e}") from e
    LOG.info("Filtered listings successfully saved to %s", out)
    return out
