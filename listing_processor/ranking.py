# -*- coding: utf-8 -*-

"""
ranking.py — rank hosts by how many listings they hold.

- Groups by exact host_id; rows without an id form a single group.
- The first host_name seen for an id wins, later spellings are ignored.
- Count descending; equal counts keep the order in which each host first appeared.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Tuple

import pandas as pd

from listing_processor.models import HostRankEntry

DEFAULT_LIMIT = 10

_MISSING = object()  # shared key for rows without a host_id


def _py(value: Any) -> Any:
    if value is None:
        return None
    if hasattr(value, "item"):
        value = value.item()
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def _group_key(value: Any) -> Tuple[Any, Any]:
    # type is part of the key: True, 1 and 1.0 compare equal but are different ids
    v = _py(value)
    if v is None:
        return _MISSING, None
    return (type(v), v), v


def _column(df: pd.DataFrame, name: str) -> Iterable[Any]:
    if name in df.columns:
        return df[name]
    return [None] * len(df)


def group_hosts(df: pd.DataFrame) -> Mapping[Any, Tuple[Any, Any, int]]:
    """Read-only ``{key: (host_id, first host_name, listing count)}`` in first-seen order."""
    counts: Dict[Any, int] = {}
    firsts: Dict[Any, Tuple[Any, Any]] = {}
    for host_id, host_name in zip(_column(df, "host_id"), _column(df, "host_name")):
        key, ident = _group_key(host_id)
        if key not in counts:
            firsts[key] = (ident, _py(host_name))
            counts[key] = 0
        counts[key] += 1
    return MappingProxyType({key: (*firsts[key], counts[key]) for key in counts})


def rank_hosts(df: pd.DataFrame, limit: int = DEFAULT_LIMIT) -> List[HostRankEntry]:
    groups = group_hosts(df)
    # sorted() is stable, so ties keep first-appearance order
    ranked = sorted(groups.values(), key=lambda group: group[2], reverse=True)
    return [
        HostRankEntry(host_id=host_id, host_name=name, count=count)
        for host_id, name, count in ranked[: max(limit, 0)]
    ]
