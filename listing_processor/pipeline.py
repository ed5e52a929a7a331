# -*- coding: utf-8 -*-

"""
pipeline.py — one pass over a listings frame.

LOADED -> FILTERED -> STATS_COMPUTED -> RANKED -> (ORDERED) -> EXPORTED

- Every stage takes the working frame produced by the previous one and hands
  back a new frame (or a read-only summary); nothing is mutated in place.
- Steps are wrapped with timing/logging and record errors before re-raising.
- Calling a stage out of order raises PipelineStateError.
"""

import logging
import time
from enum import Enum
from functools import wraps
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pandas as pd

from listing_processor.filtering import filter_listings
from listing_processor.models import FilterCriteria, HostRankEntry, Stats
from listing_processor.ordering import describe_ends, order_listings
from listing_processor.prompts import ConfigSource
from listing_processor.ranking import DEFAULT_LIMIT, rank_hosts
from listing_processor.records import PathLike, read_listings, write_listings
from listing_processor.stats import compute_stats

LOG = logging.getLogger("listings.pipeline")


class Stage(str, Enum):
    LOADED = "loaded"
    FILTERED = "filtered"
    STATS_COMPUTED = "stats_computed"
    RANKED = "ranked"
    ORDERED = "ordered"
    EXPORTED = "exported"


class PipelineStateError(RuntimeError):
    """A stage was called from a state it cannot follow."""


# =========================
# Decorators
# =========================

def timeit(step_name: str):
    def deco(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            t0 = time.perf_counter()
            out = func(self, *args, **kwargs)
            ms = (time.perf_counter() - t0) * 1000
            LOG.debug("%s took %.2f ms", step_name, ms)
            return out
        return wrapper
    return deco

def log_step(step_name: str):
    def deco(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            before = self.dataset.shape
            out = func(self, *args, **kwargs)
            after = self.dataset.shape
            self.ctx.setdefault("log", []).append(f"{step_name}: {before} -> {after}")
            return out
        return wrapper
    return deco

def safe_step(func):
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except Exception as e:
            self.ctx.setdefault("errors", []).append(f"{self.__class__.__name__}: {type(e).__name__}: {e}")
            raise
    return wrapper

def transition(*allowed: Stage, to: Stage):
    def deco(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            if self.stage not in allowed:
                names = ", ".join(s.value for s in allowed)
                raise PipelineStateError(f"{func.__name__}() needs stage {names}; pipeline is {self.stage.value}")
            out = func(self, *args, **kwargs)
            self.stage = to
            return out
        return wrapper
    return deco

# =========================
# Pipeline
# =========================

class ListingPipeline:
    def __init__(self, dataset: pd.DataFrame):
        self.dataset = dataset
        self.stage = Stage.LOADED
        self.criteria: Optional[FilterCriteria] = None
        self.stats: Optional[Stats] = None
        self.ranking: List[HostRankEntry] = []
        self.ctx: Dict[str, Any] = {}

    @classmethod
    def from_csv(cls, path: PathLike) -> "ListingPipeline":
        pipeline = cls(read_listings(path))
        pipeline.ctx.setdefault("log", []).append(f"Loaded {path} shape={pipeline.dataset.shape}")
        return pipeline

    @timeit("filter")
    @log_step("filter")
    @safe_step
    @transition(Stage.LOADED, to=Stage.FILTERED)
    def filter(self, criteria: FilterCriteria) -> pd.DataFrame:
        self.criteria = criteria
        self.dataset = filter_listings(self.dataset, criteria)
        LOG.info("Number of listings found: %s", len(self.dataset))
        return self.dataset

    @timeit("compute_stats")
    @log_step("compute_stats")
    @safe_step
    @transition(Stage.FILTERED, to=Stage.STATS_COMPUTED)
    def compute_stats(self) -> Stats:
        self.dataset, self.stats = compute_stats(self.dataset)
        LOG.info("Statistics computed over %s listings", self.stats.count)
        return self.stats

    @timeit("rank_hosts")
    @log_step("rank_hosts")
    @safe_step
    @transition(Stage.STATS_COMPUTED, to=Stage.RANKED)
    def rank_hosts(self, limit: int = DEFAULT_LIMIT) -> List[HostRankEntry]:
        self.ranking = rank_hosts(self.dataset, limit=limit)
        LOG.info("Ranked %s hosts (limit %s)", len(self.ranking), limit)
        return self.ranking

    @timeit("order")
    @log_step("order")
    @safe_step
    @transition(Stage.RANKED, to=Stage.ORDERED)
    def order(self, field: str) -> pd.DataFrame:
        LOG.info("Before ordering, %s", describe_ends(self.dataset, field))
        self.dataset = order_listings(self.dataset, field)
        LOG.info("After ordering, %s", describe_ends(self.dataset, field))
        return self.dataset

    @timeit("export")
    @log_step("export")
    @safe_step
    @transition(Stage.RANKED, Stage.ORDERED, to=Stage.EXPORTED)
    def export(self, path: PathLike) -> Path:
        return write_listings(self.dataset, path)

    def write_changelog(self, path: PathLike) -> Path:
        out = Path(path)
        with open(out, "w", encoding="utf-8") as f:
            f.write("\n".join(self.ctx.get("log", [])))
            if self.ctx.get("errors"):
                f.write("\n\nErrors:\n")
                for err in self.ctx["errors"]:
                    f.write(f"- {err}\n")
        return out


def run_pipeline(
    pipeline: ListingPipeline,
    source: ConfigSource,
    top_hosts: int = DEFAULT_LIMIT,
    report: Optional[Callable[[ListingPipeline], None]] = None,
) -> ListingPipeline:
    """
    Drive every stage in order, asking ``source`` for values when a stage needs them.
    ``report`` sees the pipeline once hosts are ranked, before the order/output questions.
    """
    pipeline.filter(source.filter_criteria())
    pipeline.compute_stats()
    pipeline.rank_hosts(top_hosts)
    if report is not None:
        report(pipeline)

    field = source.order_field()
    if field:
        pipeline.order(field)

    path = source.output_path()
    if path:
        pipeline.export(path)
    else:
        LOG.info("No output path given; skipping export")
    return pipeline
