# -*- coding: utf-8 -*-
"""
Interactive listings processor.

Reads the listings CSV, asks for price / rooms / review-score ranges, prints
statistics and the top hosts, then optionally orders and saves the result.

Exit codes:
  0 = OK
  1 = input could not be read, or the run failed
"""

import argparse
import logging
import math
import sys
from typing import List, Optional

from listing_processor.config import Settings, configure_logging
from listing_processor.models import HostRankEntry, Stats
from listing_processor.pipeline import ListingPipeline, run_pipeline
from listing_processor.prompts import PromptConfig, StaticConfig
from listing_processor.records import InputReadError

LOG = logging.getLogger("listings")


def _fmt(value: float) -> str:
    return "NaN" if math.isnan(value) else str(value)


def format_stats(stats: Stats) -> List[str]:
    return [
        "Statistics:",
        f"Number of valid listings (valid host_id): {stats.valid_listings}",
        f"Average price: {_fmt(stats.average_price)}",
        f"Average price per room: {_fmt(stats.avg_price_per_room)}",
    ]


def format_ranking(ranking: List[HostRankEntry], limit: int) -> List[str]:
    lines = [f"Top {limit} hosts by number of listings:"]
    for i, entry in enumerate(ranking, start=1):
        lines.append(f"{i}. {entry.host_name} (id: {entry.host_id}): {entry.count} listings")
    return lines


def _parse_args(argv: Optional[List[str]] = None, settings: Optional[Settings] = None):
    settings = settings or Settings.from_env()
    p = argparse.ArgumentParser(description="Filter, summarise, rank and export Airbnb listings")
    p.add_argument("--raw", default=str(settings.raw_path), help="Path to listings CSV input")
    p.add_argument("--top", type=int, default=settings.top_hosts, help="How many hosts to rank")
    p.add_argument("--price", default=None, help="Price range as 'min,max'")
    p.add_argument("--rooms", default=None, help="Bedroom range as 'min,max'")
    p.add_argument("--score", default=None, help="Review score range as 'min,max'")
    p.add_argument("--order", default=None, help="Field to sort by (ascending)")
    p.add_argument("--out", default=None, help="Where to save the filtered CSV")
    p.add_argument("--no-prompt", action="store_true", help="Never ask; missing answers count as empty")
    p.add_argument("--changelog", default=None, help="Write the step log to this file")
    p.add_argument("--log-level", default=settings.log_level, help="DEBUG/INFO/WARNING")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.log_level)

    given = dict(price=args.price, rooms=args.rooms, score=args.score, order=args.order, output=args.out)
    source = StaticConfig(**given) if args.no_prompt else PromptConfig(**given)

    def report(pipeline: ListingPipeline) -> None:
        print("\n".join(format_stats(pipeline.stats)))
        print()
        print("\n".join(format_ranking(pipeline.ranking, args.top)))

    try:
        pipeline = ListingPipeline.from_csv(args.raw)
    except InputReadError as e:
        LOG.error("Error reading the file: %s", e)
        return 1

    code = 0
    try:
        run_pipeline(pipeline, source, top_hosts=args.top, report=report)
    except Exception as e:
        LOG.error("Error running the application: %s: %s", type(e).__name__, e)
        code = 1

    if args.changelog:
        try:
            pipeline.write_changelog(args.changelog)
        except OSError as e:
            LOG.error("Error writing the changelog: %s", e)
            code = 1
        else:
            LOG.info("Changelog → %s", args.changelog)
    return code


if __name__ == "__main__":
    sys.exit(main())
