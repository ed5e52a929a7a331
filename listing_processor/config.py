# -*- coding: utf-8 -*-
"""
config.py — environment-driven defaults for the listings processor.

Env
---
- LISTINGS_CSV        : input CSV path (default listings.csv)
- LISTINGS_LOG_LEVEL  : DEBUG/INFO/WARNING (default INFO)
- LISTINGS_TOP_HOSTS  : how many hosts to rank (default 10)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from listing_processor.ranking import DEFAULT_LIMIT

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def _int_or(raw: Optional[str], default: int) -> int:
    try:
        return int(raw) if raw is not None else default
    except ValueError:
        return default


@dataclass
class Settings:
    raw_path: Path = Path("listings.csv")
    log_level: str = "INFO"
    top_hosts: int = DEFAULT_LIMIT

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            raw_path=Path(env.get("LISTINGS_CSV", "listings.csv")),
            log_level=env.get("LISTINGS_LOG_LEVEL", "INFO").upper(),
            top_hosts=_int_or(env.get("LISTINGS_TOP_HOSTS"), DEFAULT_LIMIT),
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
