"""Filter, summarise, rank and export short-term rental listings."""

from listing_processor.filtering import filter_listings
from listing_processor.models import FilterCriteria, HostRankEntry, Stats
from listing_processor.numeric import extract, numeric_column
from listing_processor.ordering import order_listings
from listing_processor.pipeline import ListingPipeline, PipelineStateError, Stage, run_pipeline
from listing_processor.ranking import rank_hosts
from listing_processor.records import InputReadError, OutputWriteError, read_listings, write_listings
from listing_processor.stats import compute_stats

__version__ = "1.0.0"
