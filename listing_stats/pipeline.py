"""
End-to-end listing report pipeline.

Steps:
1. Load raw rows (file path or a callable returning rows)
2. Parse rows into typed listings
3. Filter by price, rooms, rating (in that order)
4. Aggregate statistics
5. Show statistics (display callback)
6. Render and write the report

A load failure stops the run before filter parameters are requested. A write
failure happens after the statistics have already been displayed.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Mapping, Optional, Union

import pandas as pd

from listing_stats.config import ReportConfig
from listing_stats.data.loader import load_raw_listings
from listing_stats.data.parsing import parse_listings
from listing_stats.exceptions import SourceUnreadableError
from listing_stats.filters.criteria import FilterCriteria
from listing_stats.filters.pipeline import apply_filters
from listing_stats.report.formatter import format_report
from listing_stats.report.writer import write_report
from listing_stats.stats.aggregator import Statistics, compute_stats

logger = logging.getLogger(__name__)

RowSource = Union[str, Path, Callable[[], Union[pd.DataFrame, Iterable[Mapping[str, str]]]]]
CriteriaSource = Union[FilterCriteria, Callable[[], FilterCriteria]]


class ListingReportPipeline:
    """
    Load → filter → aggregate → report.

    Usage:
        pipeline = ListingReportPipeline()
        stats = pipeline.run('listings.csv', criteria, 'report.txt', display=print)
    """

    def __init__(self, config: Optional[ReportConfig] = None):
        self.config = config or ReportConfig()

    def load(self, source: RowSource) -> pd.DataFrame:
        """
        Load and parse listings.

        Raises:
            SourceUnreadableError: source cannot be read or lacks required fields
        """
        if callable(source):
            try:
                rows = source()
            except OSError as e:
                raise SourceUnreadableError(f"Could not read listings: {e}") from e
        else:
            rows = load_raw_listings(source, self.config)
        return parse_listings(rows, self.config)

    def summarize(self, listings: pd.DataFrame, criteria: FilterCriteria) -> Statistics:
        """Filter listings and aggregate the survivors."""
        filtered = apply_filters(listings, criteria)
        return compute_stats(filtered)

    def export(self, stats: Statistics, output_path: Union[str, Path]) -> Path:
        """
        Render and write the report.

        Raises:
            ReportWriteError: report could not be written
        """
        text = format_report(stats, self.config)
        return write_report(text, output_path, self.config.encoding)

    def run(
        self,
        source: RowSource,
        criteria: CriteriaSource,
        output_path: Union[str, Path],
        display: Optional[Callable[[Statistics], None]] = None
    ) -> Statistics:
        """
        Run every step.

        Args:
            source: Listings file path, or a callable returning raw rows
            criteria: FilterCriteria, or a callable producing one; a callable
                is only invoked once the listings have loaded
            output_path: Report destination, overwritten
            display: Receives the statistics before the report is written

        Returns:
            Statistics
        """
        if self.config.verbose:
            logger.info("=" * 70)
            logger.info("LISTING REPORT")
            logger.info("=" * 70)

        listings = self.load(source)

        if callable(criteria):
            criteria = criteria()

        stats = self.summarize(listings, criteria)
        if display is not None:
            display(stats)

        self.export(stats, output_path)
        return stats


def run_report(
    source: RowSource,
    criteria: CriteriaSource,
    output_path: Union[str, Path],
    display: Optional[Callable[[Statistics], None]] = None,
    config: Optional[ReportConfig] = None
) -> Statistics:
    """Run the full pipeline with a one-off ListingReportPipeline."""
    return ListingReportPipeline(config).run(source, criteria, output_path, display)
