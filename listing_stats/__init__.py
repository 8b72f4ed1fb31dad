"""
Listing Stats - filter rental listings and report on what is left.

Modules:
- data: Loading and record parsing
- filters: Price / rooms / rating filters
- stats: Listing count, average price, host ranking
- report: Report text and export
- pipeline: End-to-end run
"""
from .config import ReportConfig
from .exceptions import (
    ListingStatsError,
    SourceUnreadableError,
    MissingFieldError,
    ReportWriteError,
    ReportFormatError,
)
from .filters import FilterCriteria, prompt_filter_criteria
from .stats import HostCount, Statistics
from .pipeline import ListingReportPipeline, run_report

__all__ = [
    'ReportConfig',
    'ListingStatsError',
    'SourceUnreadableError',
    'MissingFieldError',
    'ReportWriteError',
    'ReportFormatError',
    'FilterCriteria',
    'prompt_filter_criteria',
    'HostCount',
    'Statistics',
    'ListingReportPipeline',
    'run_report',
]
