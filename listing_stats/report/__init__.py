"""Report rendering and export."""
from .formatter import (
    format_price,
    format_report,
    format_stats_summary,
    parse_report,
)
from .writer import write_report
