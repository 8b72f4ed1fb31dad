"""
Configuration for the listing report pipeline.

Column names, currency handling and report layout constants live here so the
loader, parser and formatter agree on one schema.
"""

from dataclasses import dataclass


# =============================================================================
# SOURCE SCHEMA
# =============================================================================

PRICE_COLUMN = 'price'
ROOMS_COLUMN = 'bedrooms'
RATING_COLUMN = 'review_scores_rating'
HOST_COLUMN = 'host_id'

# Fields every source row must expose
REQUIRED_COLUMNS = (PRICE_COLUMN, ROOMS_COLUMN, RATING_COLUMN, HOST_COLUMN)


# =============================================================================
# REPORT LAYOUT
# =============================================================================

DEFAULT_CURRENCY_SYMBOL = '$'
DEFAULT_PLACEHOLDER = 'N/A'  # Average price when no listings survive the filters

TOTAL_LABEL = 'Total Listings'
AVERAGE_LABEL = 'Average Price'
HOSTS_LABEL = 'Ranked Hosts'


@dataclass
class ReportConfig:
    """Configuration for loading listings and rendering the report."""
    delimiter: str = ','
    encoding: str = 'utf-8'
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    thousands_separator: str = ','  # Removed from prices before conversion; '' keeps it
    average_placeholder: str = DEFAULT_PLACEHOLDER
    verbose: bool = False
