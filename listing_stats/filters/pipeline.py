"""
Listing filters.

Each filter returns a new frame holding the surviving listings in their
original relative order; the input frame is never modified. Comparisons
against NaN are False, so a listing whose field did not parse is excluded by
any filter on that field, whatever the bounds.
"""

import logging

import pandas as pd

from listing_stats.config import PRICE_COLUMN, ROOMS_COLUMN, RATING_COLUMN
from listing_stats.filters.criteria import FilterCriteria

logger = logging.getLogger(__name__)


def _between(listings: pd.DataFrame, column: str, lower: float, upper: float) -> pd.DataFrame:
    values = listings[column]
    mask = (values >= lower) & (values <= upper)
    return listings.loc[mask.to_numpy()]


def filter_by_price(listings: pd.DataFrame, min_price: float, max_price: float) -> pd.DataFrame:
    """Keep listings with min_price <= price <= max_price."""
    return _between(listings, PRICE_COLUMN, min_price, max_price)


def filter_by_rooms(listings: pd.DataFrame, min_rooms: float, max_rooms: float) -> pd.DataFrame:
    """Keep listings with min_rooms <= bedrooms <= max_rooms."""
    return _between(listings, ROOMS_COLUMN, min_rooms, max_rooms)


def filter_by_rating(listings: pd.DataFrame, min_rating: float) -> pd.DataFrame:
    """Keep listings rated at least min_rating. There is no upper bound."""
    mask = listings[RATING_COLUMN] >= min_rating
    return listings.loc[mask.to_numpy()]


def apply_filters(listings: pd.DataFrame, criteria: FilterCriteria) -> pd.DataFrame:
    """
    Run the three filters in order: price, rooms, rating.

    Args:
        listings: Parsed listings frame
        criteria: Bounds for each filter

    Returns:
        Listings satisfying all three filters
    """
    logger.info(f"Filtering {len(listings):,} listings...")

    filtered = filter_by_price(listings, criteria.min_price, criteria.max_price)
    logger.info(f"  • Price {criteria.min_price:g}-{criteria.max_price:g}: {len(filtered):,} remain")

    filtered = filter_by_rooms(filtered, criteria.min_rooms, criteria.max_rooms)
    logger.info(f"  • Rooms {criteria.min_rooms:g}-{criteria.max_rooms:g}: {len(filtered):,} remain")

    filtered = filter_by_rating(filtered, criteria.min_rating)
    logger.info(f"  • Rating >= {criteria.min_rating:g}: {len(filtered):,} remain")

    return filtered
