"""
Shared pytest fixtures for the listing report tests.
"""

import pytest
import pandas as pd

from listing_stats.data.parsing import parse_listings
from listing_stats.filters.criteria import FilterCriteria


@pytest.fixture
def scenario_rows():
    """Three listings: $100/1 bed/90, $250/2 beds/80, $400/3 beds/70; hosts A, B, A."""
    return [
        {'id': '1', 'price': '$100', 'bedrooms': '1', 'review_scores_rating': '90', 'host_id': 'A'},
        {'id': '2', 'price': '$250', 'bedrooms': '2', 'review_scores_rating': '80', 'host_id': 'B'},
        {'id': '3', 'price': '$400', 'bedrooms': '3', 'review_scores_rating': '70', 'host_id': 'A'},
    ]


@pytest.fixture
def scenario_criteria():
    """Price 100-300, rooms 1-2, rating >= 75."""
    return FilterCriteria(min_price=100, max_price=300, min_rooms=1, max_rooms=2, min_rating=75)


@pytest.fixture
def sample_raw_listings():
    """Raw listings as read from CSV (all text), including malformed values."""
    return pd.DataFrame({
        'id': ['1', '2', '3', '4', '5', '6', '7', '8', '9', '10'],
        'name': ['Loft', 'Studio', 'Villa', 'Flat', 'Cabin', 'Room', 'House', 'Suite', 'Attic', 'Barn'],
        'price': ['$120.00', '$85.00', '$1,450.00', 'call us', '$60.00', '$95.50', '', '$200.00', '$75.00', '$130.00'],
        'bedrooms': ['1', '1', '5', '2', '1', 'studio', '3', '2', '1', '2'],
        'review_scores_rating': ['95', '88', '99', '70', '', '91', '85', '4.8 stars', '92', '87'],
        'host_id': ['h1', 'h2', 'h3', 'h1', 'h2', 'h1', 'h4', 'h5', 'h2', 'h1'],
    })


@pytest.fixture
def sample_listings(sample_raw_listings):
    """Parsed version of sample_raw_listings."""
    return parse_listings(sample_raw_listings)


@pytest.fixture
def wide_criteria():
    """Bounds that admit every listing with parseable fields."""
    return FilterCriteria(
        min_price=float('-inf'),
        max_price=float('inf'),
        min_rooms=float('-inf'),
        max_rooms=float('inf'),
        min_rating=float('-inf'),
    )


@pytest.fixture
def listings_csv(tmp_path, sample_raw_listings):
    """sample_raw_listings written to a CSV file."""
    path = tmp_path / 'listings.csv'
    sample_raw_listings.to_csv(path, index=False)
    return path
