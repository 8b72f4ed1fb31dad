"""Listing loading and record parsing."""
from .loader import load_raw_listings
from .parsing import (
    parse_decimal,
    parse_integer,
    parse_price,
    parse_rooms,
    parse_rating,
    parse_listings,
)
