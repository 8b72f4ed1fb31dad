"""
Record parsing: raw listing rows (all text) into a typed listings frame.

Numeric conversion is loose: the longest leading numeric prefix of the text is
used ("4.5 stars" -> 4.5, "2.5" bedrooms -> 2). Text with no numeric prefix
becomes NaN. Rows are never dropped here; NaN values fail every comparison in
the filters, so those listings are excluded downstream.
"""

import logging
import re
from typing import Iterable, Mapping, Optional, Union

import numpy as np
import pandas as pd

from listing_stats.config import (
    PRICE_COLUMN,
    ROOMS_COLUMN,
    RATING_COLUMN,
    HOST_COLUMN,
    REQUIRED_COLUMNS,
    ReportConfig,
)
from listing_stats.exceptions import MissingFieldError

logger = logging.getLogger(__name__)

_DECIMAL_PREFIX = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
_INTEGER_PREFIX = re.compile(r'^[+-]?\d+')
_INFINITY = re.compile(r"^([+-]?)inf(?:inity)?\b", re.IGNORECASE)

RawRows = Union[pd.DataFrame, Iterable[Mapping[str, str]]]


def _leading_number(text, pattern: re.Pattern) -> float:
    if text is None:
        return np.nan
    if isinstance(text, (int, float, np.number)):
        return float(text)
    match = pattern.match(str(text).strip())
    if match is None:
        return np.nan
    return float(match.group(0))


def parse_decimal(text) -> float:
    """
    Leading decimal of `text`, NaN if there is none.

    "Infinity" / "inf" (optionally signed) give +/- infinity, so open-ended
    bounds can be typed as text.
    """
    if isinstance(text, str):
        match = _INFINITY.match(text.strip())
        if match is not None:
            return -np.inf if match.group(1) == '-' else np.inf
    return _leading_number(text, _DECIMAL_PREFIX)


def parse_integer(text) -> float:
    """Leading integer of `text` as a float, NaN if there is none."""
    return _leading_number(text, _INTEGER_PREFIX)


def parse_price(text, currency_symbol: str = '$', thousands_separator: str = ',') -> float:
    """
    Parse a price such as "$1,250.00".

    One occurrence of the currency symbol is removed, then any thousands
    separators, then the remainder is converted like any other decimal.
    """
    if text is None:
        return np.nan
    if isinstance(text, (int, float, np.number)):
        return float(text)
    cleaned = str(text).strip()
    if currency_symbol:
        cleaned = cleaned.replace(currency_symbol, '', 1)
    if thousands_separator:
        cleaned = cleaned.replace(thousands_separator, '')
    return parse_decimal(cleaned)


def parse_rooms(text) -> float:
    return parse_integer(text)


def parse_rating(text) -> float:
    return parse_decimal(text)


def parse_listings(rows: RawRows, config: Optional[ReportConfig] = None) -> pd.DataFrame:
    """
    Convert raw rows into a typed listings frame.

    Args:
        rows: DataFrame of text columns, or an iterable of field-name -> text mappings
        config: Parsing options (currency symbol, thousands separator)

    Returns:
        New DataFrame, one row per input row in input order, with float columns
        price / bedrooms / review_scores_rating, host_id as text and every
        other source column untouched.

    Raises:
        MissingFieldError: a required field is absent from the source
    """
    config = config or ReportConfig()

    if isinstance(rows, pd.DataFrame):
        raw = rows.copy()
    else:
        records = list(rows)
        if records:
            raw = pd.DataFrame.from_records(records)
        else:
            raw = pd.DataFrame(columns=list(REQUIRED_COLUMNS), dtype=str)

    missing = [col for col in REQUIRED_COLUMNS if col not in raw.columns]
    if missing:
        raise MissingFieldError(missing)

    listings = raw.reset_index(drop=True)
    listings[PRICE_COLUMN] = [
        parse_price(value, config.currency_symbol, config.thousands_separator)
        for value in raw[PRICE_COLUMN]
    ]
    listings[ROOMS_COLUMN] = [parse_rooms(value) for value in raw[ROOMS_COLUMN]]
    listings[RATING_COLUMN] = [parse_rating(value) for value in raw[RATING_COLUMN]]
    listings[HOST_COLUMN] = raw[HOST_COLUMN].fillna('').astype(str).to_numpy()

    for col in (PRICE_COLUMN, ROOMS_COLUMN, RATING_COLUMN):
        listings[col] = listings[col].astype('float64')
        n_invalid = int(listings[col].isna().sum())
        if n_invalid:
            logger.info(f"  • {n_invalid:,} unparseable '{col}' value(s) will never pass a {col} filter")

    logger.debug(f"Parsed {len(listings):,} listings")
    return listings
