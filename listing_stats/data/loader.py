"""
Data loading utilities for the listing report.

Reads a delimited listings file into a DataFrame of text columns. Typing is
left to `parsing.parse_listings` so malformed values degrade to NaN instead of
failing the load.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from listing_stats.config import ReportConfig
from listing_stats.exceptions import SourceUnreadableError

logger = logging.getLogger(__name__)


def load_raw_listings(
    file_path: Union[str, Path],
    config: Optional[ReportConfig] = None
) -> pd.DataFrame:
    """
    Load raw listing rows from a delimited text file.

    Every field is read as text; empty cells stay as empty strings.

    Args:
        file_path: Path to the CSV (or other delimited) file
        config: Delimiter and encoding

    Returns:
        DataFrame with one text column per source field, rows in file order

    Raises:
        SourceUnreadableError: file missing, unreadable, or not parseable
    """
    config = config or ReportConfig()
    path = Path(file_path)

    if not path.is_file():
        raise SourceUnreadableError(f"Listings file not found: {path}")

    try:
        raw = pd.read_csv(
            path,
            sep=config.delimiter,
            dtype=str,
            keep_default_na=False,
            encoding=config.encoding,
        )
    except pd.errors.EmptyDataError as e:
        raise SourceUnreadableError(f"Listings file is empty: {path}") from e
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise SourceUnreadableError(f"Could not read listings from {path}: {e}") from e

    raw.columns = [str(col).strip() for col in raw.columns]
    logger.info(f"Loaded {len(raw):,} rows from {path.name}")
    return raw
