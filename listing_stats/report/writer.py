"""Report export."""

import logging
from pathlib import Path
from typing import Union

from listing_stats.exceptions import ReportWriteError

logger = logging.getLogger(__name__)


def write_report(text: str, file_path: Union[str, Path], encoding: str = 'utf-8') -> Path:
    """
    Write report text to `file_path`, replacing any existing content.

    Missing parent directories are created.

    Raises:
        ReportWriteError: the file could not be written
    """
    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding=encoding) as f:
            f.write(text)
    except OSError as e:
        raise ReportWriteError(f"Could not write report to {path}: {e}") from e

    logger.info(f"Report written to {path}")
    return path
