"""
Summary statistics over a (filtered) listings frame.

Statistics are plain frozen dataclasses so two runs over the same listings
compare equal.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np
import pandas as pd

from listing_stats.config import PRICE_COLUMN, HOST_COLUMN


@dataclass(frozen=True)
class HostCount:
    """Number of listings one host has in the result set."""
    host_id: str
    count: int


@dataclass(frozen=True)
class Statistics:
    """Aggregates for one report."""
    total_listings: int
    average_price: Optional[float]  # None when there are no listings
    ranked_hosts: Tuple[HostCount, ...]

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            'total_listings': self.total_listings,
            'average_price': self.average_price,
            'ranked_hosts': [
                {'host_id': host.host_id, 'count': host.count}
                for host in self.ranked_hosts
            ],
        }


def rank_hosts(listings: pd.DataFrame) -> Tuple[HostCount, ...]:
    """
    Count listings per host, most listings first.

    Hosts with the same count keep the order in which they first appear in
    `listings`.
    """
    counts = listings.groupby(HOST_COLUMN, sort=False, dropna=False).size()
    counts = counts.sort_values(ascending=False, kind='stable')
    return tuple(HostCount(host_id=str(host_id), count=int(n)) for host_id, n in counts.items())


def average_price(listings: pd.DataFrame) -> Optional[float]:
    """
    Mean price, or None for an empty frame.

    A NaN price among the listings makes the mean NaN. After `filter_by_price`
    that cannot happen.
    """
    if len(listings) == 0:
        return None
    prices = listings[PRICE_COLUMN].to_numpy(dtype='float64')
    return float(np.sum(prices) / len(prices))


def compute_stats(listings: pd.DataFrame) -> Statistics:
    """
    Compute total count, average price and host ranking.

    Args:
        listings: Listings frame, usually the output of `apply_filters`

    Returns:
        Statistics
    """
    return Statistics(
        total_listings=int(len(listings)),
        average_price=average_price(listings),
        ranked_hosts=rank_hosts(listings),
    )
