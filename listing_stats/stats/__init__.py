"""Listing statistics."""
from .aggregator import HostCount, Statistics, rank_hosts, average_price, compute_stats
