"""
Report rendering.

Layout:

    Total Listings: 2
    Average Price: $175.00

    Ranked Hosts:
    Host ID: A, Listings: 1
    Host ID: B, Listings: 1

`parse_report` reads the same layout back into Statistics.
"""

import re
from typing import List, Optional

from listing_stats.config import TOTAL_LABEL, AVERAGE_LABEL, HOSTS_LABEL, ReportConfig
from listing_stats.exceptions import ReportFormatError
from listing_stats.stats.aggregator import HostCount, Statistics

_HOST_LINE = re.compile(r'^Host ID: (?P<host_id>.*), Listings: (?P<count>\d+)$')


def format_price(value: Optional[float], config: Optional[ReportConfig] = None) -> str:
    """Price with two decimals and currency symbol, or the placeholder when undefined."""
    config = config or ReportConfig()
    if value is None:
        return config.average_placeholder
    return f"{config.currency_symbol}{value:.2f}"


_HOST_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r"}
_HOST_UNESCAPES = {"n": "\n", "r": "\r"}


def _escape_host_id(host_id: str) -> str:
    return "".join(_HOST_ESCAPES.get(ch, ch) for ch in host_id)


def _unescape_host_id(text: str) -> str:
    return re.sub(r"\\(.)", lambda m: _HOST_UNESCAPES.get(m.group(1), m.group(1)), text)


def format_host_line(host: HostCount) -> str:
    """One report line per host. Line breaks and backslashes in the id are escaped."""
    return f"Host ID: {_escape_host_id(host.host_id)}, Listings: {host.count}"


def format_report(stats: Statistics, config: Optional[ReportConfig] = None) -> str:
    """
    Render Statistics as report text.

    Args:
        stats: Aggregated statistics
        config: Currency symbol and placeholder

    Returns:
        Report text, hosts in ranked order, no trailing newline
    """
    lines = [
        f"{TOTAL_LABEL}: {stats.total_listings}",
        f"{AVERAGE_LABEL}: {format_price(stats.average_price, config)}",
        "",
        f"{HOSTS_LABEL}:",
    ]
    lines.extend(format_host_line(host) for host in stats.ranked_hosts)
    return "\n".join(lines)


def format_stats_summary(stats: Statistics, config: Optional[ReportConfig] = None) -> str:
    """Console summary of the same values, for interactive runs."""
    lines = [
        f"{TOTAL_LABEL}: {stats.total_listings:,}",
        f"{AVERAGE_LABEL}: {format_price(stats.average_price, config)}",
        f"{HOSTS_LABEL}:",
    ]
    if not stats.ranked_hosts:
        lines.append("  (none)")
    for rank, host in enumerate(stats.ranked_hosts, start=1):
        lines.append(f"  {rank:>3}. {host.host_id} ({host.count} listing{'s' if host.count != 1 else ''})")
    return "\n".join(lines)


def _value_after_label(line: str, label: str) -> str:
    prefix = f"{label}:"
    if not line.startswith(prefix):
        raise ReportFormatError(f"Expected line starting with '{prefix}', got: {line!r}")
    return line[len(prefix):].strip()


def parse_report(text: str, config: Optional[ReportConfig] = None) -> Statistics:
    """
    Parse report text produced by `format_report` back into Statistics.

    Raises:
        ReportFormatError: text does not follow the report layout
    """
    config = config or ReportConfig()
    if text.endswith("\n"):
        text = text[:-1]
    lines = text.split("\n")
    if len(lines) < 4:
        raise ReportFormatError(f"Report too short: {len(lines)} line(s)")

    total_text = _value_after_label(lines[0], TOTAL_LABEL)
    if not total_text.isdigit():
        raise ReportFormatError(f"Invalid total listings: {total_text!r}")

    average_text = _value_after_label(lines[1], AVERAGE_LABEL)
    if average_text == config.average_placeholder:
        average = None
    else:
        if config.currency_symbol and average_text.startswith(config.currency_symbol):
            average_text = average_text[len(config.currency_symbol):]
        try:
            average = float(average_text)
        except ValueError as e:
            raise ReportFormatError(f"Invalid average price: {lines[1]!r}") from e

    if lines[2] != "" or lines[3] != f"{HOSTS_LABEL}:":
        raise ReportFormatError("Missing ranked hosts section")

    hosts: List[HostCount] = []
    for line in lines[4:]:
        match = _HOST_LINE.match(line)
        if match is None:
            raise ReportFormatError(f"Invalid host line: {line!r}")
        hosts.append(HostCount(host_id=_unescape_host_id(match.group('host_id')), count=int(match.group('count'))))

    return Statistics(
        total_listings=int(total_text),
        average_price=average,
        ranked_hosts=tuple(hosts),
    )
