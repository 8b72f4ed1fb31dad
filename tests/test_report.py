"""
Tests for listing_stats/report - report text, parsing it back, and export.
"""

import pytest

from listing_stats.config import ReportConfig
from listing_stats.exceptions import ReportFormatError, ReportWriteError
from listing_stats.report.formatter import (
    format_price,
    format_report,
    format_stats_summary,
    parse_report,
)
from listing_stats.report.writer import write_report
from listing_stats.stats.aggregator import HostCount, Statistics


@pytest.fixture
def multi_host_stats():
    return Statistics(
        total_listings=6,
        average_price=143.25,
        ranked_hosts=(
            HostCount('h1', 3),
            HostCount('h2', 2),
            HostCount('h3', 1),
        ),
    )


@pytest.fixture
def empty_stats():
    return Statistics(total_listings=0, average_price=None, ranked_hosts=())


class TestFormatReport:
    """Report layout."""

    def test_layout(self, multi_host_stats):
        assert format_report(multi_host_stats) == (
            "Total Listings: 6\n"
            "Average Price: $143.25\n"
            "\n"
            "Ranked Hosts:\n"
            "Host ID: h1, Listings: 3\n"
            "Host ID: h2, Listings: 2\n"
            "Host ID: h3, Listings: 1"
        )

    def test_two_decimals(self):
        assert format_price(175) == '$175.00'
        assert format_price(99.999) == '$100.00'

    def test_empty_uses_placeholder(self, empty_stats):
        assert format_report(empty_stats) == (
            "Total Listings: 0\n"
            "Average Price: N/A\n"
            "\n"
            "Ranked Hosts:"
        )

    def test_custom_currency_and_placeholder(self, empty_stats):
        config = ReportConfig(currency_symbol='€', average_placeholder='-')
        assert format_price(12.5, config) == '€12.50'
        assert "Average Price: -" in format_report(empty_stats, config)

    def test_summary_lists_hosts_in_rank_order(self, multi_host_stats):
        summary = format_stats_summary(multi_host_stats)
        assert summary.index('h1') < summary.index('h2') < summary.index('h3')
        assert 'Average Price: $143.25' in summary

    def test_summary_empty(self, empty_stats):
        assert '(none)' in format_stats_summary(empty_stats)


class TestParseReport:
    """Reading report text back."""

    def test_round_trip(self, multi_host_stats):
        assert parse_report(format_report(multi_host_stats)) == multi_host_stats

    def test_round_trip_empty(self, empty_stats):
        assert parse_report(format_report(empty_stats)) == empty_stats

    def test_host_id_with_separator_text(self):
        stats = Statistics(1, 10.0, (HostCount('a, b', 1),))
        assert parse_report(format_report(stats)) == stats

    def test_host_id_with_line_break(self):
        stats = Statistics(2, 1.0, (HostCount('a\nb', 1), HostCount('c\\n\r', 1)))
        text = format_report(stats)
        assert len(text.split("\n")) == 6
        assert "Host ID: a\\nb, Listings: 1" in text
        assert parse_report(text) == stats

    def test_trailing_newline_accepted(self, multi_host_stats):
        assert parse_report(format_report(multi_host_stats) + "\n") == multi_host_stats

    @pytest.mark.parametrize('text', [
        "",
        "Total Listings: x\nAverage Price: $1.00\n\nRanked Hosts:",
        "Total Listings: 1\nAverage Price: cheap\n\nRanked Hosts:",
        "Total Listings: 1\nAverage Price: $1.00\nRanked Hosts:\nHost ID: a, Listings: 1",
        "Total Listings: 1\nAverage Price: $1.00\n\nRanked Hosts:\nHost a has 1",
    ])
    def test_malformed(self, text):
        with pytest.raises(ReportFormatError):
            parse_report(text)


class TestWriteReport:
    """Report export."""

    def test_writes_text(self, tmp_path, multi_host_stats):
        path = write_report(format_report(multi_host_stats), tmp_path / 'report.txt')
        assert path.read_text(encoding='utf-8') == format_report(multi_host_stats)

    def test_overwrites_existing(self, tmp_path):
        path = tmp_path / 'report.txt'
        path.write_text('old content that is much longer than the new one', encoding='utf-8')
        write_report('new', path)
        assert path.read_text(encoding='utf-8') == 'new'

    def test_creates_parent_directories(self, tmp_path):
        path = write_report('x', tmp_path / 'out' / 'nested' / 'report.txt')
        assert path.exists()

    def test_unwritable_destination_raises(self, tmp_path):
        with pytest.raises(ReportWriteError) as exc_info:
            write_report('x', tmp_path)  # a directory
        assert exc_info.value.stage == 'export'
