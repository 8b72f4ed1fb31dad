#!/usr/bin/env python
"""
Filter a listings file and export a host report.

Usage:
    python entrypoint/report.py                       # Prompt for everything
    python entrypoint/report.py --csv listings.csv    # Prompt for filters and output
    python entrypoint/report.py --csv listings.csv --output report.txt \\
        --min-price 50 --max-price 300 --min-rooms 1 --max-rooms 3 --min-rating 90
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse
import logging

from listing_stats.config import ReportConfig
from listing_stats.exceptions import ListingStatsError
from listing_stats.filters.criteria import prompt_filter_criteria
from listing_stats.pipeline import ListingReportPipeline
from listing_stats.report.formatter import format_stats_summary

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Filter rental listings and export a host report')
    parser.add_argument('--csv', type=str, help='Path to the listings CSV file')
    parser.add_argument('--output', type=str, help='Path of the report file to write')
    parser.add_argument('--min-price', type=str, help='Minimum price')
    parser.add_argument('--max-price', type=str, help='Maximum price')
    parser.add_argument('--min-rooms', type=str, help='Minimum number of bedrooms')
    parser.add_argument('--max-rooms', type=str, help='Maximum number of bedrooms')
    parser.add_argument('--min-rating', type=str, help='Minimum review score')
    parser.add_argument('--delimiter', type=str, default=',', help='Field delimiter of the listings file')
    parser.add_argument('--verbose', action='store_true', help='Log each pipeline step')
    return parser


def main(argv=None, ask=input) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(message)s'
    )

    config = ReportConfig(delimiter=args.delimiter, verbose=args.verbose)
    pipeline = ListingReportPipeline(config)

    stage = 'load'
    try:
        csv_path = args.csv or ask('Enter the path to the CSV file: ')

        try:
            listings = pipeline.load(csv_path)
        except ListingStatsError as e:
            logger.error(f"Error loading data ({e.stage} failed): {e}")
            return 1

        stage = 'filter'
        criteria = prompt_filter_criteria(
            ask,
            min_price=args.min_price,
            max_price=args.max_price,
            min_rooms=args.min_rooms,
            max_rooms=args.max_rooms,
            min_rating=args.min_rating,
        )

        stats = pipeline.summarize(listings, criteria)
        print(format_stats_summary(stats, config))

        stage = 'export'
        output_path = args.output or ask('Enter the export file path: ')
    except (EOFError, KeyboardInterrupt):
        logger.error(f"Input closed before all values were entered ({stage} failed)")
        return 1

    try:
        pipeline.export(stats, output_path)
    except ListingStatsError as e:
        logger.error(f"Error exporting report ({e.stage} failed): {e}")
        return 1

    print("Data exported successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
