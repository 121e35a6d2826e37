"""Command-line interface for the ESPN fighter crawler."""

import argparse
import logging
import sys
import time
from pathlib import Path

from .crawler import DEFAULT_SEED, CrawlConfig, FighterCrawler
from .storage import FighterStorage

logger = logging.getLogger(__name__)


def main():
    """Run the crawler CLI."""
    parser = argparse.ArgumentParser(description="Crawl ESPN MMA fighter pages")
    parser.add_argument(
        "command",
        choices=["crawl", "stats"],
        help="Command to run",
    )
    parser.add_argument(
        "--seed",
        action="append",
        help=f"Entry URL, may be repeated (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory for fighters.json (default: ./data)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=8,
        help="Concurrent page visits (default: 8)",
    )
    parser.add_argument(
        "--max-pages",
        type=int,
        help="Stop dispatching after this many pages",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=1.0,
        help="Minimum delay between requests in seconds (default: 1.0)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log skipped pages and malformed rows",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    storage = FighterStorage(args.output_dir)

    if args.command == "stats":
        stats = storage.get_stats()
        print(f"Fighters:      {stats['fighters']}")
        print(f"Fights:        {stats['fights']}")
        print(f"Striking rows: {stats['striking_rows']}")
        print(f"Clinch rows:   {stats['clinch_rows']}")
        print(f"Ground rows:   {stats['ground_rows']}")
        return

    config = CrawlConfig(
        max_workers=args.workers,
        max_pages=args.max_pages,
        delay_seconds=args.delay,
    )
    crawler = FighterCrawler(config=config)

    start = time.time()
    fighters = crawler.crawl(args.seed or [DEFAULT_SEED])

    try:
        path = storage.save_fighters(fighters)
    except OSError as e:
        logger.error(f"Could not write output to {storage.fighters_file}: {e}")
        sys.exit(1)

    print(f"Wrote {len(fighters)} fighters to {path}")
    print(f"Execution time: {time.time() - start:.1f}s")


if __name__ == "__main__":
    main()
