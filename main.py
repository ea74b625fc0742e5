#!/usr/bin/env python3
"""
Learning Portfolio - command-line report.

Loads the portfolio data file and prints the categories the home page would
surface, with their depth and drip percentage.

Usage:
    python main.py                      # Home page ranking
    python main.py --all                # Every category in display order
    python main.py --limit 2            # Only the two most recent categories
    python main.py --data other.json    # Use another data file
    python main.py --show-config        # Show configuration and exit
"""

import argparse
import logging
import sys

from portfolio import __version__
from portfolio.config import (
    HOME_CATEGORY_LIMIT,
    LOG_LEVEL,
    PORTFOLIO_DATA_PATH,
    print_config_summary,
    validate_config,
)
from portfolio.scoring import (
    RankedCategory,
    drip_percent,
    max_depth,
    portfolio_overview,
    rank_active_categories,
)
from portfolio.storage import InMemoryStorage


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="learning-portfolio",
        description="Score learning categories and show what the home page surfaces.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                       Home page ranking with defaults
  %(prog)s --all                 Every category in manual display order
  %(prog)s --limit 2             Show only the two most recent categories
  %(prog)s --data seed.json -v   Use another data file, with debug logging
        """,
    )

    parser.add_argument(
        "--data", "-d",
        default=None,
        metavar="PATH",
        help=f"Portfolio JSON file (default: {PORTFOLIO_DATA_PATH})",
    )

    parser.add_argument(
        "--limit", "-l",
        type=int,
        default=None,
        metavar="N",
        help=f"Maximum categories to show (default: {HOME_CATEGORY_LIMIT})",
    )

    parser.add_argument(
        "--all", "-a",
        action="store_true",
        help="Show every category in display order instead of the home ranking",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print the table",
    )

    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def show_config() -> None:
    """Display current configuration."""
    print("=" * 60)
    print("Learning Portfolio Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration warnings:")
        for error in errors:
            print(f"  ⚠️  {error}")
    else:
        print("\n✓ Configuration valid")
    print("=" * 60)


def format_table(ranked: list[RankedCategory]) -> str:
    """Render ranked categories as a fixed-width table."""
    basis = max_depth(ranked)
    lines = [
        f"{'#':>2}  {'Category':<24} {'Moments':>7} {'Last':>10} {'Depth':>7} {'Drip':>6}",
        "-" * 62,
    ]
    for index, r in enumerate(ranked, start=1):
        last = r.most_recent_occurred_at.isoformat() if r.most_recent_occurred_at else "-"
        lines.append(
            f"{index:>2}  {r.name[:24]:<24} {r.event_count:>7} {last:>10} "
            f"{r.depth:>7.2f} {drip_percent(r.depth, basis):>5.0f}%"
        )
    if not ranked:
        lines.append("  (no categories)")
    return "\n".join(lines)


def main(argv: list = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 = success, 1 = error).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.show_config:
        show_config()
        return 0

    limit = args.limit if args.limit is not None else HOME_CATEGORY_LIMIT
    if limit < 0:
        print("❌ --limit cannot be negative")
        return 1

    data_path = args.data or PORTFOLIO_DATA_PATH

    try:
        storage = InMemoryStorage.from_json(data_path)
    except FileNotFoundError:
        print(f"❌ Data file not found: {data_path}")
        return 1
    except ValueError as e:
        print(f"❌ Invalid data file: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130

    categories = storage.get_categories()

    if args.all:
        ranked = portfolio_overview(categories)
        heading = "All categories"
    else:
        ranked = rank_active_categories(categories, limit)
        heading = f"Home page categories (limit {limit})"

    if not args.quiet:
        print("=" * 62)
        print(f"Learning Portfolio - {heading}")
        print(f"Data: {data_path}")
        print("=" * 62)

    print(format_table(ranked))
    return 0


if __name__ == "__main__":
    sys.exit(main())
