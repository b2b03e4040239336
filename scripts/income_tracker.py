#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Dividend income tracker CLI

Usage:
    python scripts/income_tracker.py add 7203 100 75            # add / update a holding
    python scripts/income_tracker.py add KO 50 1.94 --name Coca-Cola
    python scripts/income_tracker.py remove 1718000000000       # delete by id
    python scripts/income_tracker.py list                       # full summary
    python scripts/income_tracker.py trend                      # income trend only
    python scripts/income_tracker.py lookup 8306                # name lookup
    python scripts/income_tracker.py --file /tmp/h.json list    # alternate store
"""

import sys
import argparse
import math
import logging
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import HOLDINGS_FILE
from portfolio.holdings.names import lookup_with_profile
from portfolio.holdings.storage import HoldingStore
from portfolio.income.report import generate_trend_table
from portfolio.income.tracker import IncomeTracker

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _parse_amount(raw: str, label: str) -> Optional[float]:
    """Finite non-negative number, or None after printing an error."""
    try:
        value = float(raw)
    except ValueError:
        print(f"Error: {label} must be a number, got {raw!r}")
        return None
    if not math.isfinite(value) or value < 0:
        print(f"Error: {label} must be a finite non-negative number, got {raw!r}")
        return None
    return value


def _build_tracker(args) -> IncomeTracker:
    return IncomeTracker(HoldingStore(Path(args.file)))


def cmd_add(args) -> int:
    ticker = args.ticker.strip().upper()
    if not ticker:
        print("Error: ticker must not be empty")
        return 1
    quantity = _parse_amount(args.quantity, "quantity")
    rate = _parse_amount(args.rate, "rate")
    if quantity is None or rate is None:
        return 1

    tracker = _build_tracker(args)
    holding = tracker.submit(ticker, args.name or "", quantity, rate)
    logger.info(f"{holding.ticker} saved ({len(holding.history)} rate records)")
    print(tracker.last_output)
    return 0


def cmd_remove(args) -> int:
    tracker = _build_tracker(args)
    removed = tracker.delete(args.id)
    if removed is None:
        logger.info(f"No holding with id {args.id}, nothing removed")
    print(tracker.last_output)
    return 0


def cmd_list(args) -> int:
    print(_build_tracker(args).render())
    return 0


def cmd_trend(args) -> int:
    tracker = _build_tracker(args)
    print(generate_trend_table(tracker.snapshots()))
    return 0


def cmd_lookup(args) -> int:
    name = lookup_with_profile(args.ticker)
    if name is None:
        print(f"{args.ticker.upper()}: no name found")
        return 1
    print(f"{args.ticker.upper()}: {name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dividend income tracker")
    parser.add_argument("--file", default=str(HOLDINGS_FILE), help="Holdings JSON file")
    sub = parser.add_subparsers(dest="command", required=True)

    p_add = sub.add_parser("add", help="Add or update a holding")
    p_add.add_argument("ticker")
    p_add.add_argument("quantity")
    p_add.add_argument("rate", help="Dividend per share")
    p_add.add_argument("--name", default="", help="Display name (default: lookup, then ticker)")
    p_add.set_defaults(func=cmd_add)

    p_remove = sub.add_parser("remove", help="Delete a holding by id")
    p_remove.add_argument("id")
    p_remove.set_defaults(func=cmd_remove)

    p_list = sub.add_parser("list", help="Show the income summary")
    p_list.set_defaults(func=cmd_list)

    p_trend = sub.add_parser("trend", help="Show the income trend")
    p_trend.set_defaults(func=cmd_trend)

    p_lookup = sub.add_parser("lookup", help="Look up a ticker's name")
    p_lookup.add_argument("ticker")
    p_lookup.set_defaults(func=cmd_lookup)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
