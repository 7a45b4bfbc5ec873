"""Find pickup meals near a residential college within a budget.

Usage:
  python find_food.py --college Berkeley --budget 12
  python find_food.py --college Morse --budget 9.50 --json
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from typing import Optional, Sequence

from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError

from config import Configuration
from services.catalog import CatalogError, get_catalog
from services.report import build_report
from services.search import search_restaurants


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Best affordable combo per restaurant near a residential college")
    parser.add_argument("--college", help="Residential college (defaults to DEFAULT_COLLEGE)")
    parser.add_argument("--budget", type=float, required=True, help="Budget in dollars")
    parser.add_argument("--catalog", help="Path to a restaurants JSON catalog")
    parser.add_argument("--json", action="store_true", help="Print results as JSON instead of Markdown")
    args = parser.parse_args(argv)

    try:
        cfg = Configuration.from_env({"catalog_path": args.catalog})
    except ValidationError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 1
    _configure_logging(cfg.log_level)

    college = args.college or cfg.default_college
    if not college:
        print("error: --college is required (or set DEFAULT_COLLEGE)", file=sys.stderr)
        return 2

    try:
        catalog = get_catalog(cfg)
        results = search_restaurants(cfg, catalog, college, args.budget)
    except CatalogError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        payload = []
        for r in results:
            item = asdict(r)
            item["combo"]["template"] = r.combo.template.value
            payload.append(item)
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(build_report(college, args.budget, results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
