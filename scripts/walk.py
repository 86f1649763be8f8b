#!/usr/bin/env python3
"""Local CLI entrypoint to walk an installed node_modules tree.

Usage:
  python scripts/walk.py --root path/to/package [--config settings.json] [--prod-only] [--verbose]

Prints a JSON report of every module reachable from the root package.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from npm_walker import DepType, Walker, WalkerError
from npm_walker.report import aggregate
from npm_walker.settings import load_settings

_PROD_DEP_TYPES = {DepType.ROOT, DepType.PROD}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--root", type=Path, default=Path("."))
    parser.add_argument(
        "--config", type=Path, default=None, help="Path to a walker settings JSON file"
    )
    parser.add_argument(
        "--prod-only",
        action="store_true",
        help="Only report the root module and its production dependencies",
    )
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        settings = load_settings(args.config)
        walker = Walker(str(args.root), settings=settings)
        modules = asyncio.run(walker.walk_tree())
    except WalkerError as exc:
        print(f"npm-walker: {exc}", file=sys.stderr)
        return 1

    if args.prod_only:
        modules = [module for module in modules if module.dep_type in _PROD_DEP_TYPES]

    report = aggregate(walker.get_root_module(), modules)
    print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
