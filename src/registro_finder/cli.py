#!/usr/bin/env python3
"""
Command line entry point.

Usage:
    registro-finder --digits 2 --letters
    registro-finder --numbers --digits 3 --workers 50 --output free.txt
    registro-finder --check "ab, xy, 42" --verbose
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import duckdb
import httpx

try:
    import uvloop
    UVLOOP = True
except ImportError:
    UVLOOP = False

from .combinations import mode_from_flags, parse_check_list
from .config import MAX_DIGITS, FinderError, ScanConfig
from .scanner import Scanner


logger = logging.getLogger("registro_finder")


def build_parser(defaults: ScanConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="registro-finder",
        description="Check availability of short .BR domains via Registro.br"
    )
    parser.add_argument("-d", "--digits", type=int, default=defaults.digits,
                        help=f"Number of characters (1-{MAX_DIGITS}, usually 2 or 3)")
    parser.add_argument("-w", "--workers", type=int, default=defaults.workers,
                        help="Number of parallel requests")
    parser.add_argument("-t", "--timeout", type=float, default=defaults.timeout,
                        help="Per-request timeout in seconds")
    parser.add_argument("-s", "--suffix", default=defaults.suffix,
                        help="Domain suffix")
    parser.add_argument("--letters", action="store_true", help="Letters only (no numbers)")
    parser.add_argument("--numbers", action="store_true", help="Numbers only (no letters)")
    parser.add_argument("-o", "--output", type=Path, help="File to save available domains")
    parser.add_argument("-c", "--check", help="Check specific domain(s), comma separated")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show every checked domain")
    parser.add_argument("--db", type=Path, default=defaults.db_path,
                        help="DuckDB file to store every result")
    parser.add_argument("--deadline", type=float, help="Abort the scan after this many seconds")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    return parser


def config_from_args(args: argparse.Namespace) -> ScanConfig:
    return ScanConfig(
        suffix=args.suffix,
        workers=args.workers,
        timeout=args.timeout,
        digits=args.digits,
        mode=mode_from_flags(letters=args.letters, numbers=args.numbers),
        check=parse_check_list(args.check) if args.check is not None else None,
        output=args.output,
        db_path=args.db,
        verbose=args.verbose,
        deadline=args.deadline,
        progress=not args.no_progress
    )


def setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )


def main(argv: Optional[list[str]] = None) -> int:
    try:
        defaults = ScanConfig.from_env()
    except FinderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    args = build_parser(defaults).parse_args(argv)
    setup_logging(args.log_level)
    logger.debug("uvloop: %s", "enabled" if UVLOOP else "not available")

    try:
        scanner = Scanner(config_from_args(args))
        if UVLOOP:
            uvloop.run(scanner.run())
        else:
            asyncio.run(scanner.run())
    except FinderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except asyncio.TimeoutError:
        print(f"\nError: scan exceeded deadline of {args.deadline:g}s", file=sys.stderr)
        return 1
    except (OSError, httpx.HTTPError, duckdb.Error) as e:
        logger.debug("Fatal error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
