"""Command line entry point: ``satexport``."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from satexport import __version__
from satexport.config import ExportConfig
from satexport.pipeline import run
from satexport.utils.constants import DEFAULT_TIMEOUT_S


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="satexport",
        description="Export CelesTrak TLE catalogs as normalized JSON with launch dates.",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="directory the json/tle outputs are written under (default: cwd)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_S,
        help="per-request timeout in seconds (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the export. Always returns 0; failures are logged."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = ExportConfig(base_dir=args.base_dir or Path.cwd(), timeout=args.timeout)
    run(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
