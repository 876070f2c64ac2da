#!/usr/bin/env python3
"""Command-line interface turning cargo-criterion JSON into comparison tables.

Usage:
    cargo criterion --message-format=json | criterion-table > BENCHMARKS.md
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from criterion_data import read_records
from formatters import FORMATTERS, Formatter, get_formatter
from logger import LOG_LEVELS, init_logging
from table_errors import CriterionTableError, RecordDecodeError
from table_report import Report, make_report
from tables_config import DEFAULT_CONFIG_PATH, TablesConfig, load_config

# ---------- Constants --------------------------------------------------------
DEFAULT_FORMAT = "gfm"


# ---------- CLI --------------------------------------------------------------
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate benchmark comparison tables from cargo-criterion JSON output",
        allow_abbrev=False,
    )

    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        metavar="PATH",
        help="File holding cargo-criterion JSON messages (default: stdin).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        metavar="PATH",
        help=f"TOML file with top_comments and table_comments (default: {DEFAULT_CONFIG_PATH}). "
        "A missing file is not an error.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        metavar="PATH",
        help="Write the report to this file (default: stdout).",
    )
    parser.add_argument(
        "--format",
        choices=sorted(FORMATTERS),
        default=DEFAULT_FORMAT,
        help="Output format of the report.",
    )
    parser.add_argument(
        "--graph-dir",
        type=Path,
        default=None,
        metavar="PATH",
        help="Also write one comparison bar chart per table into this directory.",
    )
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        metavar="PATH",
        help="Additionally write log output to this file.",
    )

    return parser.parse_args(argv)


# ---------- Helpers ----------------------------------------------------------
def build_tables(
    text: str, formatter: Formatter, config: Optional[TablesConfig] = None
) -> Tuple[Report, str]:
    """Build the report for raw criterion output ``text`` and render it.

    Nothing is rendered unless the whole input decodes and aggregates cleanly.
    """
    report = make_report(read_records(text), config)
    return report, formatter.render(report)


def read_input(path: Optional[Path]) -> str:
    source = "stdin" if path is None else str(path)
    try:
        if path is None:
            return sys.stdin.read()
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise RecordDecodeError(
            f"Input {source} is not valid UTF-8: {e.reason}", e.start
        ) from e


def write_output(path: Optional[Path], text: str) -> None:
    if path is None:
        sys.stdout.write(text)
        return
    path.write_text(text, encoding="utf-8")
    logging.info(f"Report written to: {path}")


# ---------- Entry point ------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the criterion-table CLI."""
    args = parse_args(argv)
    init_logging(args.log_level, args.log_file)

    try:
        config = load_config(args.config)
        report, rendered = build_tables(
            read_input(args.input), get_formatter(args.format), config
        )

        if args.graph_dir is not None:
            from comparison_graph import generate_comparison_graphs

            generated_files = generate_comparison_graphs(report, args.graph_dir)
            logging.info(f"Generated {len(generated_files)} graph(s)")

        write_output(args.output, rendered)
    except (CriterionTableError, OSError) as e:
        print(f"ERROR: An error occurred processing Criterion data: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
