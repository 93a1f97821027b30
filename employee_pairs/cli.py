"""
Command line entry point.

Usage:
    employee-pairs data/employees.csv --today 2024-01-31
    # or
    python -m employee_pairs data/employees.csv
"""

import argparse
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_CSV_PATH
from .logger import set_console_level, setup_logger
from .report import export_pairs_csv, render_report
from .services import EmployeePairPipeline

logger = setup_logger(__name__)


def _parse_today(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got '{value}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="employee-pairs",
        description="Find the employees who worked together the longest on a common project",
    )
    parser.add_argument(
        "csv_path",
        nargs="?",
        type=Path,
        default=DEFAULT_CSV_PATH,
        help=f"CSV file with EmpID,ProjectID,DateFrom,DateTo (default: {DEFAULT_CSV_PATH})",
    )
    parser.add_argument(
        "--today",
        type=_parse_today,
        default=None,
        help="Date used for open-ended assignments, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Also write the winning pairs to this CSV file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging on the console",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.
    
    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)
    
    if args.verbose:
        set_console_level(logging.DEBUG)
    
    pipeline = EmployeePairPipeline(today=args.today)
    result = pipeline.run(args.csv_path)
    
    for line in render_report(result):
        print(line)
    
    if not result.success:
        return 1
    
    if args.output is not None:
        export_pairs_csv(result.pairs, args.output)
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
