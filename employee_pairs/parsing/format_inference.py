"""
Date format inference for datasets with an unknown numeric date layout.
Uses the first value that cannot be a month to fix day/month order.
"""

from typing import Iterable, Optional, Tuple

from ..config import (
    DATE_SPLIT_PATTERN,
    MONTH_MAX,
    NUMERIC_TOKEN_PATTERN,
    YEAR_MAX,
    YEAR_MIN,
)
from ..logger import setup_logger
from ..models import DateFormat, RawRow
from .validation import is_open_ended

logger = setup_logger(__name__)


def _split_numeric(date_str: str) -> Optional[Tuple[int, int, int]]:
    """Split a date into three integers, or None if it isn't three numbers."""
    parts = DATE_SPLIT_PATTERN.split(date_str)
    if len(parts) != 3:
        return None
    if not all(NUMERIC_TOKEN_PATTERN.fullmatch(part) for part in parts):
        return None
    return int(parts[0]), int(parts[1]), int(parts[2])


def _is_year(value: int) -> bool:
    return YEAR_MIN <= value <= YEAR_MAX


def infer_date_format(rows: Iterable[RawRow]) -> DateFormat:
    """
    Infer the date layout used throughout the dataset.

    Loops through DateFrom and DateTo of every row and stops at the first
    date where a part that is not the year is bigger than 12. That part can
    only be the day, and together with the year position it fixes the
    layout:

        year first, part 2 > 12  -> yyyy-dd-MM
        year first, part 3 > 12  -> yyyy-MM-dd
        year last,  part 1 > 12  -> dd-MM-yyyy
        year last,  part 2 > 12  -> MM-dd-yyyy

    If no date disambiguates, the first parseable date decides: yyyy-MM-dd
    when it starts with a year, dd-MM-yyyy otherwise (also for no input).

    Args:
        rows: Validated rows

    Returns:
        The inferred DateFormat
    """
    starts_with_year: Optional[bool] = None

    for row in rows:
        for date_str in (row.date_from, row.date_to):
            if is_open_ended(date_str):
                continue

            parts = _split_numeric(date_str)
            if parts is None:
                continue
            part1, part2, part3 = parts

            part1_is_year = _is_year(part1)
            part3_is_year = _is_year(part3)

            if starts_with_year is None:
                starts_with_year = part1_is_year

            inferred = None
            if part1_is_year:
                if part2 > MONTH_MAX:
                    inferred = DateFormat.YEAR_DAY_MONTH
                elif part3 > MONTH_MAX:
                    inferred = DateFormat.YEAR_MONTH_DAY
            elif part3_is_year:
                if part1 > MONTH_MAX:
                    inferred = DateFormat.DAY_MONTH_YEAR
                elif part2 > MONTH_MAX:
                    inferred = DateFormat.MONTH_DAY_YEAR

            if inferred is not None:
                logger.debug(f"Date '{date_str}' of employee {row.employee_id} fixes format {inferred}")
                return inferred

    fallback = DateFormat.YEAR_MONTH_DAY if starts_with_year else DateFormat.DAY_MONTH_YEAR
    logger.info(f"No disambiguating date found, falling back to {fallback}")
    return fallback
