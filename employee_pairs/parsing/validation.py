"""
Lexical validation of the date fields of raw rows.
"""

from typing import Iterable, List

from ..config import DATE_PATTERN, NULL_DATE_LITERAL
from ..logger import setup_logger, log_stage_stats
from ..models import RawRow

logger = setup_logger(__name__)


def is_valid_date(date_str: str) -> bool:
    """Check that a date has three numeric parts separated by '-'."""
    return DATE_PATTERN.fullmatch(date_str) is not None


def is_open_ended(date_str: str) -> bool:
    """Check whether an end date means 'still ongoing' (empty or NULL)."""
    return not date_str or date_str.upper() == NULL_DATE_LITERAL


def _has_valid_dates(row: RawRow) -> bool:
    if not is_valid_date(row.date_from):
        return False
    if not row.date_to:
        return False
    return row.date_to.upper() == NULL_DATE_LITERAL or is_valid_date(row.date_to)


def validate_date_fields(rows: Iterable[RawRow]) -> List[RawRow]:
    """
    Keep only rows whose date fields are lexically well formed.

    DateFrom must match the three-numeric-groups pattern. DateTo must be the
    NULL literal (any case) or match the same pattern; an empty DateTo is
    rejected here. Order is preserved and nothing is raised.

    Args:
        rows: Raw rows from the CSV reader

    Returns:
        Rows that passed both checks
    """
    rows = list(rows)
    valid = []

    for row in rows:
        if _has_valid_dates(row):
            valid.append(row)
        else:
            logger.warning(f"Skipping invalid date format in row: [{','.join(row)}]")

    log_stage_stats(logger, "Date validation", len(rows), len(valid))
    return valid
