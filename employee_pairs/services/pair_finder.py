"""
Pair finding - longest overlap between employees on a common project.
"""

from itertools import combinations
from typing import List, Optional, Tuple

from ..logger import setup_logger
from ..models import EmployeePair, EmployeeRecord
from .record_mapper import RecordGroups

logger = setup_logger(__name__)

# (best days_worked so far, pairs reaching it)
Accumulator = Tuple[Optional[int], Tuple[EmployeePair, ...]]


def overlap_days(first: EmployeeRecord, second: EmployeeRecord) -> Optional[int]:
    """
    Days between the start and end of the overlap window of two records.

    The count is end - start, so two ranges touching on a single day
    overlap by 0 days. Returns None when the ranges don't overlap at all.
    """
    overlap_start = max(first.date_from, second.date_from)
    overlap_end = min(first.date_to, second.date_to)

    if overlap_start > overlap_end:
        return None
    return (overlap_end - overlap_start).days


def _accumulate(acc: Accumulator, pair: EmployeePair) -> Accumulator:
    best_days, best_pairs = acc
    if best_days is None or pair.days_worked > best_days:
        return pair.days_worked, (pair,)
    if pair.days_worked == best_days:
        return best_days, best_pairs + (pair,)
    return acc


def find_pairs(groups: RecordGroups) -> List[EmployeePair]:
    """
    Find the employee pairs with the longest overlap across all projects.

    Every unordered pair of records within a project is compared once. Only
    pairs reaching the single global maximum are kept, ties included, so
    the result may span several projects.

    Args:
        groups: Records grouped by project id

    Returns:
        Winning pairs, empty if no two records overlap
    """
    acc: Accumulator = (None, ())

    for project_id, records in groups.items():
        for first, second in combinations(records, 2):
            days = overlap_days(first, second)
            if days is None:
                continue
            pair = EmployeePair(
                employee_a=first.employee_id,
                employee_b=second.employee_id,
                project_id=project_id,
                days_worked=days,
            )
            acc = _accumulate(acc, pair)

    best_days, best_pairs = acc
    if best_days is None:
        logger.info("No overlapping employee pairs found")
    else:
        logger.info(f"Longest overlap is {best_days} days, shared by {len(best_pairs)} pair(s)")

    return list(best_pairs)
