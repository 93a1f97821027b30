"""
Record mapping - turns validated rows into typed assignment records.
"""

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..exceptions import DateParseError
from ..logger import setup_logger
from ..models import DateFormat, EmployeeRecord, RawRow
from ..parsing import is_open_ended, parse_date

logger = setup_logger(__name__)

RecordGroups = Mapping[str, Tuple[EmployeeRecord, ...]]


@dataclass(frozen=True)
class RowOutcome:
    """Result of mapping one row: either a record or the reason it was skipped."""
    row: RawRow
    record: Optional[EmployeeRecord] = None
    skip_reason: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.record is None


def map_row(row: RawRow, date_format: DateFormat, today: date) -> RowOutcome:
    """
    Map a single row to an EmployeeRecord.

    An empty or NULL DateTo becomes `today`. A date that does not fit the
    layout yields a skipped outcome instead of an error.
    """
    try:
        date_from = parse_date(row.date_from, date_format)
        if is_open_ended(row.date_to):
            date_to = today
        else:
            date_to = parse_date(row.date_to, date_format)
    except DateParseError as e:
        return RowOutcome(row=row, skip_reason=str(e))

    record = EmployeeRecord(
        employee_id=row.employee_id,
        project_id=row.project_id,
        date_from=date_from,
        date_to=date_to,
    )
    return RowOutcome(row=row, record=record)


def map_to_employee_records(
    rows: Iterable[RawRow],
    date_format: DateFormat,
    today: Optional[date] = None,
) -> RecordGroups:
    """
    Map validated rows to records grouped by project id.

    Args:
        rows: Validated rows
        date_format: Layout returned by infer_date_format
        today: End date for open-ended rows (defaults to date.today())

    Returns:
        Read-only mapping of project id to its records in input order
    """
    if today is None:
        today = date.today()

    grouped: Dict[str, List[EmployeeRecord]] = {}
    skipped = 0

    for row in rows:
        outcome = map_row(row, date_format, today)
        if outcome.skipped:
            skipped += 1
            logger.debug(f"Skipping row [{','.join(row)}]: {outcome.skip_reason}")
            continue
        grouped.setdefault(outcome.record.project_id, []).append(outcome.record)

    mapped = sum(len(records) for records in grouped.values())
    logger.info(
        f"Mapped {mapped} records over {len(grouped)} projects "
        f"({skipped} rows did not fit {date_format})"
    )

    return MappingProxyType({project_id: tuple(records) for project_id, records in grouped.items()})
