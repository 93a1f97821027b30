"""
Assignment data models and type definitions.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import NamedTuple


class DateFormat(str, Enum):
    """Positional date layouts that can be inferred from a dataset."""
    YEAR_MONTH_DAY = "yyyy-MM-dd"
    YEAR_DAY_MONTH = "yyyy-dd-MM"
    MONTH_DAY_YEAR = "MM-dd-yyyy"
    DAY_MONTH_YEAR = "dd-MM-yyyy"

    @property
    def strptime_pattern(self) -> str:
        """Equivalent pattern for datetime.strptime / strftime."""
        return _STRPTIME_PATTERNS[self]

    def __str__(self) -> str:
        return self.value


_STRPTIME_PATTERNS = {
    DateFormat.YEAR_MONTH_DAY: "%Y-%m-%d",
    DateFormat.YEAR_DAY_MONTH: "%Y-%d-%m",
    DateFormat.MONTH_DAY_YEAR: "%m-%d-%Y",
    DateFormat.DAY_MONTH_YEAR: "%d-%m-%Y",
}


class RawRow(NamedTuple):
    """One CSV line split into its four text fields."""
    employee_id: str
    project_id: str
    date_from: str
    date_to: str


@dataclass(frozen=True)
class EmployeeRecord:
    """
    A single employee assignment on a project.
    
    Attributes:
        employee_id: Employee identifier as found in the input
        project_id: Project identifier as found in the input
        date_from: First day of the assignment
        date_to: Last day of the assignment (today for open-ended rows)
    
    date_from <= date_to is not enforced; inverted ranges simply never
    overlap with anything.
    """
    employee_id: str
    project_id: str
    date_from: date
    date_to: date


@dataclass(frozen=True)
class EmployeePair:
    """
    Two employees who overlapped on a project.
    
    Attributes:
        employee_a: Employee of the earlier record in input order
        employee_b: Employee of the later record in input order
        project_id: Project the overlap happened on
        days_worked: end - start of the overlap window in days
    """
    employee_a: str
    employee_b: str
    project_id: str
    days_worked: int
    
    def to_dict(self) -> dict:
        """Convert pair to dictionary."""
        return {
            'employee_a': self.employee_a,
            'employee_b': self.employee_b,
            'project_id': self.project_id,
            'days_worked': self.days_worked,
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> 'EmployeePair':
        """Create EmployeePair from dictionary."""
        return cls(
            employee_a=str(data['employee_a']),
            employee_b=str(data['employee_b']),
            project_id=str(data['project_id']),
            days_worked=int(data['days_worked']),
        )
