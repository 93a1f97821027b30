"""
employee-pairs - find the employees who worked together the longest.
"""

from .models import DateFormat, EmployeePair, EmployeeRecord, RawRow
from .services import EmployeePairPipeline, PipelineResult, find_longest_working_pairs

__version__ = "1.0.0"

__all__ = [
    'DateFormat',
    'EmployeePair',
    'EmployeeRecord',
    'RawRow',
    'EmployeePairPipeline',
    'PipelineResult',
    'find_longest_working_pairs',
]
