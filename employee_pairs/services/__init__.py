"""
Services package - Record mapping, pair finding and the pipeline.
"""

from .record_mapper import RecordGroups, RowOutcome, map_row, map_to_employee_records
from .pair_finder import find_pairs, overlap_days
from .pipeline import EmployeePairPipeline, PipelineResult, find_longest_working_pairs

__all__ = [
    'RecordGroups',
    'RowOutcome',
    'map_row',
    'map_to_employee_records',
    'find_pairs',
    'overlap_days',
    'EmployeePairPipeline',
    'PipelineResult',
    'find_longest_working_pairs',
]
