"""
Processing pipeline that chains all stages.

Reads the assignment CSV, validates and maps the rows, infers the date
layout and finds the employee pairs with the longest shared project time.
"""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

from ..config import DEFAULT_CSV_PATH
from ..exceptions import InputFileError
from ..logger import setup_logger
from ..models import DateFormat, EmployeePair, RawRow
from ..parsing import infer_date_format, read_raw_rows, validate_date_fields
from .pair_finder import find_pairs
from .record_mapper import map_to_employee_records

logger = setup_logger(__name__)


@dataclass
class PipelineResult:
    """
    Result container for one pipeline run.
    
    Holds the inferred format, the winning pairs and row statistics.
    """
    
    date_format: Optional[DateFormat] = None
    pairs: List[EmployeePair] = field(default_factory=list)
    
    # Statistics
    rows_read: int = 0
    rows_valid: int = 0
    records_mapped: int = 0
    errors: List[str] = field(default_factory=list)
    
    # Status
    success: bool = False
    message: str = ""
    
    @property
    def has_pairs(self) -> bool:
        """Check if at least one overlapping pair was found."""
        return bool(self.pairs)
    
    @property
    def days_worked(self) -> Optional[int]:
        """The winning overlap length, if any."""
        return self.pairs[0].days_worked if self.pairs else None


class EmployeePairPipeline:
    """
    Pipeline finding the employees who worked together the longest.
    
    `today` closes open-ended assignments; pass a fixed date for
    reproducible results.
    """
    
    def __init__(self, today: Optional[date] = None):
        self._today = today
    
    @property
    def today(self) -> date:
        return self._today or date.today()
    
    def process_rows(self, rows: Iterable[RawRow]) -> PipelineResult:
        """
        Run every stage after ingestion on already-split rows.
        
        Args:
            rows: Raw rows, header already removed
            
        Returns:
            PipelineResult with success=True
        """
        rows = list(rows)
        result = PipelineResult(rows_read=len(rows))
        
        valid_rows = validate_date_fields(rows)
        result.rows_valid = len(valid_rows)
        
        result.date_format = infer_date_format(valid_rows)
        logger.info(f"Inferred Date Format: {result.date_format}")
        
        groups = map_to_employee_records(valid_rows, result.date_format, self.today)
        result.records_mapped = sum(len(records) for records in groups.values())
        
        result.pairs = find_pairs(groups)
        result.success = True
        result.message = (
            f"Found {len(result.pairs)} pair(s)" if result.pairs else "No overlapping pairs found"
        )
        return result
    
    def run(self, input_path: Optional[Path] = None) -> PipelineResult:
        """
        Execute the full pipeline on a CSV file.
        
        Input errors are logged and reported through the result, never raised.
        
        Args:
            input_path: Path to the CSV file. Uses DEFAULT_CSV_PATH if not provided.
            
        Returns:
            PipelineResult containing the pairs and statistics
        """
        path = Path(input_path) if input_path is not None else DEFAULT_CSV_PATH
        
        try:
            rows = read_raw_rows(path)
        except InputFileError as e:
            logger.error(f"Exception occurred during parsing CSV file: {e}")
            result = PipelineResult(success=False, message=str(e))
            result.errors.append(str(e))
            return result
        
        return self.process_rows(rows)


def find_longest_working_pairs(
    input_path: Optional[Path] = None,
    today: Optional[date] = None,
) -> List[EmployeePair]:
    """Shortcut returning only the winning pairs of a pipeline run."""
    return EmployeePairPipeline(today=today).run(input_path).pairs
