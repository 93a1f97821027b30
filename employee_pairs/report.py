"""
Reporting of pipeline results.
Renders the winning pairs as text lines and exports them as CSV.
"""

from pathlib import Path
from typing import Iterable, List
import pandas as pd

from .config import CSV_ENCODING, PAIR_COLUMNS
from .logger import setup_logger
from .models import EmployeePair
from .services import PipelineResult

logger = setup_logger(__name__)


def format_pair_line(pair: EmployeePair) -> str:
    """One human readable line per pair."""
    return (
        f"Employees {pair.employee_a} and {pair.employee_b} worked together on "
        f"project {pair.project_id} for {pair.days_worked} days"
    )


def render_report(result: PipelineResult) -> List[str]:
    """
    Build the text report for a pipeline run.
    
    Returns:
        The inferred format line followed by one line per pair. Failed runs
        yield a single error line; runs without pairs only the format line.
    """
    if not result.success:
        return [f"Processing failed: {result.message}"]
    
    lines = [f"Inferred Date Format: {result.date_format}"]
    lines.extend(format_pair_line(pair) for pair in result.pairs)
    return lines


def pairs_to_dataframe(pairs: Iterable[EmployeePair]) -> pd.DataFrame:
    """Convert pairs to a DataFrame with one row per pair."""
    df = pd.DataFrame([pair.to_dict() for pair in pairs], columns=PAIR_COLUMNS)
    return df.astype({'days_worked': int})


def export_pairs_csv(pairs: Iterable[EmployeePair], path: str | Path) -> Path:
    """
    Write pairs to a CSV file, creating parent directories as needed.
    
    Args:
        pairs: Pairs to export
        path: Target CSV path
        
    Returns:
        The path written to
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    
    df = pairs_to_dataframe(pairs)
    df.to_csv(path, index=False, encoding=CSV_ENCODING)
    logger.info(f"Exported {len(df)} pair(s) to: {path}")
    return path


def load_pairs_csv(path: str | Path) -> List[EmployeePair]:
    """Read pairs back from a CSV written by export_pairs_csv."""
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    return [EmployeePair.from_dict(record) for record in df.to_dict('records')]
