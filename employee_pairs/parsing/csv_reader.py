"""
CSV reading module for employee assignment data.
Handles file reading and column-count filtering.
"""

import warnings
import pandas as pd
from pathlib import Path
from typing import List, Optional

from ..config import (
    CSV_ENCODING,
    CSV_ENCODING_ERRORS,
    CSV_SEPARATOR,
    EXPECTED_COLUMN_COUNT,
    OVERFLOW_COLUMN,
    RAW_COLUMNS,
)
from ..exceptions import InputFileError
from ..logger import setup_logger, log_stage_stats
from ..models import RawRow

logger = setup_logger(__name__)


def _log_wrong_column_count(values) -> None:
    present = [value for value in values if isinstance(value, str)]
    logger.warning(
        f"Skipping row due to incorrect column count: [{CSV_SEPARATOR.join(present)}]"
    )


def _skip_long_line(bad_line: List[str]) -> Optional[List[str]]:
    """pandas callback for lines wider than the overflow column."""
    _log_wrong_column_count(bad_line)
    return None


def read_raw_rows(filepath: str | Path) -> List[RawRow]:
    """
    Read an assignment CSV file into raw text rows.

    The first line is a header and is always skipped, whatever its shape.
    Every other line must have exactly four fields; other lines are logged
    and dropped. Field values are kept verbatim as text, undecodable bytes
    are replaced.

    Args:
        filepath: Path to the CSV file

    Returns:
        List of RawRow in file order

    Raises:
        InputFileError: If the file doesn't exist or can't be read
    """
    filepath = Path(filepath)

    if not filepath.exists():
        logger.error(f"CSV file not found: {filepath}")
        raise InputFileError(f"CSV file not found: {filepath}")

    logger.info(f"Reading CSV file: {filepath.name}")

    columns = RAW_COLUMNS + [OVERFLOW_COLUMN]
    try:
        with warnings.catch_warnings():
            # index_col=False truncates lines wider than `columns` with a warning
            warnings.simplefilter("ignore", pd.errors.ParserWarning)
            df = pd.read_csv(
                filepath,
                sep=CSV_SEPARATOR,
                header=None,
                skiprows=1,
                names=columns,
                index_col=False,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                encoding=CSV_ENCODING,
                encoding_errors=CSV_ENCODING_ERRORS,
                engine='python',
                on_bad_lines=_skip_long_line,
            )
    except pd.errors.EmptyDataError:
        logger.warning(f"CSV file is empty: {filepath.name}")
        return []
    except (OSError, pd.errors.ParserError) as e:
        logger.error(f"Failed to read CSV: {e}")
        raise InputFileError(f"Invalid CSV file: {e}") from e

    total = len(df)

    # Short lines are padded with NaN, a filled overflow column means too many fields
    wrong_count = df[RAW_COLUMNS].isna().any(axis=1) | df[OVERFLOW_COLUMN].notna()
    for values in df[wrong_count].itertuples(index=False, name=None):
        _log_wrong_column_count(values)
    df = df[~wrong_count]

    rows = [RawRow(*values) for values in df[RAW_COLUMNS].itertuples(index=False, name=None)]
    log_stage_stats(logger, f"Column count check ({EXPECTED_COLUMN_COUNT} expected)", total, len(rows))

    return rows
