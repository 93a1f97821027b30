"""
Configuration constants for employee-pairs.
Centralized configuration for input layout, date rules, and logging.
"""

import os
import re
from pathlib import Path
from typing import List

# Input
DEFAULT_CSV_PATH = Path(__file__).parent.parent / "data" / "employee_project_data.csv"
CSV_SEPARATOR = ","
CSV_ENCODING = "utf-8"
CSV_ENCODING_ERRORS = "replace"  # undecodable bytes fail validation row by row
EXPECTED_COLUMN_COUNT = 4
RAW_COLUMNS: List[str] = ['employee_id', 'project_id', 'date_from', 'date_to']
OVERFLOW_COLUMN = "extra_fields"  # holds a fifth field, which marks a row as too long

# Output
PAIR_COLUMNS: List[str] = ['employee_a', 'employee_b', 'project_id', 'days_worked']

# Date Rules
DATE_PATTERN = re.compile(r"\d{1,4}-\d{1,2}-\d{1,4}", re.ASCII)  # three numeric groups
DATE_SPLIT_PATTERN = re.compile(r"[-/]")
NUMERIC_TOKEN_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
NULL_DATE_LITERAL = "NULL"  # open-ended assignment, compared case-insensitively
YEAR_MIN = 1900
YEAR_MAX = 2100
MONTH_MAX = 12

# Logging
LOG_DIR = Path(os.environ.get("EMPLOYEE_PAIRS_LOG_DIR", Path(__file__).parent.parent / "logs"))
LOG_LEVEL = os.environ.get("EMPLOYEE_PAIRS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
