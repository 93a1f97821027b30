"""Parsing package for CSV ingestion, date validation and format inference."""

from .csv_reader import read_raw_rows
from .validation import is_valid_date, is_open_ended, validate_date_fields
from .format_inference import infer_date_format
from .dates import parse_date, format_date
