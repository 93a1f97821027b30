"""
Pytest configuration and fixtures
"""
import os
import sys
import tempfile
from datetime import date
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Keep test runs from writing into the project's logs/ directory
os.environ.setdefault("EMPLOYEE_PAIRS_LOG_DIR", tempfile.mkdtemp(prefix="employee_pairs_logs_"))


SAMPLE_CSV = (
    "EmpID,ProjectID,DateFrom,DateTo\n"
    "143,12,2013-11-01,2014-01-05\n"
    "218,10,2012-05-16,NULL\n"
    "143,10,2009-01-01,2011-04-27\n"
    "432,12,2015-03-25,2016-07-19\n"
    "218,12,2014-02-01,2015-06-30\n"
    "512,14,2013-10-05,2015-05-12\n"
    "219,14,2013-05-10,2014-10-20\n"
    "432,10,2011-06-30,2013-12-15\n"
    "143,12,2016-04-10,NULL\n"
    "512,10,2011-07-01,INVALID_DATE\n"  # Invalid Date
    "219,12,INVALID,2016-11-30\n"  # Invalid Date
    "143,14,2012-09-18,2014-12-21\n"
    "218,14,2014-11-30,2016-05-10\n"
    "512,12,2015-02-15,NULL\n"
    "432,14,2013-03-05,2014-09-15\n"
)


@pytest.fixture
def sample_csv(tmp_path):
    """Create a temporary CSV file with sample assignment data."""
    path = tmp_path / "test_employees.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def write_csv(tmp_path):
    """Factory writing arbitrary CSV text to a temporary file."""
    def _write(text: str, name: str = "data.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_rows():
    """Sample rows as produced by the CSV reader."""
    from employee_pairs.models import RawRow

    return [
        RawRow(*line.split(","))
        for line in SAMPLE_CSV.strip().splitlines()[1:]
    ]


@pytest.fixture
def fixed_today():
    """A fixed 'today' for open-ended assignments."""
    return date(2016, 6, 1)
