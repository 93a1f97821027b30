"""
Unit tests for date field validation
"""
import pytest

from employee_pairs.models import RawRow
from employee_pairs.parsing import is_open_ended, is_valid_date, validate_date_fields


@pytest.mark.unit
class TestIsValidDate:
    """Test the lexical date check."""

    @pytest.mark.parametrize("date_str", [
        "2013-11-01",
        "01-11-2013",
        "1-1-1",
        "2013-1-5",
        "9999-99-9999",
    ])
    def test_valid(self, date_str):
        assert is_valid_date(date_str) is True

    @pytest.mark.parametrize("date_str", [
        "",
        "NULL",
        "INVALID_DATE",
        "2013/11/01",
        "2013-11",
        "20130-11-01",
        "2013-111-01",
        "2013-11-01-",
        "2013-11-01\n",
        " 2013-11-01",
        "2013-11-O1",
    ])
    def test_invalid(self, date_str):
        assert is_valid_date(date_str) is False


@pytest.mark.unit
class TestIsOpenEnded:
    """Test detection of ongoing assignments."""

    @pytest.mark.parametrize("date_str", ["", "NULL", "null", "Null"])
    def test_open_ended(self, date_str):
        assert is_open_ended(date_str) is True

    @pytest.mark.parametrize("date_str", ["2014-01-05", "NONE", "N/A"])
    def test_not_open_ended(self, date_str):
        assert is_open_ended(date_str) is False


@pytest.mark.unit
class TestValidateDateFields:
    """Test validate_date_fields."""

    def test_filters_invalid_rows(self, sample_rows):
        """Test the two invalid sample rows are removed."""
        valid = validate_date_fields(sample_rows)

        assert len(valid) == len(sample_rows) - 2
        assert RawRow("512", "10", "2011-07-01", "INVALID_DATE") not in valid
        assert RawRow("219", "12", "INVALID", "2016-11-30") not in valid

    def test_output_is_ordered_subset(self, sample_rows):
        """Test kept rows come from the input in the same order."""
        valid = validate_date_fields(sample_rows)

        positions = [sample_rows.index(row) for row in valid]
        assert positions == sorted(positions)

    def test_every_row_classified(self, sample_rows):
        """Test kept rows pass both checks and dropped rows fail one."""
        rows = sample_rows + [
            RawRow("1", "1", "2013-11-01", ""),
            RawRow("2", "1", "2013-11-01", "null"),
        ]
        valid = validate_date_fields(rows)

        def passes(row):
            date_to_ok = row.date_to.upper() == "NULL" or (
                row.date_to != "" and is_valid_date(row.date_to)
            )
            return is_valid_date(row.date_from) and date_to_ok

        assert all(passes(row) for row in valid)
        assert not any(passes(row) for row in rows if row not in valid)

    def test_null_end_date_any_case(self):
        """Test NULL end dates are accepted regardless of case."""
        rows = [
            RawRow("1", "1", "2013-11-01", "NULL"),
            RawRow("2", "1", "2013-11-01", "null"),
            RawRow("3", "1", "2013-11-01", "nUlL"),
        ]

        assert validate_date_fields(rows) == rows

    def test_empty_end_date_rejected(self):
        """Test an empty end date fails validation."""
        rows = [RawRow("1", "1", "2013-11-01", "")]

        assert validate_date_fields(rows) == []

    def test_logs_dropped_rows(self, caplog):
        """Test dropped rows are reported."""
        validate_date_fields([RawRow("512", "10", "2011-07-01", "INVALID_DATE")])

        assert "Skipping invalid date format in row: [512,10,2011-07-01,INVALID_DATE]" in caplog.text

    def test_empty_input(self):
        assert validate_date_fields([]) == []
