"""Tests for date utility functions."""

from datetime import date, datetime

import pytest

from src.utils.date_utils import format_etrade_date, parse_cli_date


class TestFormatEtradeDate:
    def test_zero_padded(self):
        assert format_etrade_date(date(2024, 3, 5)) == "03052024"

    def test_datetime(self):
        assert format_etrade_date(datetime(2024, 12, 31, 8, 30)) == "12312024"


class TestParseCliDate:
    """Tests for parse_cli_date function."""

    def test_iso_format(self):
        assert parse_cli_date("2024-03-05") == date(2024, 3, 5)

    def test_etrade_format(self):
        assert parse_cli_date("03052024") == date(2024, 3, 5)

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value):
        assert parse_cli_date(value) is None

    def test_invalid(self):
        with pytest.raises(ValueError, match="expected YYYY-MM-DD or MMDDYYYY"):
            parse_cli_date("next week")
