"""
Tests for Conversion Utilities

Conversions never raise on bad input; they return nan, None or False.
"""

import math
from datetime import date, datetime
from decimal import Decimal

import pytest

from field_sanitizer.utils.converters import to_boolean, to_date, to_float, to_int, to_string
from field_sanitizer.utils.email import normalize_email


class TestToBoolean:
    """Test suite for to_boolean()"""

    @pytest.mark.parametrize("value", ["0", "false", "FALSE", ""])
    def test_lenient_false(self, value):
        assert to_boolean(value) is False

    @pytest.mark.parametrize("value", ["1", "true", "yes", "no", "anything"])
    def test_lenient_true(self, value):
        assert to_boolean(value) is True

    @pytest.mark.parametrize("value", ["1", "true", "TRUE"])
    def test_strict_true(self, value):
        assert to_boolean(value, strict=True) is True

    @pytest.mark.parametrize("value", ["yes", "0", "", "on"])
    def test_strict_false(self, value):
        assert to_boolean(value, strict=True) is False

    @pytest.mark.parametrize("value,expected", [(0, False), (1, True), ([], False), ([1], True)])
    def test_non_string_truthiness(self, value, expected):
        assert to_boolean(value) is expected


class TestToDate:
    """Test suite for to_date()"""

    def test_date_unchanged(self):
        value = date(2024, 1, 15)
        assert to_date(value) is value

    def test_datetime_unchanged(self):
        value = datetime(2024, 1, 15, 10, 30)
        assert to_date(value) is value

    def test_parse_iso(self):
        assert to_date("2024-01-15") == datetime(2024, 1, 15)

    def test_parse_with_time(self):
        assert to_date("2024-01-15T10:30:00") == datetime(2024, 1, 15, 10, 30)

    @pytest.mark.parametrize("value", ["hello world", "", "   "])
    def test_unparsable(self, value):
        assert to_date(value) is None

    @pytest.mark.parametrize("value", ["march", "1", "-1", "2024", "15 March", "10:30"])
    def test_partial_date(self, value):
        """Test: partial dates are not completed from the current date"""
        assert to_date(value) is None

    def test_written_date(self):
        assert to_date("March 5, 2024") == datetime(2024, 3, 5)


class TestToFloat:
    """Test suite for to_float()"""

    def test_parse(self):
        assert to_float("3.14") == 3.14

    def test_parse_exponent(self):
        assert to_float("1e3") == 1000.0

    def test_parse_whitespace(self):
        assert to_float(" 2.5 ") == 2.5

    def test_number_unchanged(self):
        assert to_float(2) == 2
        assert to_float(2.5) == 2.5

    def test_decimal(self):
        assert to_float(Decimal("1.25")) == 1.25

    @pytest.mark.parametrize("value", ["abc", "", ".", "1.2.3", "12abc"])
    def test_invalid(self, value):
        assert math.isnan(to_float(value))

    def test_non_ascii_digits(self):
        """Test: only ASCII digits are parsed, as in to_int()"""
        assert math.isnan(to_float("\u0663"))
        assert math.isnan(to_int("\u0663"))


class TestToInt:
    """Test suite for to_int()"""

    @pytest.mark.parametrize("value,expected", [
        ("42", 42),
        ("42px", 42),
        ("  -7 ", -7),
        ("+8", 8),
        ("2.9", 2),
        ("0x1A", 26),
    ])
    def test_parse_decimal(self, value, expected):
        assert to_int(value) == expected

    @pytest.mark.parametrize("value,radix,expected", [
        ("ff", 16, 255),
        ("0xff", 16, 255),
        ("101", 2, 5),
        ("z", 36, 35),
        ("129", 2, 1),
    ])
    def test_parse_radix(self, value, radix, expected):
        assert to_int(value, radix) == expected

    @pytest.mark.parametrize("value,expected", [(3.9, 3), (-3.9, -3), (7, 7), (True, 1)])
    def test_numbers_truncate(self, value, expected):
        assert to_int(value) == expected

    @pytest.mark.parametrize("value", ["px42", "", "-", "abc"])
    def test_invalid(self, value):
        assert math.isnan(to_int(value))

    def test_invalid_radix(self):
        assert math.isnan(to_int("12", 1))
        assert math.isnan(to_int("12", 37))

    def test_non_finite(self):
        assert math.isnan(to_int(float("nan")))
        assert math.isnan(to_int(float("inf")))


class TestToString:
    """Test suite for to_string()"""

    def test_number(self):
        assert to_string(42) == "42"

    def test_bool(self):
        assert to_string(True) == "True"

    def test_string_unchanged(self):
        assert to_string("x") == "x"


class TestNormalizeEmail:
    """Test suite for normalize_email()"""

    def test_lowercase_by_default(self):
        assert normalize_email("Test@Example.COM") == "test@example.com"

    def test_keep_local_case(self):
        assert normalize_email("Test@Example.COM", lowercase=False) == "Test@example.com"

    def test_gmail_rules(self):
        assert normalize_email("John.Doe+news@GoogleMail.com") == "johndoe@gmail.com"

    def test_outlook_subaddress(self):
        assert normalize_email("User+tag@outlook.com") == "user@outlook.com"

    def test_yahoo_subaddress(self):
        assert normalize_email("user-tag@yahoo.com") == "user@yahoo.com"

    def test_surrounding_whitespace(self):
        assert normalize_email("  user@example.com ") == "user@example.com"

    @pytest.mark.parametrize("value", ["not-an-email", "@example.com", "user@", "", 42, None])
    def test_invalid(self, value):
        assert normalize_email(value) is False

    def test_gmail_empty_local_part(self):
        assert normalize_email("+tag@gmail.com") is False
