import pytest

from moneykit.formatter import Formatter

DOLLAR_SUFFIX = (2, ".", ",", "$", "1 $")
NO_THOUSANDS = (3, ".", "", "$", "1 $")
POUND = (2, ".", ",", "£", "$1")
NT_DOLLAR = (0, ".", ",", "NT$", "$1")

FORMAT_CASES = [
    (DOLLAR_SUFFIX, 0, "0.00 $"),
    (DOLLAR_SUFFIX, 1, "0.01 $"),
    (DOLLAR_SUFFIX, 12, "0.12 $"),
    (DOLLAR_SUFFIX, 123, "1.23 $"),
    (DOLLAR_SUFFIX, 1234, "12.34 $"),
    (DOLLAR_SUFFIX, 12345, "123.45 $"),
    (DOLLAR_SUFFIX, 123456, "1,234.56 $"),
    (DOLLAR_SUFFIX, 1234567, "12,345.67 $"),
    (DOLLAR_SUFFIX, 12345678, "123,456.78 $"),
    (DOLLAR_SUFFIX, 123456789, "1,234,567.89 $"),
    (DOLLAR_SUFFIX, -1, "-0.01 $"),
    (DOLLAR_SUFFIX, -12, "-0.12 $"),
    (DOLLAR_SUFFIX, -123, "-1.23 $"),
    (DOLLAR_SUFFIX, -1234, "-12.34 $"),
    (DOLLAR_SUFFIX, -12345, "-123.45 $"),
    (DOLLAR_SUFFIX, -123456, "-1,234.56 $"),
    (DOLLAR_SUFFIX, -1234567, "-12,345.67 $"),
    (DOLLAR_SUFFIX, -12345678, "-123,456.78 $"),
    (DOLLAR_SUFFIX, -123456789, "-1,234,567.89 $"),
    (NO_THOUSANDS, 1, "0.001 $"),
    (NO_THOUSANDS, 12, "0.012 $"),
    (NO_THOUSANDS, 123, "0.123 $"),
    (NO_THOUSANDS, 1234, "1.234 $"),
    (NO_THOUSANDS, 12345, "12.345 $"),
    (NO_THOUSANDS, 123456, "123.456 $"),
    (NO_THOUSANDS, 1234567, "1234.567 $"),
    (NO_THOUSANDS, 12345678, "12345.678 $"),
    (NO_THOUSANDS, 123456789, "123456.789 $"),
    (POUND, 1, "£0.01"),
    (POUND, 12, "£0.12"),
    (POUND, 123, "£1.23"),
    (POUND, 1234, "£12.34"),
    (POUND, 12345, "£123.45"),
    (POUND, 123456, "£1,234.56"),
    (POUND, 1234567, "£12,345.67"),
    (POUND, 12345678, "£123,456.78"),
    (POUND, 123456789, "£1,234,567.89"),
    (NT_DOLLAR, 1, "NT$1"),
    (NT_DOLLAR, 12, "NT$12"),
    (NT_DOLLAR, 123, "NT$123"),
    (NT_DOLLAR, 1234, "NT$1,234"),
    (NT_DOLLAR, 12345, "NT$12,345"),
    (NT_DOLLAR, 123456, "NT$123,456"),
    (NT_DOLLAR, 1234567, "NT$1,234,567"),
    (NT_DOLLAR, 12345678, "NT$12,345,678"),
    (NT_DOLLAR, 123456789, "NT$123,456,789"),
    (NT_DOLLAR, -1, "-NT$1"),
    (NT_DOLLAR, -12, "-NT$12"),
    (NT_DOLLAR, -123, "-NT$123"),
    (NT_DOLLAR, -1234, "-NT$1,234"),
    (NT_DOLLAR, -12345, "-NT$12,345"),
    (NT_DOLLAR, -123456, "-NT$123,456"),
    (NT_DOLLAR, -1234567, "-NT$1,234,567"),
    (NT_DOLLAR, -12345678, "-NT$12,345,678"),
    (NT_DOLLAR, -123456789, "-NT$123,456,789"),
]

MAJOR_UNIT_CASES = [
    (DOLLAR_SUFFIX, 0, 0.00),
    (DOLLAR_SUFFIX, 1, 0.01),
    (DOLLAR_SUFFIX, 12, 0.12),
    (DOLLAR_SUFFIX, 123, 1.23),
    (DOLLAR_SUFFIX, 1234, 12.34),
    (DOLLAR_SUFFIX, 12345, 123.45),
    (DOLLAR_SUFFIX, 123456, 1234.56),
    (DOLLAR_SUFFIX, 1234567, 12345.67),
    (DOLLAR_SUFFIX, 12345678, 123456.78),
    (DOLLAR_SUFFIX, 123456789, 1234567.89),
    (DOLLAR_SUFFIX, -1, -0.01),
    (DOLLAR_SUFFIX, -12, -0.12),
    (DOLLAR_SUFFIX, -123, -1.23),
    (DOLLAR_SUFFIX, -1234, -12.34),
    (DOLLAR_SUFFIX, -12345, -123.45),
    (DOLLAR_SUFFIX, -123456, -1234.56),
    (DOLLAR_SUFFIX, -1234567, -12345.67),
    (DOLLAR_SUFFIX, -12345678, -123456.78),
    (DOLLAR_SUFFIX, -123456789, -1234567.89),
    (NO_THOUSANDS, 1, 0.001),
    (NO_THOUSANDS, 12, 0.012),
    (NO_THOUSANDS, 123, 0.123),
    (NO_THOUSANDS, 1234, 1.234),
    (NO_THOUSANDS, 12345, 12.345),
    (NO_THOUSANDS, 123456, 123.456),
    (NO_THOUSANDS, 1234567, 1234.567),
    (NO_THOUSANDS, 12345678, 12345.678),
    (NO_THOUSANDS, 123456789, 123456.789),
    (POUND, 1, 0.01),
    (POUND, 12, 0.12),
    (POUND, 123, 1.23),
    (POUND, 1234, 12.34),
    (POUND, 12345, 123.45),
    (POUND, 123456, 1234.56),
    (POUND, 1234567, 12345.67),
    (POUND, 12345678, 123456.78),
    (POUND, 123456789, 1234567.89),
    (NT_DOLLAR, 1, 1),
    (NT_DOLLAR, 12, 12),
    (NT_DOLLAR, 123, 123),
    (NT_DOLLAR, 1234, 1234),
    (NT_DOLLAR, 12345, 12345),
    (NT_DOLLAR, 123456, 123456),
    (NT_DOLLAR, 1234567, 1234567),
    (NT_DOLLAR, 12345678, 12345678),
    (NT_DOLLAR, 123456789, 123456789),
    (NT_DOLLAR, -1, -1),
    (NT_DOLLAR, -12, -12),
    (NT_DOLLAR, -123, -123),
    (NT_DOLLAR, -1234, -1234),
    (NT_DOLLAR, -12345, -12345),
    (NT_DOLLAR, -123456, -123456),
    (NT_DOLLAR, -1234567, -1234567),
    (NT_DOLLAR, -12345678, -12345678),
    (NT_DOLLAR, -123456789, -123456789),
]


@pytest.mark.parametrize("settings, amount, expected", FORMAT_CASES)
def test_format(settings, amount, expected):
    assert Formatter(*settings).format(amount) == expected


@pytest.mark.parametrize("settings, amount, expected", MAJOR_UNIT_CASES)
def test_to_major_units(settings, amount, expected):
    assert Formatter(*settings).to_major_units(amount) == expected


def test_keyword_construction_matches_positional():
    by_keyword = Formatter(fraction=2, decimal=".", thousand=",", grapheme="£", template="$1")
    assert by_keyword == Formatter(*POUND)
    assert by_keyword.format(123456) == "£1,234.56"


@pytest.mark.parametrize("settings, amount, expected", FORMAT_CASES)
def test_negative_format_is_positive_with_minus(settings, amount, expected):
    formatter = Formatter(*settings)
    if amount < 0:
        assert formatter.format(amount) == "-" + formatter.format(-amount)
    else:
        assert not formatter.format(amount).startswith("-")