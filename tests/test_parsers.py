from decimal import Decimal

import pytest

from payroll.utils.parsers import parse_amount, parse_contract_type


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1000", 1000.0),
        (" 12.5 ", 12.5),
        ("0", 0.0),
        ("-3", -3.0),
        (7, 7.0),
        (7.25, 7.25),
        (Decimal("4.5"), 4.5),
    ],
)
def test_plain_amounts_are_read(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["1,000", "12,5", "1 000", "$100", "100 CAD", "(100)", "1.000.00", "", "abc", "nan", "inf"],
)
def test_formatted_amounts_are_refused(raw):
    assert parse_amount(raw) is None


def test_non_numbers_are_refused():
    assert parse_amount(None) is None
    assert parse_amount(True) is None
    assert parse_amount(float("inf")) is None


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Hourly", "hourly"),
        (" monthly ", "monthly"),
        ("H", "hourly"),
        ("mensuel", "monthly"),
        ("weekly", None),
        (None, None),
    ],
)
def test_parse_contract_type(raw, expected):
    assert parse_contract_type(raw) == expected
