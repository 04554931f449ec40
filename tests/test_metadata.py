from __future__ import annotations

import datetime
from decimal import Decimal

import pytest

from statement_extractor.metadata import extract_account_info, extract_statement_period


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Account Holder: John Smith", "John Smith"),
        ("Account Holder: JANE Q PUBLIC\nAddress: 1 Main St", "JANE Q PUBLIC"),
        ("Name: Mary O'Neil-Hart\n", "Mary O'Neil-Hart"),
    ],
)
def test_account_holder(text, expected):
    assert extract_account_info(text).account_holder == expected


def test_account_holder_needs_capitalized_name():
    assert extract_account_info("account holder: n/a").account_holder is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Account Number: ****1234", "****1234"),
        ("Account #: 9876543210", "****3210"),
        ("Account number XXXX5678", "****5678"),
    ],
)
def test_masked_account_number(text, expected):
    assert extract_account_info(text).account_number_masked == expected


def test_wells_fargo_balances_with_date():
    text = "Beginning balance on 3/12 $1,234.56\nEnding balance on 4/5 (12.00)"
    info = extract_account_info(text)

    assert info.opening_balance == Decimal("1234.56")
    assert info.closing_balance == Decimal("-12.00")


def test_statement_period_separators():
    for sep in ("-", "to", "through"):
        period = extract_statement_period(f"Statement Period: 01/01/2024 {sep} 01/31/2024")
        assert period.start == datetime.date(2024, 1, 1)
        assert period.end == datetime.date(2024, 1, 31)


def test_statement_period_needs_both_dates():
    assert extract_statement_period("Statement Period: 01/01/2024 - 02/30/2024") is None
    assert extract_statement_period("Statement Period: January 1 - January 31, 2024") is None
