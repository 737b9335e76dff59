import pytest

from statement_parser.lines import (
    is_balance_line,
    is_metadata_line,
    is_transaction_start,
    looks_like_transaction,
)


@pytest.mark.parametrize(
    "line",
    [
        "TOTALS AT END OF PAGE $1234.56",
        "TOTALS $56.80 $2,500.00",
        "OPENING BALANCE 1,000.00",
        "Closing Balance 2,393.20",
        "Total Deposits 2,650.00",
        "----------------Page (0) Break----------------",
        "Page 2 of 4",
        "Account Number 012-345 678901234",
        "Branch Number (BSB) 012-345",
        "Statement Period 01 JUL 2024 TO 31 AUG 2024",
        "Need to Get In Touch?",
        "ANZ Internet Banking",
        "Welcome to your statement",
        "YOUR ACCOUNT AT A GLANCE",
        "Enquiries 13 13 14",
        "Australia and New Zealand Banking Group Limited",
        "Transaction Details",
        "Please retain this statement for taxation purposes",
        "Date Transaction Details Withdrawals ($) Deposits ($) Balance ($)",
        "blank",
        "  blank  ",
    ],
)
def test_metadata_lines_are_recognized(line):
    assert is_metadata_line(line)


@pytest.mark.parametrize(
    "line",
    [
        "08 JUL 2024 VISA PURCHASE COFFEE SHOP blank 4.50",
        "BREAKFAST CLUB CAFE",
        "EFFECTIVE DATE 04 MAR 2024 blank 100.00",
        "TO CITY RENTALS LANDLORD",
        "1,200.00 blank 2,243.20",
        "",
    ],
)
def test_transaction_text_is_not_metadata(line):
    assert not is_metadata_line(line)


def test_balance_lines_are_a_subset_of_metadata():
    assert is_balance_line("OPENING BALANCE blank blank 1,000.00")
    assert is_balance_line("TOTALS AT END OF PAGE $1234.56")
    assert not is_balance_line("Welcome to your statement")
    assert not is_balance_line("WELCOME BONUS 50.00")


@pytest.mark.parametrize(
    "line",
    [
        "08 JUL 2024 VISA PURCHASE",
        "  8 jul coffee",
        "15 Jan",
        "31 DEC 2023 INTEREST",
        "02 MAR 2024",
    ],
)
def test_transaction_start_requires_leading_day_and_month(line):
    assert is_transaction_start(line)


@pytest.mark.parametrize(
    "line",
    [
        "EFFECTIVE DATE 04 MAR 2024 blank 100.00",
        "12 MAYFAIR ST",
        "2024 JUL 08",
        "JUL 08 2024",
        "123 JUL 2024",
        "",
    ],
)
def test_non_start_lines(line):
    assert not is_transaction_start(line)


def test_looks_like_transaction_needs_keyword_or_currency():
    assert looks_like_transaction("08 JUL 2024 VISA PURCHASE COFFEE SHOP")
    assert looks_like_transaction("08 JUL 2024 COFFEE SHOP 4.50")
    assert looks_like_transaction("08 JUL 2024 COFFEE SHOP $4")
    assert looks_like_transaction("08 JUL 2024 eftpos market")
    assert not looks_like_transaction("08 JUL 2024 SOMETHING ELSE")
    assert not looks_like_transaction("VISA PURCHASE 4.50")
