"""
Tests for stored date decoding and canonical encoding.
"""
from datetime import date, datetime

import pytest

from core.dates import (
    DateDecodeError,
    is_ambiguous,
    parse_canonical,
    parse_stored_date,
    to_canonical,
)


# =============================================================================
# ENCODING ORDER
# =============================================================================

def test_canonical_date():
    decoded = parse_stored_date("1990-12-25")
    assert decoded.value == date(1990, 12, 25)
    assert decoded.encoding == "canonical"
    assert decoded.is_canonical
    assert not decoded.ambiguous


def test_us_date_when_day_exceeds_twelve():
    decoded = parse_stored_date("12/25/1990")
    assert decoded.value == date(1990, 12, 25)
    assert decoded.encoding == "us"
    assert not decoded.ambiguous


def test_legacy_date_when_day_first_exceeds_twelve():
    decoded = parse_stored_date("25/12/1990")
    assert decoded.value == date(1990, 12, 25)
    assert decoded.encoding == "legacy"
    assert not decoded.ambiguous


def test_surrounding_whitespace_ignored():
    assert parse_stored_date("  2001-02-03 ").value == date(2001, 2, 3)


def test_same_day_and_month_is_not_ambiguous():
    decoded = parse_stored_date("05/05/2020")
    assert decoded.value == date(2020, 5, 5)
    assert not decoded.ambiguous


# =============================================================================
# AMBIGUOUS DATES
# =============================================================================

def test_ambiguous_legacy_date_reads_day_first():
    """03/04/2020 written by the legacy system is 3 April, not 4 March."""
    decoded = parse_stored_date("03/04/2020", ambiguous_policy="day_first")
    assert decoded.value == date(2020, 4, 3)
    assert decoded.encoding == "legacy"
    assert decoded.ambiguous


def test_day_first_is_the_default_policy():
    assert parse_stored_date("03/04/2020").value == date(2020, 4, 3)


def test_month_first_policy():
    decoded = parse_stored_date("03/04/2020", ambiguous_policy="month_first")
    assert decoded.value == date(2020, 3, 4)
    assert decoded.encoding == "us"
    assert decoded.ambiguous


def test_reject_policy_quarantines_ambiguous_dates():
    with pytest.raises(DateDecodeError) as exc_info:
        parse_stored_date("03/04/2020", ambiguous_policy="reject")
    assert "ambiguous" in str(exc_info.value)


def test_reject_policy_still_reads_unambiguous_dates():
    assert parse_stored_date("12/25/1990", ambiguous_policy="reject").value == date(1990, 12, 25)
    assert parse_stored_date("1990-12-25", ambiguous_policy="reject").value == date(1990, 12, 25)


def test_unknown_policy_rejected():
    with pytest.raises(ValueError):
        parse_stored_date("1990-12-25", ambiguous_policy="guess")


@pytest.mark.parametrize("value, expected", [
    ("03/04/2020", True),
    ("12/11/1999", True),
    ("13/04/2020", False),
    ("04/13/2020", False),
    ("04/04/2020", False),
    ("2020-03-04", False),
])
def test_is_ambiguous(value, expected):
    assert is_ambiguous(value) is expected


# =============================================================================
# FAILURES
# =============================================================================

@pytest.mark.parametrize("value", ["", "   ", "not a date", "2020/13/45", "31/02/2020", "1990.12.25"])
def test_undecodable_values(value):
    with pytest.raises(DateDecodeError):
        parse_stored_date(value)


def test_non_text_value():
    with pytest.raises(DateDecodeError):
        parse_stored_date(None)


# =============================================================================
# CANONICAL ENCODING
# =============================================================================

def test_to_canonical():
    assert to_canonical(date(2020, 4, 3)) == "2020-04-03"


def test_to_canonical_drops_time():
    assert to_canonical(datetime(2020, 4, 3, 17, 45)) == "2020-04-03"


def test_parse_canonical_strict():
    assert parse_canonical("2024-03-15") == date(2024, 3, 15)
    with pytest.raises(DateDecodeError):
        parse_canonical("03/15/2024")


def test_to_canonical_pads_early_years():
    assert to_canonical(date(999, 5, 17)) == "0999-05-17"
    assert parse_canonical("0999-05-17") == date(999, 5, 17)
    assert parse_stored_date(to_canonical(date(45, 1, 2))).value == date(45, 1, 2)
