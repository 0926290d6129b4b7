"""Property-based tests for the field format rules.

The purchase date rule is checked against the standard library calendar:
every real date in 1900-2099 matches, and no impossible date does.
"""

import calendar
from datetime import date

from hypothesis import given
from hypothesis import strategies as st

from regcheck.validation.rules import (
    is_valid_amount,
    is_valid_code,
    is_valid_description,
    is_valid_email,
    is_valid_purchase_date,
)
from tests.conftest import valid_amounts, valid_codes, valid_emails, valid_purchase_dates


@given(valid_purchase_dates())
def test_every_real_date_matches(value: str) -> None:
    """Every calendar date between 1900-01-01 and 2099-12-31 is accepted."""
    assert is_valid_purchase_date(value)


@given(
    year=st.integers(min_value=1900, max_value=2099),
    month=st.integers(min_value=0, max_value=13),
    day=st.integers(min_value=0, max_value=32),
)
def test_date_matches_only_when_calendar_agrees(year: int, month: int, day: int) -> None:
    """A zero-padded date string matches exactly when it is a real date."""
    value = f"{year:04d}-{month:02d}-{day:02d}"
    try:
        date(year, month, day)
        real = True
    except ValueError:
        real = False

    assert is_valid_purchase_date(value) == real


@given(st.integers(min_value=1900, max_value=2099))
def test_february_29_follows_leap_year_rule(year: int) -> None:
    """February 29 matches exactly in Gregorian leap years."""
    assert is_valid_purchase_date(f"{year}-02-29") == calendar.isleap(year)


@given(valid_codes())
def test_generated_codes_match(value: str) -> None:
    assert is_valid_code(value)


@given(valid_codes(), st.text(min_size=1, max_size=3))
def test_code_with_extra_characters_never_matches(value: str, extra: str) -> None:
    """The code rule is anchored at both ends."""
    assert not is_valid_code(value + extra)
    assert not is_valid_code(extra + value)


@given(valid_amounts())
def test_generated_amounts_match_in_both_modes(value: str) -> None:
    assert is_valid_amount(value)
    assert is_valid_amount(value, strict=True)


@given(st.text(max_size=10), valid_amounts())
def test_loose_amount_tolerates_any_prefix(prefix: str, value: str) -> None:
    """Loose amounts are end-anchored only, so any prefix is tolerated."""
    assert is_valid_amount(prefix + value)


@given(valid_emails())
def test_generated_emails_match_in_both_modes(value: str) -> None:
    assert is_valid_email(value)
    assert is_valid_email(value, strict=True)


@given(st.text(alphabet=" \t\r\n\f\v", max_size=10))
def test_whitespace_description_never_matches(value: str) -> None:
    assert not is_valid_description(value)


@given(st.text(alphabet=" \t", max_size=5), st.characters(exclude_categories=("Zs", "Zl", "Zp", "Cc")))
def test_description_with_visible_character_matches(padding: str, char: str) -> None:
    assert is_valid_description(padding + char + padding)
