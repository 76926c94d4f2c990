# This project was developed with assistance from AI tools.
"""Tests for raw form value coercion."""

from datetime import date
from decimal import Decimal

import pytest

from portal_api.services.normalize import (
    TriState,
    last4,
    parse_age_list,
    safe_date,
    to_decimal,
    to_int,
    to_null_if_empty,
    to_tri_state,
    to_tri_state_bool,
)

# ---------------------------------------------------------------------------
# to_null_if_empty
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("value", [None, "", "   ", "null", "undefined", "NULL"])
def test_blank_values_become_none(value):
    """Blank input and browser placeholders are treated as absent."""
    assert to_null_if_empty(value) is None


def test_values_are_trimmed():
    assert to_null_if_empty("  Jane ") == "Jane"


# ---------------------------------------------------------------------------
# to_decimal / to_int
# ---------------------------------------------------------------------------


def test_to_decimal_strips_currency_formatting():
    """$1,200.50 parses to 1200.50."""
    assert to_decimal("$1,200.50") == Decimal("1200.50")


def test_to_decimal_quantizes_to_cents():
    assert to_decimal("350000") == Decimal("350000.00")
    assert to_decimal("19.999") == Decimal("20.00")


def test_to_decimal_keeps_negative_amounts():
    """Self-employment losses are posted as negative numbers."""
    assert to_decimal("-1,500") == Decimal("-1500.00")


@pytest.mark.parametrize("value", ["abc", "", None, "$", "1.2.3", "--", "1-2", "..", "NaN"])
def test_to_decimal_returns_none_for_garbage(value):
    """Unparsable input yields None instead of raising."""
    assert to_decimal(value) is None


def test_to_int_truncates_and_strips_units():
    assert to_int("3.9") == 3
    assert to_int("12 yrs") == 12
    assert to_int("1,000") == 1000


@pytest.mark.parametrize("value", ["abc", "", None, "-", "1.2.3", "Infinity"])
def test_to_int_returns_none_for_garbage(value):
    assert to_int(value) is None


# ---------------------------------------------------------------------------
# Tri-state booleans
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("value", ["true", "TRUE", "t", "Yes", "y", "1", "on", "checked"])
def test_truthy_spellings(value):
    assert to_tri_state(value) is TriState.TRUE


@pytest.mark.parametrize("value", ["false", "F", "no", "n", "0", "off", "unchecked"])
def test_falsy_spellings(value):
    assert to_tri_state(value) is TriState.FALSE


@pytest.mark.parametrize("value", [None, "", "null", "maybe", "2"])
def test_unknown_spellings(value):
    assert to_tri_state(value) is TriState.UNKNOWN


def test_tri_state_projections():
    """as_bool keeps unknown as None; or_false collapses it to False."""
    assert TriState.TRUE.as_bool() is True
    assert TriState.FALSE.as_bool() is False
    assert TriState.UNKNOWN.as_bool() is None
    assert TriState.UNKNOWN.or_false() is False
    assert TriState.TRUE.or_false() is True


def test_to_tri_state_bool():
    assert to_tri_state_bool("yes") is True
    assert to_tri_state_bool("no") is False
    assert to_tri_state_bool("") is None


# ---------------------------------------------------------------------------
# Dates, SSNs, ages
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value",
    ["1988-04-12", "04/12/1988", "04-12-1988", "April 12, 1988", "Apr 12, 1988"],
)
def test_safe_date_accepts_known_formats(value):
    assert safe_date(value) == date(1988, 4, 12)


@pytest.mark.parametrize("value", ["", None, "12/31", "1988-02-30", "yesterday"])
def test_safe_date_returns_none_for_bad_input(value):
    assert safe_date(value) is None


def test_last4_keeps_only_digits():
    assert last4("123-45-6789") == "6789"
    assert last4(" 4111 1111 1111 1111 ") == "1111"


def test_last4_needs_four_digits():
    assert last4("12-3") is None
    assert last4(None) is None


def test_parse_age_list_skips_bad_entries():
    assert parse_age_list("4, 7,x, 12") == [4, 7, 12]
    assert parse_age_list("-3, 5") == [5]
    assert parse_age_list("") == []
