# This project was developed with assistance from AI tools.
"""Tests for section gates."""

import logging

import pytest

from portal_api.services import gates
from portal_api.services.normalize import TriState


@pytest.mark.parametrize("value", ["true", "Yes", "on", "1"])
def test_gate_opens_on_explicit_yes(value):
    assert gates.LIABILITIES.is_open({"hasLiabilities2c": value}) is True


@pytest.mark.parametrize("value", ["false", "no", "", "null", "maybe"])
def test_gate_stays_closed_otherwise(value):
    assert gates.LIABILITIES.is_open({"hasLiabilities2c": value}) is False


def test_missing_flag_closes_gate():
    assert gates.GIFTS_GRANTS.is_open({}) is False
    assert gates.GIFTS_GRANTS.state({}) is TriState.UNKNOWN


def test_skipped_section_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="portal_api.services.gates"):
        gates.REAL_ESTATE.is_open({"hasRealEstate3": "no"})
    assert "real estate owned" in caplog.text
    assert "hasRealEstate3" in caplog.text


def test_property_mortgage_gates_are_numbered():
    assert gates.PROPERTY_MORTGAGES[2].flag_field == "hasMortgageLoans2"
    assert set(gates.ADDITIONAL_PROPERTIES) == {2, 3}
