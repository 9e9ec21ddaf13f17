"""Unit tests for Congress reference data."""

import pytest

from ingestion.lib.reference_data import (
    HOUSE_APPORTIONMENT,
    STATE_NAMES,
    TERRITORY_CODES,
    current_congress,
    is_territory,
    state_code,
    state_name,
)


def test_apportionment_totals_435():
    assert sum(HOUSE_APPORTIONMENT.values()) == 435


def test_apportionment_covers_every_state():
    assert len(HOUSE_APPORTIONMENT) == 50
    assert set(HOUSE_APPORTIONMENT) == set(STATE_NAMES) - TERRITORY_CODES


@pytest.mark.parametrize(
    "value, expected",
    [
        ("CA", "CA"),
        ("ca", "CA"),
        (" California ", "CA"),
        ("new york", "NY"),
        ("U.S. Virgin Islands", "VI"),
        ("Atlantis", None),
        ("", None),
        (None, None),
    ],
)
def test_state_code(value, expected):
    assert state_code(value) == expected


def test_state_name():
    assert state_name("TX") == "Texas"
    assert state_name("Texas") == "Texas"
    assert state_name("XX") is None


def test_is_territory():
    assert is_territory("DC")
    assert is_territory("Puerto Rico")
    assert not is_territory("Ohio")
    assert not is_territory(None)


@pytest.mark.parametrize(
    "year, expected",
    [(2023, 118), (2024, 118), (2025, 119), (2026, 119), (2027, 120)],
)
def test_current_congress(year, expected):
    assert current_congress(year) == expected
