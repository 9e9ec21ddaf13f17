"""Unit tests for directory statistics."""

import pytest

from frontend.stats import format_money, summarize_members


def test_summarize_members():
    members = [
        {"party": "D", "chamber": "House", "campaignFinance": {"totalRaised": 1_000_000}},
        {"party": "R", "chamber": "Senate", "campaignFinance": {"totalRaised": 2_000_000}},
        {"party": "I", "chamber": "Senate"},
    ]

    stats = summarize_members(members)

    assert stats == {
        "total": 3,
        "house": 1,
        "senate": 2,
        "democrats": 1,
        "republicans": 1,
        "independents": 1,
        "avgRaised": 1_000_000.0,
    }


def test_summarize_members_empty():
    stats = summarize_members([])

    assert stats["total"] == 0
    assert stats["avgRaised"] == 0.0


def test_summarize_members_without_finance():
    stats = summarize_members([{"party": "D", "chamber": "House"}])

    assert stats["avgRaised"] == 0.0
    assert stats["democrats"] == 1


@pytest.mark.parametrize(
    "amount, expected",
    [
        (1_234_567, "$1.2M"),
        (850_000, "$850K"),
        (900, "$900"),
        (0, "$0"),
    ],
)
def test_format_money(amount, expected):
    assert format_money(amount) == expected
