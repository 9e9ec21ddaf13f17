"""Unit tests for member filtering and sorting."""

import pytest

from api.lib.member_query import (
    DISTRICT_SENTINEL,
    MemberFilters,
    MemberQueryBuilder,
    district_number,
    sort_members,
)
from api.lib.response_models import Chamber, Party
from ingestion.lib.congress_schema_mappers import normalize_members


@pytest.fixture
def members(raw_members, placeholders, today):
    return normalize_members(raw_members, placeholders, today)


@pytest.fixture
def builder():
    return MemberQueryBuilder()


def ids(records):
    return [record.id for record in records]


class TestMemberFilters:
    """Test MemberFilters."""

    def test_active_drops_empty(self):
        filters = MemberFilters(party="D", state="", chamber=None, search="smith")

        assert filters.active() == {"party": "D", "search": "smith"}

    def test_no_filters(self):
        assert MemberFilters().active() == {}


class TestMemberQueryBuilder:
    """Test MemberQueryBuilder.query."""

    def test_no_filters_returns_everything_sorted(self, builder, members):
        result = builder.query(members, MemberFilters())

        assert ids(result) == [
            "P000197",  # California House 11
            "C001123",  # California House 41
            "S001150",  # California Senate
            "Z000017",  # Montana
            "S001193",  # Nebraska
            "S000148",  # New York
            "J000304",  # South Dakota
            "S000033",  # Vermont
        ]

    def test_input_not_modified(self, builder, members):
        before = ids(members)

        builder.query(members, MemberFilters(party="R"))

        assert ids(members) == before

    def test_party_filter(self, builder, members):
        result = builder.query(members, MemberFilters(party="R"))

        assert ids(result) == ["C001123", "Z000017", "S001193", "J000304"]
        assert all(member.party == Party.REPUBLICAN for member in result)

    def test_party_filter_case_insensitive(self, builder, members):
        assert ids(builder.query(members, MemberFilters(party="i"))) == ["S000033"]

    def test_state_and_chamber(self, builder, members):
        result = builder.query(members, MemberFilters(state="CA", chamber="House"))

        assert ids(result) == ["P000197", "C001123"]

    def test_state_by_name(self, builder, members):
        result = builder.query(members, MemberFilters(state="california"))

        assert ids(result) == ["P000197", "C001123", "S001150"]

    def test_unknown_state_matches_nothing(self, builder, members):
        assert builder.query(members, MemberFilters(state="Atlantis")) == []

    @pytest.mark.parametrize("value", ["Senate", "senate", "S"])
    def test_chamber_aliases(self, builder, members, value):
        result = builder.query(members, MemberFilters(chamber=value))

        assert ids(result) == ["S001150", "S000148", "S000033"]
        assert all(member.chamber == Chamber.SENATE for member in result)

    def test_unknown_chamber_matches_nothing(self, builder, members):
        assert builder.query(members, MemberFilters(chamber="Parliament")) == []

    def test_search_is_case_insensitive_substring(self, builder, members):
        result = builder.query(members, MemberFilters(search="SMITH"))

        assert ids(result) == ["S001193"]

    def test_search_matches_name_only(self, builder, members):
        assert builder.query(members, MemberFilters(search="Vermont")) == []

    def test_filters_combine(self, builder, members):
        result = builder.query(
            members, MemberFilters(party="D", state="CA", chamber="Senate", search="schiff")
        )

        assert ids(result) == ["S001150"]

    def test_result_is_subset_satisfying_every_filter(self, builder, members):
        filters = MemberFilters(party="R", chamber="House", search="a")

        result = builder.query(members, filters)

        assert set(ids(result)) <= set(ids(members))
        for member in result:
            assert member.party == Party.REPUBLICAN
            assert member.chamber == Chamber.HOUSE
            assert "a" in member.name.lower()

    def test_unsupported_column(self, builder):
        with pytest.raises(ValueError, match="Unsupported filter"):
            builder._build_condition("age", "40")


class TestSorting:
    """Test sort helpers."""

    def test_district_number(self):
        assert district_number("7") == 7
        assert district_number("At-Large") == DISTRICT_SENTINEL
        assert district_number(None) == DISTRICT_SENTINEL

    def test_numeric_district_order(self, member_factory, placeholders, today):
        raw = [
            member_factory("A000010", "Tenth, Rep", district=10),
            member_factory("A000002", "Second, Rep", district=2),
            member_factory("A000001", "First, Rep", district=1),
        ]

        result = sort_members(normalize_members(raw, placeholders, today))

        assert ids(result) == ["A000001", "A000002", "A000010"]

    def test_house_before_senate_in_same_state(self, members):
        california = [m for m in sort_members(members) if m.state == "California"]

        assert [m.chamber for m in california] == [Chamber.HOUSE, Chamber.HOUSE, Chamber.SENATE]
