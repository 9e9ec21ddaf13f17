"""
In-memory query builder for normalized member records

Builds one predicate per requested filter, AND-combines them, and applies the
directory sort order. Input lists are never modified.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from api.lib.response_models import Chamber, MemberRecord
from ingestion.lib.reference_data import state_code

logger = logging.getLogger(__name__)

# Sorts non-numeric and missing districts after every real district
DISTRICT_SENTINEL = 9999

Predicate = Callable[[MemberRecord], bool]


@dataclass(frozen=True)
class MemberFilters:
    """Optional, independently composable member filters."""

    party: Optional[str] = None
    state: Optional[str] = None
    chamber: Optional[str] = None
    search: Optional[str] = None

    def active(self) -> dict:
        return {k: v for k, v in self.__dict__.items() if v}


class MemberQueryBuilder:
    """Filter and sort MemberRecords.

    Example:
        builder = MemberQueryBuilder()
        result = builder.query(members, MemberFilters(state="CA", chamber="House"))
    """

    def query(self, members: List[MemberRecord], filters: MemberFilters) -> List[MemberRecord]:
        """Apply all filters, then sort."""
        results = list(members)

        for column, predicate in self._build_predicates(filters):
            results = [member for member in results if predicate(member)]
            logger.info(f"After {column} filter: {len(results)} members")

        return sort_members(results)

    def _build_predicates(self, filters: MemberFilters) -> List[Tuple[str, Predicate]]:
        """One (column, predicate) pair per non-empty filter."""
        predicates = []

        for column, value in filters.active().items():
            predicates.append((column, self._build_condition(column, value)))

        return predicates

    def _build_condition(self, column: str, value: str) -> Predicate:
        """Build a predicate for a single filter."""
        if column == "party":
            party = value.strip().upper()
            return lambda member: member.party.value == party

        if column == "state":
            wanted = state_code(value)
            if wanted is None:
                logger.warning(f"Unrecognized state filter: {value}")
                return lambda member: False
            return lambda member: state_code(member.state) == wanted

        if column == "chamber":
            chamber = _parse_chamber(value)
            if chamber is None:
                logger.warning(f"Unrecognized chamber filter: {value}")
                return lambda member: False
            return lambda member: member.chamber == chamber

        if column == "search":
            needle = value.strip().lower()
            return lambda member: _matches_search(member, needle)

        raise ValueError(f"Unsupported filter: {column}")


def sort_members(members: List[MemberRecord]) -> List[MemberRecord]:
    """Order by state, then chamber (House before Senate), then district number."""
    return sorted(members, key=sort_key)


def sort_key(member: MemberRecord) -> Tuple[str, str, int]:
    return (member.state, member.chamber.value, district_number(member.district))


def district_number(district: Optional[str]) -> int:
    try:
        return int(district)
    except (TypeError, ValueError):
        return DISTRICT_SENTINEL


def _parse_chamber(value: str) -> Optional[Chamber]:
    chamber = value.strip().lower()
    if chamber in ("house", "h"):
        return Chamber.HOUSE
    if chamber in ("senate", "s"):
        return Chamber.SENATE
    return None


def _matches_search(member: MemberRecord, needle: str) -> bool:
    return needle in member.name.lower()
