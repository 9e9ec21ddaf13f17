"""Schema mappers for Congress.gov member JSON to display records.

Transforms raw member objects (from the list endpoints, the detail endpoint,
or the synthetic roster) into normalized MemberRecords.

Example:
    from ingestion.lib.congress_schema_mappers import map_member_to_record

    raw = {"bioguideId": "P000197", "name": "Pelosi, Nancy", ...}
    record = map_member_to_record(raw, placeholders)
"""

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from api.lib.response_models import TITLES, Chamber, MemberRecord, Party
from ingestion.lib.placeholder_data import PlaceholderGenerator
from ingestion.lib.reference_data import is_territory

logger = logging.getLogger(__name__)

AT_LARGE = "At-Large"


def map_member_to_record(
    member: Dict[str, Any],
    placeholders: PlaceholderGenerator,
    today: Optional[date] = None,
) -> Optional[MemberRecord]:
    """Map one Congress.gov member object to a MemberRecord.

    Args:
        member: Raw member object. A detail response wrapped in a
            ``member`` key is accepted too.
        placeholders: Source of campaign finance and vote placeholders
        today: Reference date for tenure and vote dates (default: today)

    Returns:
        MemberRecord, or None when the member has no identifier, no term
        data, or sits for a territory with no identifiable chamber
    """
    if "member" in member and isinstance(member["member"], dict):
        member = member["member"]

    today = today or date.today()
    member_id = member.get("bioguideId") or member.get("id")
    if not member_id:
        logger.warning("Dropping member without an identifier")
        return None

    terms = _extract_terms(member)
    term = select_current_term(terms)
    if term is None:
        logger.warning(f"Dropping member {member_id}: no term data")
        return None

    state = member.get("state") or term.get("stateName") or term.get("stateCode") or ""

    chamber = _term_chamber(term)
    if chamber is None:
        if is_territory(state) or is_territory(term.get("stateCode")):
            logger.info(f"Dropping member {member_id}: territory delegate ({state})")
            return None
        chamber = Chamber.HOUSE

    if chamber == Chamber.HOUSE:
        district = _normalize_district(
            term.get("district") or member.get("district")
        )
    else:
        district = None

    start_year = service_start_year(terms, term)
    years_in_office = max(0, today.year - start_year) if start_year else 0

    party_name = _party_name(member)
    depiction = member.get("depiction") or {}

    return MemberRecord(
        id=str(member_id),
        name=_display_name(member),
        party=_normalize_party(party_name),
        party_name=party_name,
        state=state,
        chamber=chamber,
        district=district,
        title=TITLES[chamber],
        years_in_office=years_in_office,
        url=member.get("url") or "",
        depiction=depiction.get("imageUrl"),
        update_date=member.get("updateDate"),
        campaign_finance=placeholders.campaign_finance(),
        recent_votes=placeholders.recent_votes(today),
    )


def normalize_members(
    members: Iterable[Dict[str, Any]],
    placeholders: PlaceholderGenerator,
    today: Optional[date] = None,
) -> List[MemberRecord]:
    """Normalize a batch, dropping records that cannot be mapped.

    A malformed record is logged and skipped; it never fails the batch.
    """
    records = []
    dropped = 0

    for member in members:
        try:
            record = map_member_to_record(member, placeholders, today)
        except (ValueError, TypeError, AttributeError, KeyError) as e:
            logger.warning(
                f"Dropping malformed member {_safe_id(member)}: {e}"
            )
            record = None

        if record is None:
            dropped += 1
            continue
        records.append(record)

    logger.info(f"Normalized {len(records)} members ({dropped} dropped)")
    return records


def select_current_term(terms: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Pick the most recent term by start year.

    Ties on start year go to the open term (no ``endYear``), then the later
    ``endYear``, then Senate over House.
    """
    if not terms:
        return None

    def sort_key(term: Dict[str, Any]):
        start = _safe_int(term.get("startYear")) or 0
        end = _safe_int(term.get("endYear"))
        is_senate = _term_chamber(term) == Chamber.SENATE
        return (start, end is None, end or 0, is_senate)

    return max(terms, key=sort_key)


def service_start_year(
    terms: List[Dict[str, Any]], current: Dict[str, Any]
) -> Optional[int]:
    """Start year of the unbroken run of same-chamber terms ending in ``current``.

    The detail endpoint lists one term per Congress (1987-1989, 1989-1991, ...)
    while the list endpoint has one term per stint, so tenure is measured from
    the start of the run, not of the current term. A term joins the run when
    its ``endYear`` equals the run's start year.
    """
    start = _safe_int(current.get("startYear"))
    if start is None:
        return None

    chamber = _term_chamber(current)
    starts_by_end = {}
    for term in terms:
        if _term_chamber(term) != chamber:
            continue
        term_start = _safe_int(term.get("startYear"))
        term_end = _safe_int(term.get("endYear"))
        if term_start is None or term_end is None:
            continue
        starts_by_end[term_end] = min(term_start, starts_by_end.get(term_end, term_start))

    while start in starts_by_end and starts_by_end[start] < start:
        start = starts_by_end[start]

    return start


# =============================================================================
# Helper Functions
# =============================================================================


def _extract_terms(member: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Terms come as ``{"item": [...]}`` from list endpoints, a list from detail."""
    terms = member.get("terms") or []
    if isinstance(terms, dict):
        terms = terms.get("item") or []
    if isinstance(terms, dict):
        terms = [terms]
    return [term for term in terms if isinstance(term, dict)]


def _normalize_party(party_name: Optional[str]) -> Party:
    """Normalize a free-text party name to D, R or I."""
    if party_name:
        if "Democratic" in party_name:
            return Party.DEMOCRAT
        if "Republican" in party_name:
            return Party.REPUBLICAN
    return Party.INDEPENDENT


def _normalize_chamber(chamber: Optional[str]) -> Optional[Chamber]:
    """Classify a free-text chamber; None when ambiguous."""
    if not chamber:
        return None

    chamber = str(chamber).strip().lower()

    if "senat" in chamber:
        return Chamber.SENATE
    elif "house" in chamber or "representative" in chamber:
        return Chamber.HOUSE
    else:
        return None


def _term_chamber(term: Dict[str, Any]) -> Optional[Chamber]:
    return _normalize_chamber(term.get("chamber") or term.get("memberType"))


def _normalize_district(district: Any) -> str:
    """District number as a string; At-Large when missing or zero."""
    number = _safe_int(district)
    if number is None or number <= 0:
        return AT_LARGE
    return str(number)


def _party_name(member: Dict[str, Any]) -> Optional[str]:
    if member.get("partyName"):
        return member["partyName"]

    history = member.get("partyHistory") or []
    if history:
        latest = max(history, key=lambda entry: _safe_int(entry.get("startYear")) or 0)
        if latest.get("partyName"):
            return latest["partyName"]

    return member.get("party")


def _display_name(member: Dict[str, Any]) -> str:
    if member.get("name"):
        return member["name"]
    if member.get("directOrderName"):
        return member["directOrderName"]

    first = member.get("firstName") or ""
    last = member.get("lastName") or ""
    return f"{last}, {first}".strip(", ") or "Unknown"


def _safe_int(value: Any) -> Optional[int]:
    """Safely convert value to int."""
    if value is None:
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def _safe_id(member: Any) -> str:
    if isinstance(member, dict):
        return str(member.get("bioguideId") or member.get("id") or "<unknown>")
    return "<not an object>"
