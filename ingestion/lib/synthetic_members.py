"""Synthetic Congress roster for degraded mode.

When Congress.gov cannot be reached the API still needs something to show.
This module fabricates one member per voting seat (100 senators and 435
representatives) in the same shape as the Congress.gov list endpoint, so the
records flow through the regular normalizer.

Ids are derived from the seat, so repeated requests return the same id set
even though names, parties and tenure are redrawn each time.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from ingestion.lib.placeholder_data import PlaceholderGenerator
from ingestion.lib.reference_data import (
    HOUSE_APPORTIONMENT,
    SENATORS_PER_STATE,
    STATE_NAMES,
)

logger = logging.getLogger(__name__)


def generate_roster(
    placeholders: PlaceholderGenerator, today: Optional[date] = None
) -> List[Dict[str, Any]]:
    """Build raw member objects for every voting seat.

    Args:
        placeholders: Source of names, parties and start years
        today: Reference date (default: today)

    Returns:
        List of Congress.gov-shaped member dicts
    """
    today = today or date.today()
    roster = []

    for code, seats in HOUSE_APPORTIONMENT.items():
        for seat in range(1, SENATORS_PER_STATE + 1):
            roster.append(
                _synthetic_member(
                    f"SYN-{code}-SEN{seat}", code, "Senate", None, placeholders, today
                )
            )

        for district in range(1, seats + 1):
            # Single-seat states elect at large; Congress.gov reports no district
            district_number = district if seats > 1 else None
            roster.append(
                _synthetic_member(
                    f"SYN-{code}-{district:02d}",
                    code,
                    "House of Representatives",
                    district_number,
                    placeholders,
                    today,
                )
            )

    logger.info(f"Generated synthetic roster with {len(roster)} seats")
    return roster


def _synthetic_member(
    member_id: str,
    state: str,
    chamber: str,
    district: Optional[int],
    placeholders: PlaceholderGenerator,
    today: date,
) -> Dict[str, Any]:
    term = {
        "chamber": chamber,
        "startYear": placeholders.term_start_year(today.year),
        "stateCode": state,
        "stateName": STATE_NAMES[state],
    }
    member = {
        "bioguideId": member_id,
        "name": placeholders.full_name(),
        "partyName": placeholders.party_name(),
        "state": state,
        "terms": {"item": [term]},
        "url": "",
        "updateDate": None,
    }
    if district is not None:
        member["district"] = district
    return member
