"""
Reference data for Congress membership.
Sources: https://www.census.gov/data/tables/2020/dec/2020-apportionment-data.html
         https://pe.usps.com/text/pub28/28apb.htm
"""

from datetime import datetime
from typing import Optional

STATE_NAMES = {
    "AL": "Alabama",
    "AK": "Alaska",
    "AZ": "Arizona",
    "AR": "Arkansas",
    "CA": "California",
    "CO": "Colorado",
    "CT": "Connecticut",
    "DE": "Delaware",
    "FL": "Florida",
    "GA": "Georgia",
    "HI": "Hawaii",
    "ID": "Idaho",
    "IL": "Illinois",
    "IN": "Indiana",
    "IA": "Iowa",
    "KS": "Kansas",
    "KY": "Kentucky",
    "LA": "Louisiana",
    "ME": "Maine",
    "MD": "Maryland",
    "MA": "Massachusetts",
    "MI": "Michigan",
    "MN": "Minnesota",
    "MS": "Mississippi",
    "MO": "Missouri",
    "MT": "Montana",
    "NE": "Nebraska",
    "NV": "Nevada",
    "NH": "New Hampshire",
    "NJ": "New Jersey",
    "NM": "New Mexico",
    "NY": "New York",
    "NC": "North Carolina",
    "ND": "North Dakota",
    "OH": "Ohio",
    "OK": "Oklahoma",
    "OR": "Oregon",
    "PA": "Pennsylvania",
    "RI": "Rhode Island",
    "SC": "South Carolina",
    "SD": "South Dakota",
    "TN": "Tennessee",
    "TX": "Texas",
    "UT": "Utah",
    "VT": "Vermont",
    "VA": "Virginia",
    "WA": "Washington",
    "WV": "West Virginia",
    "WI": "Wisconsin",
    "WY": "Wyoming",
    # Non-voting delegates
    "AS": "American Samoa",
    "DC": "District of Columbia",
    "GU": "Guam",
    "MP": "Northern Mariana Islands",
    "PR": "Puerto Rico",
    "VI": "Virgin Islands",
}

TERRITORY_CODES = frozenset({"AS", "DC", "GU", "MP", "PR", "VI"})

# House seats per state after the 2020 census (sums to 435)
HOUSE_APPORTIONMENT = {
    "AL": 7, "AK": 1, "AZ": 9, "AR": 4, "CA": 52, "CO": 8, "CT": 5, "DE": 1,
    "FL": 28, "GA": 14, "HI": 2, "ID": 2, "IL": 17, "IN": 9, "IA": 4, "KS": 4,
    "KY": 6, "LA": 6, "ME": 2, "MD": 8, "MA": 9, "MI": 13, "MN": 8, "MS": 4,
    "MO": 8, "MT": 2, "NE": 3, "NV": 4, "NH": 2, "NJ": 12, "NM": 3, "NY": 26,
    "NC": 14, "ND": 1, "OH": 15, "OK": 5, "OR": 6, "PA": 17, "RI": 2, "SC": 7,
    "SD": 1, "TN": 9, "TX": 38, "UT": 4, "VT": 1, "VA": 11, "WA": 10, "WV": 2,
    "WI": 8, "WY": 1,
}

SENATORS_PER_STATE = 2

_CODES_BY_NAME = {name.lower(): code for code, name in STATE_NAMES.items()}
# Congress.gov spells these slightly differently in older records
_CODES_BY_NAME["u.s. virgin islands"] = "VI"
_CODES_BY_NAME["virgin islands of the u.s."] = "VI"


def state_code(value: Optional[str]) -> Optional[str]:
    """Resolve a postal code or full state name to its postal code.

    Returns None when the value is neither.
    """
    if not value:
        return None

    cleaned = str(value).strip()
    if cleaned.upper() in STATE_NAMES:
        return cleaned.upper()
    return _CODES_BY_NAME.get(cleaned.lower())


def state_name(value: Optional[str]) -> Optional[str]:
    """Resolve a postal code or full state name to the full name."""
    code = state_code(value)
    return STATE_NAMES.get(code) if code else None


def is_territory(value: Optional[str]) -> bool:
    """True for non-voting jurisdictions, by code or by name."""
    return state_code(value) in TERRITORY_CODES


def current_congress(year: Optional[int] = None) -> int:
    """Congress number in session for a year (119 for 2025-2026)."""
    year = year or datetime.now().year
    return ((year - 1789) // 2) + 1
