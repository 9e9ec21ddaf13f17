"""
Shared pytest fixtures for member directory tests.
"""

from datetime import date
from unittest.mock import Mock

import pytest

from ingestion.lib.placeholder_data import PlaceholderGenerator


class StubPlaceholderGenerator(PlaceholderGenerator):
    """Deterministic placeholders: fixed finance, one 'Yes' vote, cycling names."""

    def __init__(self, total_raised=1_000_000, party="Democratic", start_year=2015):
        self.total_raised = total_raised
        self.party = party
        self.start_year = start_year
        self._names = 0

    def campaign_finance(self):
        return {"totalRaised": self.total_raised}

    def recent_votes(self, today):
        return [{"title": "Recent Vote", "vote": "Yes", "date": today.isoformat()}]

    def full_name(self):
        self._names += 1
        return f"Member, Synthetic {self._names}"

    def party_name(self):
        return self.party

    def term_start_year(self, current_year):
        return self.start_year


@pytest.fixture
def placeholders():
    return StubPlaceholderGenerator()


@pytest.fixture
def today():
    return date(2025, 6, 1)


@pytest.fixture
def api_key():
    """Test API key fixture."""
    return "test_api_key_12345"


@pytest.fixture
def mock_lambda_context():
    """Mock Lambda context."""
    context = Mock()
    context.function_name = 'get-members'
    context.aws_request_id = 'test-request-id'
    return context


@pytest.fixture
def sample_env(monkeypatch, api_key):
    """Set up test environment variables."""
    monkeypatch.setenv('CONGRESS_API_KEY', api_key)
    monkeypatch.setenv('ENVIRONMENT', 'test')
    monkeypatch.setenv('LOG_LEVEL', 'INFO')


def make_raw_member(
    bioguide_id="P000197",
    name="Pelosi, Nancy",
    party_name="Democratic",
    state="California",
    district=11,
    terms=None,
    **extra,
):
    """Congress.gov list-endpoint member object."""
    if terms is None:
        terms = [{"chamber": "House of Representatives", "startYear": 1987}]
    member = {
        "bioguideId": bioguide_id,
        "name": name,
        "partyName": party_name,
        "state": state,
        "terms": {"item": terms},
        "url": f"https://api.congress.gov/v3/member/{bioguide_id}",
        "updateDate": "2025-01-03T10:00:00Z",
        "depiction": {"imageUrl": f"https://www.congress.gov/img/member/{bioguide_id.lower()}.jpg"},
    }
    if district is not None:
        member["district"] = district
    member.update(extra)
    return member


@pytest.fixture
def raw_members():
    """A small, mixed roster in Congress.gov list-endpoint shape."""
    return [
        make_raw_member(),
        make_raw_member(
            "S000148", "Schumer, Charles E.", "Democratic", "New York", None,
            [{"chamber": "House of Representatives", "startYear": 1981, "endYear": 1999},
             {"chamber": "Senate", "startYear": 1999}],
        ),
        make_raw_member(
            "S001150", "Schiff, Adam B.", "Democratic", "California", None,
            [{"chamber": "House of Representatives", "startYear": 2001, "endYear": 2024},
             {"chamber": "Senate", "startYear": 2024}],
        ),
        make_raw_member(
            "C001123", "Calvert, Ken", "Republican", "California", 41,
            [{"chamber": "House of Representatives", "startYear": 1993}],
        ),
        make_raw_member(
            "S001193", "Smith, Adrian", "Republican", "Nebraska", 3,
            [{"chamber": "House of Representatives", "startYear": 2007}],
        ),
        make_raw_member(
            "S000033", "Sanders, Bernard", "Independent", "Vermont", None,
            [{"chamber": "Senate", "startYear": 2007}],
        ),
        make_raw_member(
            "Z000017", "Zinke, Ryan K.", "Republican", "Montana", 1,
            [{"chamber": "House of Representatives", "startYear": 2023}],
        ),
        make_raw_member(
            "J000304", "Johnson, Dusty", "Republican", "South Dakota", None,
            [{"chamber": "House of Representatives", "startYear": 2019}],
        ),
        make_raw_member(
            "N000147", "Norton, Eleanor Holmes", "Democratic", "District of Columbia", None,
            [{"startYear": 1991}],
        ),
        make_raw_member("X000001", "Nobody, Termless", "Democratic", "Ohio", 4, []),
    ]


@pytest.fixture
def member_factory():
    """Build one Congress.gov list-endpoint member object."""
    return make_raw_member


def make_detail_member(bioguide_id="P000197", first_congress=100, last_congress=119):
    """Congress.gov /member/{id} payload: one term per Congress, bare list."""
    terms = []
    for congress in range(first_congress, last_congress + 1):
        start = 1987 + 2 * (congress - 100)
        term = {
            "chamber": "House of Representatives",
            "memberType": "Representative",
            "congress": congress,
            "district": 11,
            "stateCode": "CA",
            "stateName": "California",
            "startYear": start,
        }
        if congress < last_congress:
            term["endYear"] = start + 2
        terms.append(term)

    return {
        "member": {
            "bioguideId": bioguide_id,
            "directOrderName": "Nancy Pelosi",
            "firstName": "Nancy",
            "lastName": "Pelosi",
            "state": "California",
            "partyHistory": [{"partyName": "Democratic", "partyAbbreviation": "D", "startYear": 1987}],
            "terms": terms,
            "depiction": {"imageUrl": "https://www.congress.gov/img/member/p000197_200.jpg"},
            "updateDate": "2025-01-03T10:00:00Z",
        }
    }


@pytest.fixture
def detail_factory():
    """Build one Congress.gov detail-endpoint member payload."""
    return make_detail_member
