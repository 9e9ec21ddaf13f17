"""
Pydantic response models for the Argus members API

Provides type-safe models for Lambda handlers that enable:
- Runtime validation of normalized member records
- Consistent camelCase JSON for the browser UI

Usage:
    from api.lib.response_models import MemberRecord, MembersResponse

    record = MemberRecord(
        id="P000197",
        name="Pelosi, Nancy",
        party="D",
        state="California",
        chamber="House",
        district="11",
        title="Representative",
        yearsInOffice=38,
        campaignFinance={"totalRaised": 1200000},
    )
    body = MembersResponse(members=[record], total=1, source="congress.gov/member")
    body.model_dump(mode="json", by_alias=True)
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ============================================================================
# Enums
# ============================================================================


class Chamber(str, Enum):
    """Congressional chamber"""

    HOUSE = "House"
    SENATE = "Senate"


class Party(str, Enum):
    """Political party code"""

    DEMOCRAT = "D"
    REPUBLICAN = "R"
    INDEPENDENT = "I"


class VoteCast(str, Enum):
    YES = "Yes"
    NO = "No"


TITLES = {
    Chamber.HOUSE: "Representative",
    Chamber.SENATE: "Senator",
}


# ============================================================================
# Entity Models
# ============================================================================


class CampaignFinance(BaseModel):
    """Campaign finance summary (placeholder until a provider is wired in)"""

    model_config = ConfigDict(populate_by_name=True)

    total_raised: int = Field(0, alias="totalRaised", ge=0, description="Total funds raised (USD)")


class RecentVote(BaseModel):
    """A single recorded vote (placeholder)"""

    title: str
    vote: VoteCast
    date: date


class MemberRecord(BaseModel):
    """Normalized member of Congress"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "P000197",
                "name": "Pelosi, Nancy",
                "party": "D",
                "partyName": "Democratic",
                "state": "California",
                "chamber": "House",
                "district": "11",
                "title": "Representative",
                "yearsInOffice": 38,
                "campaignFinance": {"totalRaised": 1200000},
                "recentVotes": [{"title": "Recent Vote", "vote": "Yes", "date": "2025-03-01"}],
            }
        },
    )

    id: str = Field(..., description="Upstream identifier (bioguide ID)")
    name: str = Field(..., description="Display name")
    party: Party
    party_name: Optional[str] = Field(None, alias="partyName")
    state: str = Field(..., description="Postal code or full state name, as supplied upstream")
    chamber: Chamber
    district: Optional[str] = Field(None, description="District number or 'At-Large' (House only)")
    title: str
    years_in_office: int = Field(0, alias="yearsInOffice", ge=0)
    url: str = ""
    depiction: Optional[str] = Field(None, description="Portrait image URL")
    update_date: Optional[str] = Field(None, alias="updateDate")
    campaign_finance: CampaignFinance = Field(default_factory=CampaignFinance, alias="campaignFinance")
    recent_votes: List[RecentVote] = Field(default_factory=list, alias="recentVotes")

    @model_validator(mode="after")
    def check_chamber_fields(self) -> "MemberRecord":
        if self.chamber == Chamber.HOUSE and not self.district:
            raise ValueError("House members require a district")
        if self.chamber == Chamber.SENATE and self.district is not None:
            raise ValueError("Senate members have no district")
        if self.title != TITLES[self.chamber]:
            raise ValueError(f"Title {self.title!r} does not match chamber {self.chamber.value}")
        return self


# ============================================================================
# Response Models
# ============================================================================


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class MembersResponse(BaseModel):
    """Body of GET /v1/members"""

    members: List[MemberRecord]
    total: int = Field(..., ge=0)
    timestamp: str = Field(default_factory=_utc_now, description="ISO-8601 UTC generation time")
    source: str = Field(..., description="Acquisition strategy that produced the data")


class MemberDetailResponse(BaseModel):
    """Body of GET /v1/members/{id}"""

    member: MemberRecord
    timestamp: str = Field(default_factory=_utc_now)
    source: str


class ErrorResponse(BaseModel):
    """Body of every non-2xx response"""

    error: str = Field(..., description="Error kind, e.g. 'ConfigurationError'")
    message: str = Field(..., description="Safe, human-readable message")
    details: Optional[str] = Field(None, description="Raw error detail (non-production only)")
