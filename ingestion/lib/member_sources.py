"""Ordered acquisition strategies for the current Congress roster.

Each MemberSource knows how to fetch raw member objects. acquire_members()
tries sources in order, normalizes what each one returns, and commits to the
first that yields at least one usable member. Failures are returned as tagged
AcquisitionResults rather than raised, so the chain reads as a simple loop.

Example:
    from ingestion.lib.member_sources import acquire_members, default_sources

    sources = default_sources(client, placeholders)
    result = acquire_members(sources, placeholders)
    result.source    # 'congress.gov/member'
    result.members   # [MemberRecord, ...]
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from api.lib.response_models import MemberRecord
from ingestion.lib.congress_api_client import CongressAPIClient, CongressAPIError
from ingestion.lib.congress_schema_mappers import normalize_members
from ingestion.lib.placeholder_data import PlaceholderGenerator
from ingestion.lib.reference_data import current_congress
from ingestion.lib.synthetic_members import generate_roster

logger = logging.getLogger(__name__)

SYNTHETIC_SOURCE = "synthetic"


class MemberAcquisitionError(Exception):
    """Raised when every acquisition strategy failed."""

    def __init__(self, failures: List["AcquisitionResult"]):
        self.failures = failures
        summary = "; ".join(f"{f.source}: {f.error}" for f in failures)
        super().__init__(f"All member sources failed ({summary})")


@dataclass(frozen=True)
class AcquisitionResult:
    """Outcome of one strategy: members on success, a reason on failure."""

    source: str
    members: List[MemberRecord] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, source: str, members: List[MemberRecord]) -> "AcquisitionResult":
        return cls(source=source, members=members)

    @classmethod
    def failure(cls, source: str, error: str) -> "AcquisitionResult":
        return cls(source=source, error=error)


class MemberSource(ABC):
    """One way of obtaining raw member objects."""

    name: str = "unknown"

    @abstractmethod
    def fetch(self) -> Iterable[Dict[str, Any]]:
        """Return raw Congress.gov-shaped member objects."""

    def acquire(
        self, placeholders: PlaceholderGenerator, today: Optional[date] = None
    ) -> AcquisitionResult:
        try:
            raw_members = list(self.fetch())
        except CongressAPIError as e:
            logger.warning(f"Source {self.name} unavailable: {e}")
            return AcquisitionResult.failure(self.name, str(e))

        members = normalize_members(raw_members, placeholders, today)
        if not members:
            logger.warning(
                f"Source {self.name} returned {len(raw_members)} records, none usable"
            )
            return AcquisitionResult.failure(self.name, "no usable members")

        return AcquisitionResult.success(self.name, members)


class CurrentMembersSource(MemberSource):
    """GET /member?currentMember=true"""

    name = "congress.gov/member"

    def __init__(self, client: CongressAPIClient):
        self.client = client

    def fetch(self) -> Iterable[Dict[str, Any]]:
        return self.client.list_members(current_member=True)


class CongressMembersSource(MemberSource):
    """GET /member/congress/{congress}?currentMember=true"""

    def __init__(self, client: CongressAPIClient, congress: int):
        self.client = client
        self.congress = congress
        self.name = f"congress.gov/member/congress/{congress}"

    def fetch(self) -> Iterable[Dict[str, Any]]:
        return self.client.list_members_by_congress(self.congress, current_member=True)


class SyntheticMembersSource(MemberSource):
    """Locally generated roster, one member per seat."""

    name = SYNTHETIC_SOURCE

    def __init__(self, placeholders: PlaceholderGenerator, today: Optional[date] = None):
        self.placeholders = placeholders
        self.today = today

    def fetch(self) -> Iterable[Dict[str, Any]]:
        return generate_roster(self.placeholders, self.today)


def default_sources(
    client: CongressAPIClient,
    placeholders: PlaceholderGenerator,
    congress: Optional[int] = None,
    today: Optional[date] = None,
) -> List[MemberSource]:
    """Current-members listing, then the per-Congress listing, then synthetic."""
    return [
        CurrentMembersSource(client),
        CongressMembersSource(client, congress or current_congress()),
        SyntheticMembersSource(placeholders, today),
    ]


def acquire_members(
    sources: List[MemberSource],
    placeholders: PlaceholderGenerator,
    today: Optional[date] = None,
) -> AcquisitionResult:
    """Try each source in order and return the first success.

    Raises:
        MemberAcquisitionError: If no source produced a usable member
    """
    failures = []

    for source in sources:
        logger.info(f"Acquiring members from {source.name}")
        result = source.acquire(placeholders, today)
        if result.ok:
            logger.info(f"Acquired {len(result.members)} members from {result.source}")
            return result
        failures.append(result)

    raise MemberAcquisitionError(failures)
