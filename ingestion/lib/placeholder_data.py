"""Placeholder values for fields with no real data source yet.

Campaign finance totals and recent votes are not integrated with a provider,
so every MemberRecord gets fabricated values from a PlaceholderGenerator.
The synthetic roster draws names, parties and tenure from the same
interface, which lets tests swap in a deterministic stub for all of it.

Example:
    from ingestion.lib.placeholder_data import RandomPlaceholderGenerator

    placeholders = RandomPlaceholderGenerator(seed=7)
    placeholders.campaign_finance()   # {'totalRaised': 1834411}
"""

import random
from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, List, Optional

MIN_TOTAL_RAISED = 500_000
MAX_TOTAL_RAISED = 3_500_000
MAX_SYNTHETIC_TENURE_YEARS = 30

FIRST_NAMES = [
    "James", "Mary", "Robert", "Patricia", "John", "Jennifer", "Michael",
    "Linda", "David", "Elizabeth", "William", "Barbara", "Richard", "Susan",
    "Joseph", "Jessica", "Thomas", "Sarah", "Carlos", "Karen", "Daniel",
    "Maria", "Andre", "Nancy", "Kevin", "Grace", "Jamal", "Priya",
]

LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller",
    "Davis", "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez",
    "Wilson", "Anderson", "Thomas", "Taylor", "Moore", "Jackson", "Martin",
    "Lee", "Perez", "Thompson", "White", "Harris", "Clark", "Nguyen", "Patel",
]

# Weights keep the synthetic chamber roughly split with a few independents
PARTY_WEIGHTS = [
    ("Democratic", 48),
    ("Republican", 49),
    ("Independent", 3),
]


class PlaceholderGenerator(ABC):
    """Source of every fabricated value in a response."""

    @abstractmethod
    def campaign_finance(self) -> Dict[str, Any]:
        """Return a ``campaignFinance`` payload."""

    @abstractmethod
    def recent_votes(self, today: date) -> List[Dict[str, Any]]:
        """Return an ordered list of ``{title, vote, date}`` entries."""

    @abstractmethod
    def full_name(self) -> str:
        """Return a display name in Congress.gov "Last, First" form."""

    @abstractmethod
    def party_name(self) -> str:
        """Return a free-text party name."""

    @abstractmethod
    def term_start_year(self, current_year: int) -> int:
        """Return a plausible start year for a sitting member."""


class RandomPlaceholderGenerator(PlaceholderGenerator):
    """PlaceholderGenerator backed by a private ``random.Random``.

    Each request builds its own instance, so no random state is shared
    between requests.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def campaign_finance(self) -> Dict[str, Any]:
        return {"totalRaised": self._rng.randrange(MIN_TOTAL_RAISED, MAX_TOTAL_RAISED)}

    def recent_votes(self, today: date) -> List[Dict[str, Any]]:
        return [
            {
                "title": "Recent Vote",
                "vote": "Yes" if self._rng.random() > 0.5 else "No",
                "date": today.isoformat(),
            }
        ]

    def full_name(self) -> str:
        return f"{self._rng.choice(LAST_NAMES)}, {self._rng.choice(FIRST_NAMES)}"

    def party_name(self) -> str:
        names = [name for name, _ in PARTY_WEIGHTS]
        weights = [weight for _, weight in PARTY_WEIGHTS]
        return self._rng.choices(names, weights=weights, k=1)[0]

    def term_start_year(self, current_year: int) -> int:
        return current_year - self._rng.randint(0, MAX_SYNTHETIC_TENURE_YEARS)
