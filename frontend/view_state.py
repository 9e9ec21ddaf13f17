"""
UI state for the member directory page.

The page owns one FilterState. Every change goes through the SearchDebouncer:
free-text edits wait for a short idle period, dropdown changes go out at once.
"""

import time
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Optional

SEARCH_DEBOUNCE_SECONDS = 0.5

PARTY_OPTIONS = {"": "All Parties", "D": "Democrat", "R": "Republican", "I": "Independent"}
CHAMBER_OPTIONS = {"": "All Chambers", "House": "House", "Senate": "Senate"}


@dataclass(frozen=True)
class FilterState:
    """Search text and selected filters; empty string means "any"."""

    search: str = ""
    party: str = ""
    state: str = ""
    chamber: str = ""

    def to_query_params(self) -> Dict[str, str]:
        params = {
            "party": self.party,
            "state": self.state,
            "search": self.search.strip(),
            "chamber": self.chamber,
        }
        return {k: v for k, v in params.items() if v}

    def with_changes(self, **changes) -> "FilterState":
        return replace(self, **changes)


class SearchDebouncer:
    """Collapse bursts of filter changes into one request.

    submit() records the newest state and when it becomes due; ready() hands
    it out once that time has passed. A newer submit replaces the pending
    state and restarts the wait.
    """

    def __init__(
        self,
        delay: float = SEARCH_DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.delay = delay
        self.clock = clock
        self._last_sent: Optional[FilterState] = None
        self._pending: Optional[FilterState] = None
        self._due_at = 0.0

    def delay_for(self, state: FilterState) -> float:
        previous = self._pending or self._last_sent
        search_changed = previous is None or previous.search != state.search
        return self.delay if search_changed and state.search.strip() else 0.0

    def submit(self, state: FilterState) -> float:
        """Queue a state; returns seconds until it is due (0 when unchanged)."""
        if self._pending is None and state == self._last_sent:
            return 0.0
        if state == self._pending:
            return max(0.0, self._due_at - self.clock())

        wait = self.delay_for(state)
        self._pending = state
        self._due_at = self.clock() + wait
        return wait

    def ready(self) -> Optional[FilterState]:
        """The pending state once its wait has elapsed, else None."""
        if self._pending is None or self.clock() < self._due_at:
            return None
        state, self._pending = self._pending, None
        self._last_sent = state
        return state

    def failed(self, state: FilterState):
        """Forget a state whose fetch failed so resubmitting it fetches again."""
        if self._last_sent == state:
            self._last_sent = None


def member_subtitle(member: Dict[str, Any]) -> str:
    """'Representative • CA-12' for House members, 'Senator • TX' otherwise."""
    location = member.get("state", "")
    if member.get("chamber") == "House" and member.get("district"):
        location = f"{location}-{member['district']}"
    return f"{member.get('title', '')} • {location}"
