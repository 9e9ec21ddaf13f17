"""
Argus - Congress member directory

Streamlit page that lists current members of Congress with search and
filters, backed by the members API.

Usage:
    python3 scripts/local_api_server.py &
    streamlit run frontend/app.py
"""
import sys
import time
from pathlib import Path

import streamlit as st

# Make the frontend package importable under `streamlit run`
sys.path.insert(0, str(Path(__file__).parent.parent))

from frontend.api_client import MembersAPIError, fetch_members  # noqa: E402
from frontend.stats import format_money, summarize_members  # noqa: E402
from frontend.view_state import (  # noqa: E402
    CHAMBER_OPTIONS,
    PARTY_OPTIONS,
    FilterState,
    SearchDebouncer,
    member_subtitle,
)
from ingestion.lib.reference_data import STATE_NAMES  # noqa: E402


# ============================================================================
# Page Configuration
# ============================================================================

st.set_page_config(
    page_title="Argus",
    page_icon="🏛️",
    layout="wide",
)

PARTY_COLORS = {"D": "blue", "R": "red", "I": "violet"}


# ============================================================================
# Session State
# ============================================================================

def get_session():
    """Per-browser-session objects, created once."""
    if "debouncer" not in st.session_state:
        st.session_state.debouncer = SearchDebouncer()
        st.session_state.data = None
        st.session_state.error = None
    return st.session_state


def read_filters() -> FilterState:
    """Render the filter controls and return the resulting state."""
    col1, col2, col3, col4 = st.columns([3, 1, 1, 1])

    with col1:
        search = st.text_input("Search", placeholder="Search by name...")
    with col2:
        party = st.selectbox(
            "Party", list(PARTY_OPTIONS), format_func=PARTY_OPTIONS.get
        )
    with col3:
        state_codes = [""] + sorted(code for code in STATE_NAMES)
        state = st.selectbox(
            "State", state_codes,
            format_func=lambda code: STATE_NAMES.get(code, "All States"),
        )
    with col4:
        chamber = st.selectbox(
            "Chamber", list(CHAMBER_OPTIONS), format_func=CHAMBER_OPTIONS.get
        )

    return FilterState(search=search, party=party, state=state, chamber=chamber)


def refresh(session, filters: FilterState):
    """Debounce, then fetch the due filter state."""
    wait = session.debouncer.submit(filters)
    if wait > 0:
        # A new interaction during this sleep reruns the script and supersedes it
        time.sleep(wait)

    due = session.debouncer.ready()
    if due is None:
        return

    # A newer interaction stops this run at the next Streamlit call (the
    # spinner exit), so a superseded response is never stored
    try:
        with st.spinner("Loading members..."):
            data = fetch_members(due)
    except MembersAPIError as e:
        session.debouncer.failed(due)
        session.error = f"Failed to load members. Please try again later. ({e})"
        return

    session.data = data
    session.error = None


# ============================================================================
# Rendering
# ============================================================================

def render_stats(members):
    stats = summarize_members(members)

    cols = st.columns(5)
    cols[0].metric("Members", stats["total"])
    cols[1].metric("House", stats["house"])
    cols[2].metric("Senate", stats["senate"])
    cols[3].metric(
        "D / R / I",
        f"{stats['democrats']} / {stats['republicans']} / {stats['independents']}",
    )
    cols[4].metric("Avg. Raised", format_money(stats["avgRaised"]))


def render_member_card(member):
    with st.container(border=True):
        left, right = st.columns([4, 1])
        with left:
            party = member.get("party", "I")
            st.markdown(f"**{member.get('name')}** :{PARTY_COLORS.get(party, 'gray')}[({party})]")
            st.caption(member_subtitle(member))
            st.write(f"{member.get('yearsInOffice', 0)} years in office")
        with right:
            if member.get("depiction"):
                st.image(member["depiction"], width=80)

        finance = member.get("campaignFinance") or {}
        st.write(f"Raised: {format_money(finance.get('totalRaised', 0))}")

        for vote in member.get("recentVotes") or []:
            st.caption(f"{vote['date']} · {vote['title']}: {vote['vote']}")


def main():
    st.title("🏛️ Argus")
    st.markdown("Real-time data on US Congress • Non-partisan information")

    session = get_session()
    filters = read_filters()
    refresh(session, filters)

    if session.error:
        st.error(session.error)
        # Clicking reruns the page, which resubmits the failed filters
        st.button("Retry")

    data = session.data
    if not data:
        st.info("No member data loaded yet.")
        return

    members = data.get("members", [])
    if data.get("source") == "synthetic":
        st.warning("Congress.gov is unavailable; showing placeholder members.")

    render_stats(members)
    st.divider()

    if not members:
        st.info("No members match these filters.")
        return

    cols = st.columns(3)
    for i, member in enumerate(members):
        with cols[i % 3]:
            render_member_card(member)

    st.caption(f"Updated {data.get('timestamp', '')} · source: {data.get('source', '')}")


# ============================================================================
# Run Application
# ============================================================================

if __name__ == "__main__":
    main()
