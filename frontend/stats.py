"""
Aggregate statistics for the stat tiles above the member cards.
"""

from typing import Any, Dict, List

import pandas as pd


def summarize_members(members: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Counts by chamber and party plus average funds raised.

    Members without a finance figure count as zero raised.
    """
    if not members:
        return {
            "total": 0,
            "house": 0,
            "senate": 0,
            "democrats": 0,
            "republicans": 0,
            "independents": 0,
            "avgRaised": 0.0,
        }

    df = pd.json_normalize(members)
    chamber = df.get("chamber", pd.Series(dtype=object))
    party = df.get("party", pd.Series(dtype=object))

    if "campaignFinance.totalRaised" in df.columns:
        raised = pd.to_numeric(df["campaignFinance.totalRaised"], errors="coerce").fillna(0)
    else:
        raised = pd.Series(0, index=df.index)

    return {
        "total": len(df),
        "house": int((chamber == "House").sum()),
        "senate": int((chamber == "Senate").sum()),
        "democrats": int((party == "D").sum()),
        "republicans": int((party == "R").sum()),
        "independents": int((party == "I").sum()),
        "avgRaised": float(raised.mean()),
    }


def format_money(amount: float) -> str:
    """$1.2M / $850K / $900 style labels."""
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.1f}M"
    if amount >= 1_000:
        return f"${amount / 1_000:.0f}K"
    return f"${amount:,.0f}"
