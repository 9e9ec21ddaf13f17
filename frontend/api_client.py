"""
Client for the members API, used by the Streamlit page.

Example:
    from frontend.api_client import fetch_members
    from frontend.view_state import FilterState

    data = fetch_members(FilterState(state="CA", chamber="House"))
    data["total"]
"""

import logging
import os
from typing import Any, Dict, Optional

import requests
from dotenv import load_dotenv

from frontend.view_state import FilterState

# Load environment variables from .env file if present
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_TIMEOUT_SECONDS = 15


class MembersAPIError(Exception):
    """Raised when the members API cannot be reached or returns an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def api_base_url() -> str:
    return os.environ.get("ARGUS_API_URL", DEFAULT_API_URL).rstrip("/")


def fetch_members(
    filters: FilterState,
    base_url: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> Dict[str, Any]:
    """GET /v1/members with the current filters."""
    return _get(f"{base_url or api_base_url()}/v1/members", filters.to_query_params(), timeout)


def fetch_member_details(
    bioguide_id: str,
    base_url: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> Dict[str, Any]:
    """GET /v1/members/{bioguide_id}."""
    return _get(f"{base_url or api_base_url()}/v1/members/{bioguide_id}", None, timeout)


def _get(url: str, params: Optional[Dict[str, str]], timeout: float) -> Dict[str, Any]:
    logger.debug(f"GET {url} params={params}")
    try:
        response = requests.get(url, params=params, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise MembersAPIError(f"Members API unreachable: {e}") from e

    if not response.ok:
        message = f"Members API returned {response.status_code}"
        try:
            message = response.json().get("message", message)
        except ValueError:
            pass
        raise MembersAPIError(message, status_code=response.status_code)

    try:
        return response.json()
    except ValueError as e:
        raise MembersAPIError(f"Invalid JSON from members API: {e}") from e
