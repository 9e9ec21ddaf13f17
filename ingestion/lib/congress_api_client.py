"""Congress.gov API client with timeout, retry and pagination handling.

This module provides a Python client for the Congress.gov API v3 with:
- Bounded request timeouts
- Exponential backoff retry on rate limiting (HTTP 429)
- Sequential offset pagination with a page cap
- An exception hierarchy the acquisition chain can fall back on

Example usage:
    from ingestion.lib.congress_api_client import CongressAPIClient

    client = CongressAPIClient(api_key="your_key_here")
    members = list(client.list_members())
    member = client.get_member("P000197")
"""

import logging
import os
from typing import Any, Dict, Generator, Optional

import requests
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)
from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()

logger = logging.getLogger(__name__)

# Congress.gov API defaults
DEFAULT_API_BASE_URL = "https://api.congress.gov/v3"
DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_PAGE_SIZE = 250  # Congress.gov API max
DEFAULT_MAX_PAGES = 10


class CongressAPIError(Exception):
    """Base exception for Congress API errors."""

    pass


class CongressAPIRateLimitError(CongressAPIError):
    """Raised when API rate limit is exceeded (HTTP 429)."""

    pass


class CongressAPINotFoundError(CongressAPIError):
    """Raised when resource not found (HTTP 404)."""

    pass


class CongressAPIUnavailableError(CongressAPIError):
    """Raised on connection failures and timeouts."""

    pass


class CongressAPIClient:
    """Client for Congress.gov API v3.

    Attributes:
        api_key: Congress.gov API key
        base_url: API base URL (default: https://api.congress.gov/v3)
        timeout: Request timeout in seconds (default: 10)
        page_size: Items requested per page (default: 250)
        max_pages: Safety bound on pages fetched per listing (default: 10)

    Example:
        >>> client = CongressAPIClient(api_key=os.environ["CONGRESS_API_KEY"])
        >>> member = client.get_member("P000197")
        >>> print(member["member"]["directOrderName"])
        Nancy Pelosi
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = DEFAULT_MAX_PAGES,
    ):
        """Initialize Congress API client.

        Args:
            api_key: Congress.gov API key (defaults to CONGRESS_API_KEY env var)
            base_url: API base URL (defaults to https://api.congress.gov/v3)
            timeout: Request timeout in seconds
            page_size: Items per page for list endpoints
            max_pages: Max pages fetched by a single listing

        Raises:
            ValueError: If API key is not provided and not in environment
        """
        self.api_key = api_key or os.environ.get("CONGRESS_API_KEY")
        if not self.api_key:
            raise ValueError(
                "Congress API key required. Provide via api_key parameter or "
                "CONGRESS_API_KEY environment variable."
            )

        self.base_url = base_url or os.environ.get(
            "CONGRESS_API_BASE_URL", DEFAULT_API_BASE_URL
        )
        self.timeout = timeout
        self.page_size = page_size
        self.max_pages = max_pages

        logger.info(
            f"Initialized CongressAPIClient: base_url={self.base_url}, "
            f"timeout={self.timeout}s, max_pages={self.max_pages}"
        )

    @retry(
        retry=retry_if_exception_type(CongressAPIRateLimitError),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        stop=stop_after_attempt(3),
        reraise=True,
    )
    def _make_request(
        self, endpoint: str, params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Make HTTP GET request to Congress.gov API.

        Only rate-limit responses are retried. Timeouts and connection errors
        surface immediately so the caller can move to its next data source.

        Args:
            endpoint: API endpoint path (e.g., "/member/P000197")
            params: Optional query parameters

        Returns:
            Parsed JSON response as dict

        Raises:
            CongressAPIRateLimitError: If rate limit exceeded (HTTP 429)
            CongressAPINotFoundError: If resource not found (HTTP 404)
            CongressAPIUnavailableError: On timeout or connection failure
            CongressAPIError: For other API errors and malformed bodies
        """
        url = f"{self.base_url}{endpoint}"
        params = dict(params or {})
        params["format"] = "json"
        params["api_key"] = self.api_key

        # Log request (without API key)
        safe_params = {k: v for k, v in params.items() if k != "api_key"}
        logger.debug(f"GET {url} params={safe_params}")

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            if e.response.status_code == 429:
                logger.error(f"Rate limit exceeded: {url}")
                raise CongressAPIRateLimitError(f"Rate limit exceeded: {url}") from e
            elif e.response.status_code == 404:
                logger.warning(f"Resource not found: {url}")
                raise CongressAPINotFoundError(f"Resource not found: {url}") from e
            else:
                logger.error(f"API error {e.response.status_code}: {url}")
                raise CongressAPIError(
                    f"API error {e.response.status_code}: {url}"
                ) from e
        except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as e:
            logger.error(f"Congress API unreachable: {e}")
            raise CongressAPIUnavailableError(f"Congress API unreachable: {url}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise CongressAPIError(f"Request failed: {url}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON response: {e}")
            raise CongressAPIError(f"Invalid JSON response: {e}") from e

        if not isinstance(data, dict):
            raise CongressAPIError(f"Unexpected payload type: {type(data).__name__}")

        return data

    def _paginate(
        self,
        endpoint: str,
        list_key: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Generator[Dict[str, Any], None, None]:
        """Paginate through a list endpoint.

        Pages are fetched one after another. Iteration stops on an empty page,
        when the response carries no ``pagination.next`` link, or after
        ``max_pages`` pages.

        Args:
            endpoint: API endpoint path (e.g., "/member")
            list_key: Response key holding the page items (e.g., "members")
            params: Optional query parameters

        Yields:
            Individual items from the API response

        Raises:
            CongressAPIError: If a page lacks ``list_key``
        """
        params = dict(params or {})
        offset = 0

        for page_number in range(1, self.max_pages + 1):
            params["offset"] = offset
            params["limit"] = self.page_size

            response = self._make_request(endpoint, params)

            if list_key not in response:
                raise CongressAPIError(
                    f"Malformed page from {endpoint}: missing '{list_key}' "
                    f"(keys: {sorted(response.keys())})"
                )

            items = response[list_key] or []
            logger.debug(f"{endpoint} page {page_number}: {len(items)} items")
            if not items:
                break

            yield from items

            pagination = response.get("pagination") or {}
            if not pagination.get("next"):
                break

            offset += self.page_size
        else:
            logger.warning(
                f"Stopped paginating {endpoint} after {self.max_pages} pages; "
                f"results may be incomplete"
            )

    # ==========================================================================
    # Member Endpoints
    # ==========================================================================

    def get_member(self, bioguide_id: str) -> Dict[str, Any]:
        """Get member details by bioguide ID.

        Args:
            bioguide_id: Bioguide ID (e.g., "P000197")

        Returns:
            Member data dict (includes member info, terms, party history)
        """
        endpoint = f"/member/{bioguide_id}"
        return self._make_request(endpoint)

    def list_members(
        self, current_member: bool = True
    ) -> Generator[Dict[str, Any], None, None]:
        """List members across all Congresses.

        Args:
            current_member: Only members currently serving

        Yields:
            Member summary dicts
        """
        params = {"currentMember": "true"} if current_member else {}
        yield from self._paginate("/member", "members", params)

    def list_members_by_congress(
        self, congress: int, current_member: bool = True
    ) -> Generator[Dict[str, Any], None, None]:
        """List members of a single Congress.

        Args:
            congress: Congress number (e.g., 119)
            current_member: Only members currently serving

        Yields:
            Member summary dicts
        """
        params = {"currentMember": "true"} if current_member else {}
        yield from self._paginate(f"/member/congress/{congress}", "members", params)
