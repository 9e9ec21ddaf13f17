"""
Lambda handler: GET /v1/members

List current members of Congress with optional filters.
"""

import logging
from datetime import date

from api.lib import (
    ConfigurationError,
    MemberQueryBuilder,
    error_response,
    load_settings,
    parse_member_filters,
    success_response,
)
from api.lib.response_models import MembersResponse
from ingestion.lib.congress_api_client import CongressAPIClient
from ingestion.lib.member_sources import (
    MemberAcquisitionError,
    acquire_members,
    default_sources,
)
from ingestion.lib.placeholder_data import RandomPlaceholderGenerator

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def lambda_handler(event, context, placeholders=None, sources=None):
    """
    GET /v1/members

    Query parameters:
    - party: Filter by party ('D', 'R', 'I')
    - state: Filter by state code or name (e.g., 'CA' or 'California')
    - chamber: Filter by chamber ('House', 'Senate')
    - search: Case-insensitive substring of the member name

    Returns {members, total, timestamp, source}. When Congress.gov is
    unavailable the members come from the synthetic roster and ``source``
    says so.

    ``placeholders`` and ``sources`` are injection points for tests.
    """
    include_details = True
    try:
        settings = load_settings()
        logger.setLevel(settings.log_level)
        include_details = not settings.is_production

        api_key = settings.require_api_key()
        filters = parse_member_filters(event or {})
        logger.info(f"Fetching members: filters={filters.active()}")

        placeholders = placeholders or RandomPlaceholderGenerator()
        today = date.today()

        if sources is None:
            client = CongressAPIClient(
                api_key=api_key,
                base_url=settings.congress_api_base_url,
                timeout=settings.congress_api_timeout,
                max_pages=settings.congress_api_max_pages,
            )
            sources = default_sources(client, placeholders, today=today)

        result = acquire_members(sources, placeholders, today)
        members = MemberQueryBuilder().query(result.members, filters)

        logger.info(
            f"Returning {len(members)} of {len(result.members)} members from {result.source}"
        )
        return success_response(
            MembersResponse(members=members, total=len(members), source=result.source)
        )

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return error_response(
            "ConfigurationError",
            "The member directory is not configured",
            status_code=500,
            details=str(e),
            include_details=include_details,
        )

    except MemberAcquisitionError as e:
        logger.error(f"Member acquisition failed: {e}")
        return error_response(
            "MemberAcquisitionError",
            "Failed to retrieve Congress members",
            status_code=500,
            details=str(e),
            include_details=include_details,
        )

    except Exception as e:
        logger.error(f"Error fetching Congress members: {e}", exc_info=True)
        return error_response(
            "InternalServerError",
            "Failed to retrieve Congress members",
            status_code=500,
            details=str(e),
            include_details=include_details,
        )
