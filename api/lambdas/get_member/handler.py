"""
Lambda handler: GET /v1/members/{bioguide_id}

Get a single member of Congress, normalized like the list endpoint.
"""

import logging
from datetime import date

from api.lib import (
    ConfigurationError,
    error_response,
    get_path_param,
    load_settings,
    success_response,
)
from api.lib.response_models import MemberDetailResponse
from ingestion.lib.congress_api_client import (
    CongressAPIClient,
    CongressAPIError,
    CongressAPINotFoundError,
)
from ingestion.lib.congress_schema_mappers import map_member_to_record
from ingestion.lib.placeholder_data import RandomPlaceholderGenerator

logger = logging.getLogger()
logger.setLevel(logging.INFO)

SOURCE = "congress.gov/member/{bioguide_id}"


def lambda_handler(event, context, placeholders=None, client=None):
    """
    GET /v1/members/{bioguide_id}

    Path parameters:
    - bioguide_id: Bioguide ID (e.g., 'P000197')

    Returns {member, timestamp, source}. There is no synthetic fallback for
    a single member: an unreachable upstream is reported as 502.
    """
    include_details = True
    try:
        settings = load_settings()
        logger.setLevel(settings.log_level)
        include_details = not settings.is_production

        bioguide_id = get_path_param(event or {}, 'bioguide_id')
        if not bioguide_id:
            return error_response(
                "BadRequest", "bioguide_id is required", status_code=400
            )

        api_key = settings.require_api_key()
        logger.info(f"Fetching member {bioguide_id}")

        if client is None:
            client = CongressAPIClient(
                api_key=api_key,
                base_url=settings.congress_api_base_url,
                timeout=settings.congress_api_timeout,
            )

        raw = client.get_member(bioguide_id)
        record = map_member_to_record(raw, placeholders or RandomPlaceholderGenerator(), date.today())
        if record is None:
            return error_response(
                "NotFound",
                f"Member {bioguide_id} has no current term data",
                status_code=404,
            )

        return success_response(
            MemberDetailResponse(
                member=record,
                source=SOURCE.format(bioguide_id=bioguide_id),
            )
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

    except CongressAPINotFoundError:
        return error_response(
            "NotFound", f"Member {bioguide_id} not found", status_code=404
        )

    except CongressAPIError as e:
        logger.error(f"Congress API unavailable for member lookup: {e}")
        return error_response(
            "UpstreamUnavailable",
            "Congress.gov is unavailable, try again later",
            status_code=502,
            details=str(e),
            include_details=include_details,
        )

    except Exception as e:
        logger.error(f"Error fetching member: {e}", exc_info=True)
        return error_response(
            "InternalServerError",
            "Failed to retrieve member",
            status_code=500,
            details=str(e),
            include_details=include_details,
        )
