"""
Response formatting utilities for the Argus members API

Provides consistent JSON response structure with CORS headers.
"""

from typing import Dict, Any, Optional, List, Union
import json
import math
import logging

from pydantic import BaseModel

from api.lib.response_models import ErrorResponse

logger = logging.getLogger(__name__)


def clean_nan_values(data: Union[Dict, List, Any]) -> Union[Dict, List, Any]:
    """
    Recursively clean NaN/Inf values from data structures.
    """
    if isinstance(data, dict):
        return {k: clean_nan_values(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [clean_nan_values(item) for item in data]
    elif isinstance(data, float) and (math.isnan(data) or math.isinf(data)):
        return None
    return data


class NaNToNoneEncoder(json.JSONEncoder):
    """Encodes NaN/Inf floats as null for valid JSON output."""

    def encode(self, obj):
        return super().encode(clean_nan_values(obj))


def success_response(data: Any, status_code: int = 200) -> Dict[str, Any]:
    """
    Build a success response.

    Args:
        data: Response body (dict or Pydantic model)
        status_code: HTTP status code (default 200)

    Returns:
        API Gateway response dict with CORS headers

    Example:
        body = MembersResponse(members=records, total=len(records), source="synthetic")
        success_response(body)
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True)

    return {
        "statusCode": status_code,
        "headers": _get_cors_headers(),
        "body": json.dumps(data, cls=NaNToNoneEncoder, default=str, allow_nan=False),
    }


def error_response(
    error: str,
    message: str,
    status_code: int = 500,
    details: Optional[Any] = None,
    include_details: bool = True,
) -> Dict[str, Any]:
    """
    Build an error response with body ``{error, message}``.

    Args:
        error: Error kind (e.g. 'ConfigurationError')
        message: Safe, human-readable message
        status_code: HTTP status code (400, 404, 500, etc.)
        details: Optional raw error detail
        include_details: False in production, so raw detail never leaks

    Returns:
        API Gateway response dict

    Example:
        error_response(
            "NotFound",
            "Member not found",
            status_code=404,
            details="C999999",
        )
    """
    body = ErrorResponse(
        error=error,
        message=message,
        details=str(details) if details and include_details else None,
    )

    return {
        "statusCode": status_code,
        "headers": _get_cors_headers(),
        "body": json.dumps(
            body.model_dump(mode="json", exclude_none=True),
            cls=NaNToNoneEncoder,
            default=str,
            allow_nan=False,
        ),
    }


def _get_cors_headers() -> Dict[str, str]:
    """
    Get CORS headers for API responses.

    Returns:
        Dict of CORS headers
    """
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
        "Content-Type": "application/json",
        "Cache-Control": "no-store",
    }


def add_cors_headers(response: Dict[str, Any]) -> Dict[str, Any]:
    """
    Add CORS headers to existing response dict.

    Args:
        response: API Gateway response dict

    Returns:
        Response dict with CORS headers added
    """
    if "headers" not in response:
        response["headers"] = {}

    response["headers"].update(_get_cors_headers())
    return response
