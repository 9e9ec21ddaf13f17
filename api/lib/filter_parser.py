"""
Filter parser for the Argus members API

Parses API Gateway query parameters into MemberFilters for the query builder.
"""

from typing import Dict, Any, Optional
import logging

from api.lib.member_query import MemberFilters

logger = logging.getLogger(__name__)

FILTER_PARAMS = ('party', 'state', 'chamber', 'search')


def parse_query_params(event: Dict[str, Any]) -> Dict[str, str]:
    """
    Extract query parameters from an API Gateway event.

    Blank values are dropped so ``?party=&state=CA`` behaves like ``?state=CA``.

    Args:
        event: API Gateway event dict

    Returns:
        Dict of non-empty, stripped query parameters
    """
    query_params = event.get('queryStringParameters') or {}

    parsed = {}
    for key, value in query_params.items():
        if value is None:
            continue
        value = str(value).strip()
        if value:
            parsed[key] = value

    return parsed


def extract_filter_params(query_params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Keep only the member filter parameters.

    Args:
        query_params: All query parameters

    Returns:
        Dict with only filter parameters
    """
    ignored = [k for k in query_params if k not in FILTER_PARAMS]
    if ignored:
        logger.warning(f"Ignoring unsupported query parameters: {ignored}")

    return {
        k: v for k, v in query_params.items()
        if k in FILTER_PARAMS
    }


def parse_member_filters(event: Dict[str, Any]) -> MemberFilters:
    """
    Build MemberFilters from an API Gateway event.

    Example:
        ?party=D&state=California&search=smith
        → MemberFilters(party='D', state='California', chamber=None, search='smith')
    """
    params = extract_filter_params(parse_query_params(event))
    return MemberFilters(**params)


def get_path_param(event: Dict[str, Any], name: str) -> Optional[str]:
    """Read a path parameter, None when absent or blank."""
    path_params = event.get('pathParameters') or {}
    value = path_params.get(name)
    if value is None:
        return None
    return str(value).strip() or None
