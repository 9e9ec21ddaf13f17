"""Shared API library initialization."""

from .response_formatter import (
    success_response,
    error_response,
    add_cors_headers,
    clean_nan_values,
)
from .filter_parser import (
    parse_query_params,
    extract_filter_params,
    parse_member_filters,
    get_path_param,
)
from .member_query import MemberFilters, MemberQueryBuilder, sort_members
from .settings import ConfigurationError, Settings, load_settings

__all__ = [
    "success_response",
    "error_response",
    "add_cors_headers",
    "clean_nan_values",
    "parse_query_params",
    "extract_filter_params",
    "parse_member_filters",
    "get_path_param",
    "MemberFilters",
    "MemberQueryBuilder",
    "sort_members",
    "ConfigurationError",
    "Settings",
    "load_settings",
]
